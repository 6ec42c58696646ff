import typing as t

from django.http import HttpRequest
from django.utils import translation
from ninja_jwt.authentication import JWTAuth


class I18nJWTAuth(JWTAuth):
    """JWT authentication that activates user's preferred language.

    The language is activated right after the token is validated, before the
    handler runs, so error messages come back in the caller's language.

    Usage:
        @route.get("/endpoint", auth=I18nJWTAuth())
        def my_endpoint(request):
            return {"message": str(_("Hello!"))}
    """

    def authenticate(self, request: HttpRequest, token: str) -> t.Any:
        """Authenticate the request and activate user's language preference.

        Raises:
            AuthenticationFailed: If authentication fails
            InvalidToken: If the token is invalid
        """
        user = super().authenticate(request, token)

        if user and hasattr(user, "language"):
            user_language = getattr(user, "language", None)
            if user_language:
                translation.activate(user_language)
                request.LANGUAGE_CODE = user_language

        return user
