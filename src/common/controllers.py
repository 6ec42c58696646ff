import typing as t

from django.contrib.auth.models import AnonymousUser
from ninja_extra import ControllerBase

from accounts.models import FastivalleUser


class UserAwareController(ControllerBase):
    def maybe_user(self) -> FastivalleUser | AnonymousUser:
        """Get the user for this request."""
        return t.cast(FastivalleUser | AnonymousUser, self.context.request.user)  # type: ignore[union-attr]

    def user(self) -> FastivalleUser:
        """Get the user for this request."""
        return t.cast(FastivalleUser, self.context.request.user)  # type: ignore[union-attr]
