"""Common schemas for the API."""

import typing as t

from ninja import Schema
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class VersionResponse(Schema):
    version: str
    demo: bool = False


class ResponseOk(Schema):
    status: t.Literal["ok"] = "ok"


class CamelSchema(Schema):
    """Schema exchanged with the mobile client in camelCase.

    Routes returning these must be declared with ``by_alias=True``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(Schema):
    success: t.Literal[False] = False
    error: str
