"""Uniform API response envelope.

Handlers wrap an entity or a Page in ApiResponse before serialising it.
The repository layer never sees this type; it only produces the values that
go into ``result`` and raises the error kinds that from_error() translates.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer

from repokit.domain.errors import (
    ConstraintViolationError,
    InvalidArgumentError,
    StoreUnavailableError,
)

T = TypeVar("T")

# Checked in order; first isinstance match wins.  The flag says whether the
# exception text is safe to return to clients.
_ERROR_STATUS: tuple[tuple[type[BaseException], HTTPStatus, bool], ...] = (
    (InvalidArgumentError, HTTPStatus.BAD_REQUEST, True),
    (ConstraintViolationError, HTTPStatus.CONFLICT, True),
    (StoreUnavailableError, HTTPStatus.SERVICE_UNAVAILABLE, True),
    (ValueError, HTTPStatus.BAD_REQUEST, False),  # pydantic ValidationError included
)


class ApiResponse(BaseModel, Generic[T]):
    """{code, message, result} envelope; result is omitted when empty."""

    model_config = ConfigDict(frozen=True)

    code: int
    message: str
    result: T | None = None

    @model_serializer(mode="wrap")
    def _omit_empty_result(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if data.get("result") is None:
            data.pop("result", None)
        return data

    @classmethod
    def success(cls, result: T) -> ApiResponse[T]:
        return cls(code=HTTPStatus.OK.value, message=HTTPStatus.OK.phrase, result=result)

    @classmethod
    def fail(cls, status: HTTPStatus, message: str | None = None) -> ApiResponse[Any]:
        return cls(code=status.value, message=message or status.phrase)

    @classmethod
    def from_error(cls, exc: BaseException) -> ApiResponse[Any]:
        """Translate a repository error kind into a failure envelope.

        Repository error kinds keep their own message.  Other ValueErrors,
        pydantic validation errors included, map to 400 and unrecognised
        exceptions to 500, both with the generic status phrase so that field
        paths and driver messages are not leaked to clients.
        """
        for kind, status, expose in _ERROR_STATUS:
            if isinstance(exc, kind):
                return cls.fail(status, (str(exc) or None) if expose else None)
        return cls.fail(HTTPStatus.INTERNAL_SERVER_ERROR)
