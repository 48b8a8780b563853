"""Shared / base Pydantic v2 schemas used across the syncboard client."""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

T = TypeVar("T")

RequestMethod = Literal["get", "post", "put", "delete", "patch"]


class BackendModel(BaseModel):
    """Base for every backend shape; unknown fields are kept, not rejected."""

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------

class ApiError(BackendModel):
    """One entry of an error envelope; shapes vary by backend endpoint."""

    status: Any = None
    title: Any = None
    detail: Any = None


class Links(BackendModel):
    first: str | None = None
    last: str | None = None
    next: str | None = None
    prev: str | None = None
    self_: str | None = Field(default=None, alias="self")


def _as_error(entry: Any) -> ApiError:
    if isinstance(entry, dict):
        return ApiError.model_validate(entry)
    return ApiError(detail=entry)


class ApiResponse(BackendModel, Generic[T]):
    """Response envelope returned by every endpoint wrapper.

    A non-2xx reply from the backend arrives here as a normal value, usually
    with ``errors`` populated and ``data`` left as ``None``.  Callers must
    inspect the envelope rather than assume success.
    """

    data: T | None = None
    errors: list[ApiError] | None = None
    links: Links | None = None
    status: int | str | None = None

    @property
    def ok(self) -> bool:
        return not self.errors

    @classmethod
    def from_body(cls, body: Any) -> "ApiResponse[T]":
        """Build an envelope from a body returned by ``ApiClient.fetch``.

        A body carrying ``errors`` always yields an envelope, even when its
        other fields do not match the declared shape.

        Raises:
            pydantic.ValidationError: When a body without ``errors`` does not
                match the declared shape.
        """
        if body is None:
            return cls()
        if not isinstance(body, dict):
            return cls(errors=[ApiError(detail=str(body))])

        try:
            return cls.model_validate(body)
        except ValidationError:
            if "errors" not in body:
                raise

        errors = body["errors"]
        if not isinstance(errors, list):
            errors = [errors]
        return cls.model_construct(
            errors=[_as_error(entry) for entry in errors],
            status=body.get("status"),
        )
