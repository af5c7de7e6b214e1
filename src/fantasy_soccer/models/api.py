"""
API response envelope.
"""

from typing import Any, Generic, TypeVar

from pydantic import SerializerFunctionWrapHandler, model_serializer

from fantasy_soccer.models.base import CamelModel

T = TypeVar("T")


class ApiResponse(CamelModel, Generic[T]):
    """Envelope wrapping every JSON response of the API."""

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # Only the envelope keys are dropped; nulls inside data are kept
        return {
            key: value
            for key, value in handler(self).items()
            if key == "success" or value is not None
        }
