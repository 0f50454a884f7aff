"""
JSON codec backed by pydantic

Encodes any value pydantic can dump (models, dataclasses, sets, datetimes,
decimals, ...) and decodes against the caller's target type with a cached
TypeAdapter, so a type mismatch fails loudly instead of returning raw JSON.
"""

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError
from pydantic_core import PydanticSerializationError, to_json

from core.exceptions import DeserializationError, SerializationError
from core.interfaces.codec import BaseCodec

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=256)
def _adapter(out: Any) -> TypeAdapter:
    return TypeAdapter(out)


class JsonCodec(BaseCodec):
    """
    JSON codec

    Features:
    - Compact JSON via pydantic_core.to_json
    - Typed decoding via TypeAdapter.validate_json
    - Strict validation by default (no "1" -> 1 coercion)
    """

    def __init__(self, strict: bool = True):
        """
        Initialize codec

        Args:
            strict: Use pydantic strict mode when decoding (default True)
        """
        self.strict = strict

    def serialize(self, value: Any) -> str:
        try:
            return to_json(value).decode("utf-8")
        except (PydanticSerializationError, ValueError, TypeError) as e:
            raise SerializationError(
                f"Cannot serialize value of type {type(value).__name__}: {e}",
                {"type": type(value).__name__},
            ) from e

    def deserialize(self, text: str | bytes, out: type[T]) -> T:
        try:
            adapter = _adapter(out)
        except (PydanticSchemaGenerationError, TypeError) as e:
            raise DeserializationError(
                f"Cannot decode to unsupported type {out!r}: {e}", {"type": repr(out)}
            ) from e

        try:
            return adapter.validate_json(text, strict=self.strict)
        except ValidationError as e:
            logger.debug(f"Decode to {out!r} failed: {e.error_count()} error(s)")
            raise DeserializationError(
                f"Stored value does not decode to {out!r}: {e}", {"type": repr(out)}
            ) from e
