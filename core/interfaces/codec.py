from abc import ABC, abstractmethod
from typing import Any, TypeVar

T = TypeVar("T")


class BaseCodec(ABC):
    """
    Abstract value <-> text boundary used by cache clients

    Implementations:
    - JsonCodec (pydantic-backed JSON)
    """

    @abstractmethod
    def serialize(self, value: Any) -> str:
        """
        Encode a value to text

        Args:
            value: Value to encode

        Returns:
            Encoded text

        Raises:
            SerializationError: If the value cannot be encoded
        """

    @abstractmethod
    def deserialize(self, text: str | bytes, out: type[T]) -> T:
        """
        Decode text to an instance of the requested type

        Args:
            text: Encoded text as read from the store
            out: Target type

        Returns:
            Decoded value

        Raises:
            DeserializationError: If the text does not decode to ``out``
        """
