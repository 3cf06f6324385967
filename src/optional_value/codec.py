"""JSON codec used by optional values for their wrapped type.

pydantic is the external codec: a ``TypeAdapter`` is built once per value
type and reused by every container of that type.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from loguru import logger
from pydantic import TypeAdapter

from .config import OptionalValueConfig
from .types import JSONInput


# repr is part of the key: equal unions in a different order get their own adapter
@lru_cache(maxsize=None)
def _cached_adapter(tp: Any, type_repr: str) -> TypeAdapter[Any]:
    logger.debug(f"Building JSON type adapter for {tp!r}")
    return TypeAdapter(tp)


class JsonCodec:
    """Encode and decode single JSON values through pydantic."""

    @staticmethod
    def adapter(tp: Any) -> TypeAdapter[Any]:
        """Get the type adapter for ``tp``.

        Adapters are cached for hashable types; unhashable annotations get
        a fresh adapter on each call.

        Args:
            tp: Type to encode/decode

        Returns:
            pydantic TypeAdapter for the type
        """
        try:
            return _cached_adapter(tp, repr(tp))
        except TypeError:
            return TypeAdapter(tp)

    @staticmethod
    def is_null(data: JSONInput) -> bool:
        """Check whether raw JSON input denotes absence.

        Zero-length input, whitespace only input and the ``null`` literal
        all count as absent.

        Args:
            data: Raw JSON text or bytes

        Returns:
            True if the input carries no value
        """
        if isinstance(data, str):
            text = data.strip(OptionalValueConfig.JSON_WHITESPACE.decode())
            return not text or text == OptionalValueConfig.NULL_LITERAL.decode()

        raw = bytes(data).strip(OptionalValueConfig.JSON_WHITESPACE)
        return not raw or raw == OptionalValueConfig.NULL_LITERAL

    @classmethod
    def encode(cls, value: Any, tp: Any) -> bytes:
        """Encode ``value`` as compact JSON using the codec for ``tp``."""
        return cls.adapter(tp).dump_json(value)

    @classmethod
    def decode(cls, data: JSONInput, tp: Any) -> Any:
        """Decode raw JSON as ``tp`` in strict mode.

        Values of the wrong JSON type are rejected rather than coerced
        (``"42"`` is not an ``int``, ``"yes"`` is not a ``bool``).

        Args:
            data: Raw JSON text or bytes
            tp: Expected type

        Returns:
            Decoded value

        Raises:
            pydantic.ValidationError: If the input is not valid JSON for ``tp``
        """
        return cls.adapter(tp).validate_json(data, strict=True)
