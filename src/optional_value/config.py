"""Configuration for optional values.

Constants used by the JSON hooks are defined here as class variables.
This enables easy modification without changing code throughout the library.
"""

from typing import Final


class OptionalValueConfig:
    """Configuration for optional value encoding and decoding.

    All wire constants are defined here as class variables.
    """

    # Wire representation of an absent value
    NULL_LITERAL: bytes = b"null"

    # Insignificant whitespace around a JSON value (RFC 8259)
    JSON_WHITESPACE: bytes = b" \t\n\r"

    # loguru is disabled for this name on import
    LOGGER_NAME: Final[str] = "optional_value"
