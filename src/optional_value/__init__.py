"""Optional value container with JSON null semantics.

Public API exports for library usage.
"""

from loguru import logger

from .codec import JsonCodec
from .config import OptionalValueConfig
from .exceptions import OptionalValueError, ValueAbsentError
from .optional import OptionalValue
from .types import UNSET, Unset
from .zero import zero_value

# Library logging stays silent until the application opts in
logger.disable(OptionalValueConfig.LOGGER_NAME)

__all__ = [
    # Container
    "OptionalValue",
    # Codec
    "JsonCodec",
    "zero_value",
    # Configuration
    "OptionalValueConfig",
    # Exceptions
    "OptionalValueError",
    "ValueAbsentError",
    # Sentinels
    "UNSET",
    "Unset",
]
