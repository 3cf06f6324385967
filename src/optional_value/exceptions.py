"""Custom exceptions for optional values.

Decode failures are not wrapped here: they surface as the
``pydantic.ValidationError`` raised by the value type's decoder.
"""


class OptionalValueError(Exception):
    """Base exception for optional value errors."""

    pass


class ValueAbsentError(OptionalValueError, LookupError):
    """A value was required but the container is empty."""

    def __init__(self, value_type: object) -> None:
        """Initialize ValueAbsentError.

        Args:
            value_type: Type parameter of the empty container
        """
        name = getattr(value_type, "__qualname__", None) or repr(value_type)
        super().__init__(f"No value present in optional {name}")
        self.value_type: object = value_type
