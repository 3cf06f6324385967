"""Optional value container with explicit presence tracking.

``OptionalValue[T]`` holds zero or one value of ``T`` and tells the two
states apart without relying on ``None``. It encodes to JSON as ``null``
when empty and as the plain JSON form of its value otherwise, both on its
own (``marshal_json``/``unmarshal_json``) and as a field of a pydantic
model.

Example:
    class User(BaseModel):
        name: str
        email: OptionalValue[str] = Field(default_factory=OptionalValue[str])

    User(name="John Smith").model_dump_json()
    # '{"name":"John Smith","email":null}'

Instances are not thread-safe: concurrent ``set``/``clear`` on the same
container must be synchronized by the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, Self, TypeVar, override

from loguru import logger
from pydantic_core import core_schema

from .codec import JsonCodec
from .config import OptionalValueConfig
from .exceptions import ValueAbsentError
from .types import UNSET, JSONInput, Unset
from .zero import zero_value

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

T = TypeVar("T")

# Keyed on (class, type, repr): equal unions in a different order stay distinct
_SPECIALIZATIONS: dict[tuple[type, Any, str], type[OptionalValue[Any]]] = {}


def _type_name(tp: Any) -> str:
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp).removeprefix("typing.")


def _restore(origin: type[OptionalValue[Any]], args: tuple[Any, ...], value: Any) -> OptionalValue[Any]:
    cls = origin[args[0]] if args else origin
    if isinstance(value, Unset):
        return cls.empty()
    return cls.from_value(value)


class OptionalValue(Generic[T]):
    """Container for a value that may or may not be present.

    Parameterize before use: ``OptionalValue[str].from_value("x")``. The
    bare class works with ``value_type`` ``Any`` (zero value ``None``).
    """

    __slots__ = ("_value",)

    value_type: ClassVar[Any] = Any
    parameterized_from: ClassVar[type | None] = None

    def __init__(self) -> None:
        """Initialize an empty container."""
        self._value: T | Unset = UNSET

    def __class_getitem__(cls, item: Any) -> Any:
        if isinstance(item, TypeVar):
            return super().__class_getitem__(item)  # type: ignore[misc]
        if cls.value_type is not Any:
            msg = f"{cls.__name__} is already parameterized"
            raise TypeError(msg)

        key = (cls, item, repr(item))
        try:
            specialized = _SPECIALIZATIONS.get(key)
        except TypeError:
            specialized = None  # unhashable type argument, not cached
        if specialized is None:
            specialized = type(
                f"{cls.__name__}[{_type_name(item)}]",
                (cls,),
                {
                    "__slots__": (),
                    "__module__": cls.__module__,
                    "value_type": item,
                    "parameterized_from": cls,
                },
            )
            try:
                _SPECIALIZATIONS[key] = specialized
            except TypeError:
                pass
        return specialized

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_value(cls, value: T) -> Self:
        """Create a container holding ``value``."""
        instance = cls()
        instance._value = value
        return instance

    @classmethod
    def empty(cls) -> Self:
        """Create an empty container."""
        return cls()

    @classmethod
    def from_condition(cls, condition: bool, value: T) -> Self:
        """Create a container holding ``value`` only if ``condition`` is true."""
        if not condition:
            return cls.empty()
        return cls.from_value(value)

    @classmethod
    def from_nullable(cls, value: T | None) -> Self:
        """Create a container from a nullable value; None means empty."""
        if value is None:
            return cls.empty()
        return cls.from_value(value)

    # ------------------------------------------------------------------
    # Query / extraction
    # ------------------------------------------------------------------

    def is_present(self) -> bool:
        """Return True if the container holds a value."""
        return not isinstance(self._value, Unset)

    def get(self) -> tuple[T, bool]:
        """Get the value together with its presence flag.

        Returns:
            ``(value, True)`` if present, otherwise ``(zero value, False)``.
            The flag is authoritative; a zero-looking value does not mean
            the container is empty.
        """
        if isinstance(self._value, Unset):
            return zero_value(self.value_type), False
        return self._value, True

    def get_or_zero(self) -> T:
        """Get the value, or the zero value of ``value_type`` if empty."""
        if isinstance(self._value, Unset):
            return zero_value(self.value_type)
        return self._value

    def get_or_else(self, fallback: T) -> T:
        """Get the value, or ``fallback`` if empty."""
        if isinstance(self._value, Unset):
            return fallback
        return self._value

    def get_or_raise(self) -> T:
        """Get the value.

        Raises:
            ValueAbsentError: If the container is empty
        """
        if isinstance(self._value, Unset):
            raise ValueAbsentError(self.value_type)
        return self._value

    def get_reference(self) -> T | None:
        """Get the stored object itself, or None if empty.

        The result aliases the stored value: in-place changes to a mutable
        value are seen by the container and presence is unaffected. It must
        not be used to fill an empty container; call ``set`` for that.
        """
        if isinstance(self._value, Unset):
            return None
        return self._value

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set(self, value: T) -> None:
        """Store ``value`` and mark the container present."""
        self._value = value

    def clear(self) -> None:
        """Drop the stored value and mark the container empty."""
        self._value = UNSET

    # ------------------------------------------------------------------
    # JSON hooks
    # ------------------------------------------------------------------

    def marshal_json(self) -> bytes:
        """Encode the container as a single JSON value.

        Returns:
            ``b"null"`` if empty, otherwise the JSON encoding of the value
            for ``value_type`` with no wrapping
        """
        if isinstance(self._value, Unset):
            return OptionalValueConfig.NULL_LITERAL
        return JsonCodec.encode(self._value, self.value_type)

    def unmarshal_json(self, data: JSONInput) -> None:
        """Decode a single JSON value into this container in place.

        Empty input and ``null`` clear the container. Any other input is
        decoded as ``value_type`` and stored.

        Args:
            data: Raw JSON text or bytes for one value

        Raises:
            pydantic.ValidationError: If the input is not valid JSON for
                ``value_type``. The container is left in an unspecified
                state and should be discarded.
        """
        if JsonCodec.is_null(data):
            logger.trace(f"{type(self).__name__}: null input, clearing")
            self.clear()
            return

        self.set(JsonCodec.decode(data, self.value_type))

    # ------------------------------------------------------------------
    # pydantic integration
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        value_schema = handler.generate_schema(cls.value_type)
        nullable_schema = core_schema.nullable_schema(value_schema)
        from_input = core_schema.no_info_after_validator_function(
            cls.from_nullable, nullable_schema
        )

        return core_schema.json_or_python_schema(
            json_schema=from_input,
            python_schema=core_schema.no_info_before_validator_function(
                _unwrap, from_input
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _unwrap, info_arg=False, return_schema=nullable_schema
            ),
        )

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionalValue):
            return NotImplemented
        if isinstance(self._value, Unset) or isinstance(other._value, Unset):
            return isinstance(self._value, Unset) and isinstance(other._value, Unset)
        return bool(self._value == other._value)

    __hash__ = None  # type: ignore[assignment]

    @override
    def __repr__(self) -> str:
        if isinstance(self._value, Unset):
            return f"{type(self).__name__}.empty()"
        return f"{type(self).__name__}({self._value!r})"

    @override
    def __reduce__(self) -> tuple[Any, ...]:
        cls = type(self)
        if "parameterized_from" in vars(cls):
            return _restore, (cls.parameterized_from, (self.value_type,), self._value)
        return _restore, (cls, (), self._value)


def _unwrap(value: Any) -> Any:
    # Containers are validated and serialized through their stored value
    if isinstance(value, OptionalValue):
        return value.get_reference()
    return value
