"""Type definitions for the optional value package."""

from typing import Final, override


# Raw input accepted by the JSON decode hook
type JSONInput = bytes | bytearray | str


class Unset:
    """Sentinel class for a container that holds no value.

    Used instead of None so that None stays available as an ordinary
    stored value.
    """

    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    @override
    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Final[Unset] = Unset()
