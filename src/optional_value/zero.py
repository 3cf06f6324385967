"""Canonical zero values for arbitrary types.

An empty optional never holds a value of its type. When a caller asks for
one anyway (``get``, ``get_or_zero``) the zero value is built here, fresh
on every call, so a mutable zero can never leak between containers.
"""

from __future__ import annotations

import types
from typing import Annotated, Any, Literal, TypeAliasType, Union, get_args, get_origin

_NONE_TYPES: tuple[object, ...] = (None, type(None), Any)


def zero_value(tp: Any) -> Any:
    """Return the canonical zero/default instance of ``tp``.

    Resolution order:
        - ``Any``, ``None`` and unions containing ``None`` give ``None``
        - ``type`` aliases and ``Annotated[X, ...]`` give the zero of ``X``
        - other unions give the zero of their first member
        - ``Literal[a, ...]`` gives ``a``
        - parameterized generics give the zero of their origin
        - classes constructible without arguments give ``tp()``
        - anything else gives ``None``

    Args:
        tp: Type to build a zero value for

    Returns:
        A new zero instance, or None when the type has no zero
    """
    if tp in _NONE_TYPES:
        return None

    if isinstance(tp, TypeAliasType):
        return zero_value(tp.__value__)

    origin = get_origin(tp)
    if origin is Annotated:
        return zero_value(get_args(tp)[0])
    if origin is Union or origin is types.UnionType:
        members = get_args(tp)
        if type(None) in members:
            return None
        return zero_value(members[0])
    if origin is Literal:
        return get_args(tp)[0]
    if origin is not None:
        tp = origin

    if not isinstance(tp, type):
        return None

    try:
        return tp()
    except (TypeError, ValueError):
        # Requires arguments (abstract classes, enums, models with required fields)
        return None
