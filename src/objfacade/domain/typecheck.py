"""Runtime type compatibility between declared annotations and live values.

Only the outer shape of a generic is checked: ``list[int]`` accepts any list.
Annotations that cannot be checked at runtime (unresolved forward references,
non-runtime protocols, special forms) accept every value.

Examples:
    >>> type_accepts(int, 3)
    True
    >>> type_accepts(int, "3")
    False
    >>> type_accepts(int | None, None)
    True
    >>> allows_none(int)
    False
"""

from __future__ import annotations

import inspect
import types
from typing import (
    Annotated,
    Any,
    ClassVar,
    Final,
    ForwardRef,
    Literal,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

UNTYPED: Any = inspect.Parameter.empty
"""Marker for a parameter, field, or return value without an annotation."""

_WRAPPERS = (Annotated, ClassVar, Final)


def unwrap(declared: Any) -> Any:
    """Strip ``Annotated``, ``ClassVar`` and ``Final`` wrappers."""
    while True:
        if declared is ClassVar or declared is Final:
            return Any
        if get_origin(declared) in _WRAPPERS:
            declared = get_args(declared)[0]
            continue
        return declared


def is_union(declared: Any) -> bool:
    """True for ``Union[...]``, ``Optional[...]`` and ``X | Y``."""
    origin = get_origin(declared)
    return origin is Union or origin is types.UnionType


def is_classvar(declared: Any) -> bool:
    """True if *declared* marks a class-level (static) attribute."""
    if isinstance(declared, str):
        return declared.startswith(("ClassVar", "typing.ClassVar"))
    return declared is ClassVar or get_origin(declared) is ClassVar


def _unchecked(declared: Any) -> bool:
    if declared is UNTYPED or declared is Any or declared is object:
        return True
    return isinstance(declared, (str, ForwardRef))


def allows_none(declared: Any) -> bool:
    """Whether the declared type admits ``None``."""
    declared = unwrap(declared)
    if _unchecked(declared) or declared is None or declared is type(None):
        return True
    if isinstance(declared, TypeVar):
        if declared.__constraints__:
            return any(allows_none(c) for c in declared.__constraints__)
        return declared.__bound__ is None or allows_none(declared.__bound__)
    if is_union(declared):
        return any(allows_none(arg) for arg in get_args(declared))
    if get_origin(declared) is Literal:
        return None in get_args(declared)
    supertype = getattr(declared, "__supertype__", None)
    if supertype is not None:
        return allows_none(supertype)
    return False


def type_accepts(declared: Any, value: Any) -> bool:
    """Whether *value*'s runtime type is accepted by the declared type.

    Numeric promotion follows PEP 484: ``float`` accepts ``int``, ``complex``
    accepts ``int`` and ``float``. No value is ever converted.
    """
    if value is None:
        return allows_none(declared)

    declared = unwrap(declared)
    if _unchecked(declared):
        return True
    if declared is None or declared is type(None):
        return False
    if isinstance(declared, TypeVar):
        if declared.__constraints__:
            return any(type_accepts(c, value) for c in declared.__constraints__)
        return declared.__bound__ is None or type_accepts(declared.__bound__, value)
    supertype = getattr(declared, "__supertype__", None)
    if supertype is not None:
        return type_accepts(supertype, value)
    if is_union(declared):
        return any(type_accepts(arg, value) for arg in get_args(declared))

    origin = get_origin(declared)
    if origin is Literal:
        return any(value == arg and type(value) is type(arg) for arg in get_args(declared))
    if origin is type:
        args = get_args(declared)
        if not isinstance(value, type):
            return False
        return not args or _subclass_accepts(args[0], value)
    if origin is not None:
        declared = origin

    if declared is float:
        return isinstance(value, (int, float))
    if declared is complex:
        return isinstance(value, (int, float, complex))
    if isinstance(declared, type):
        try:
            return isinstance(value, declared)
        except TypeError:
            # Protocols without @runtime_checkable cannot be checked.
            return True
    return True


def _subclass_accepts(declared: Any, value: type) -> bool:
    declared = unwrap(declared)
    if _unchecked(declared):
        return True
    if is_union(declared):
        return any(_subclass_accepts(arg, value) for arg in get_args(declared))
    if isinstance(declared, type):
        try:
            return issubclass(value, declared)
        except TypeError:
            return True
    return True


def type_name(declared: Any) -> str:
    """Short display name for an annotation (``"-"`` when untyped)."""
    if declared is UNTYPED:
        return "-"
    if declared is None or declared is type(None):
        return "None"
    if isinstance(declared, str):
        return declared
    if isinstance(declared, type) and not get_args(declared):
        return declared.__name__
    return str(declared).replace("typing.", "")
