"""Category resolution: a declared type (or runtime class) -> VALUE, REFERENCE or SEQUENCE."""
from __future__ import annotations

import collections
import collections.abc as cabc
import datetime
import enum
import functools
import numbers
import pathlib
import types
import uuid
from typing import Annotated, Any, ClassVar, Final, ForwardRef, Literal, TypeVar, Union, get_args, get_origin

from memberwise.core.errors import UnsupportedMemberError


class Category(str, enum.Enum):
    """How a member takes part in equality and hashing."""

    VALUE = "value"
    REFERENCE = "reference"
    SEQUENCE = "sequence"


# Iterable, but compared as atomic values.
OPAQUE_TYPES: tuple[type, ...] = (str, bytes, bytearray, memoryview, collections.UserString)

VALUE_TYPES: tuple[type, ...] = (
    numbers.Number,
    enum.Enum,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    uuid.UUID,
    pathlib.PurePath,
    type(None),
    type,
)

# Iterable but unordered: never walked elementwise.
UNORDERED_TYPES: tuple[type, ...] = (cabc.Mapping, cabc.Set)

_UNION_ORIGINS = (Union, types.UnionType)


def _unwrap(annotation: Any) -> Any:
    """Strip Annotated, Final, ClassVar and NewType layers."""
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            annotation = annotation.__origin__
        elif origin is Final or origin is ClassVar:
            args = get_args(annotation)
            annotation = args[0] if args else Any
        elif annotation is Final:
            annotation = Any
        elif hasattr(annotation, "__supertype__"):
            annotation = annotation.__supertype__
        else:
            return annotation


@functools.lru_cache(maxsize=None)
def category_of_type(cls: type) -> Category:
    """Category of a concrete class. Memoized: resolved once per class."""
    if issubclass(cls, OPAQUE_TYPES) or issubclass(cls, VALUE_TYPES):
        return Category.VALUE
    if issubclass(cls, UNORDERED_TYPES):
        return Category.REFERENCE
    if issubclass(cls, cabc.Iterable):
        return Category.SEQUENCE
    return Category.REFERENCE


def resolve_category(
    annotation: Any,
    *,
    owner: type | None = None,
    member: str | None = None,
) -> Category:
    """
    Category of a member from its static annotation only.
    Optional[X] resolves as X; None at runtime is handled by the compiled functions.
    """
    tp = _unwrap(annotation)
    if tp is Any or tp is object or isinstance(tp, TypeVar):
        return Category.REFERENCE
    if tp is None:
        return Category.VALUE

    origin = get_origin(tp)
    if origin in _UNION_ORIGINS:
        categories = {
            resolve_category(arg, owner=owner, member=member)
            for arg in get_args(tp)
            if arg is not type(None)
        }
        if len(categories) == 1:
            return categories.pop()
        return Category.REFERENCE
    if origin is Literal:
        return Category.VALUE

    cls = origin if origin is not None else tp
    if isinstance(cls, (str, ForwardRef)):
        raise UnsupportedMemberError(
            f"unresolved forward reference {annotation!r}",
            owner=owner,
            member=member,
            annotation=annotation,
        )
    if not isinstance(cls, type):
        raise UnsupportedMemberError(
            f"annotation {annotation!r} is not a type",
            owner=owner,
            member=member,
            annotation=annotation,
        )
    return category_of_type(cls)
