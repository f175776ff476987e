"""Ignore marker: excludes one member from generated equality and hash."""
from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

M = TypeVar("M")

IGNORE_METADATA_KEY = "memberwise_ignore"
_IGNORE_ATTR = "__memberwise_ignore__"


class IgnoreMarker:
    """
    One marker, three placements:
      name: Annotated[str, ignore]                 (annotated field)
      name: str = ignored_field(default="")        (dataclass field)
      @property @ignore def name(self) -> str      (property getter)
    """

    __slots__ = ()

    def __call__(self, member: M) -> M:
        target: Any = member
        if isinstance(member, property):
            target = member.fget
        elif hasattr(member, "func") and hasattr(member, "attrname"):
            target = member.func  # functools.cached_property
        setattr(target, _IGNORE_ATTR, True)
        return member

    def __repr__(self) -> str:
        return "ignore"


ignore = IgnoreMarker()


def ignored_field(**kwargs: Any) -> Any:
    """dataclasses.field(...) whose metadata marks the field as ignored."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[IGNORE_METADATA_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def is_ignored_getter(func: Any) -> bool:
    return bool(getattr(func, _IGNORE_ATTR, False))


def is_ignored_field(f: dataclasses.Field) -> bool:
    return bool(f.metadata.get(IGNORE_METADATA_KEY, False))


def has_ignore_metadata(metadata: tuple[Any, ...]) -> bool:
    """True if Annotated[...] metadata carries the marker."""
    return any(isinstance(m, IgnoreMarker) for m in metadata)
