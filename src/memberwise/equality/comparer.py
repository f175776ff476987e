"""Comparer facade: equals/hash for one class under one generation strategy."""
from __future__ import annotations

from typing import Generic, TypeVar

from memberwise.equality.compiler import CompiledEquality
from memberwise.equality.members import MemberDescriptor, MemberMode

T = TypeVar("T")


class MemberwiseComparer(Generic[T]):
    """
    Equality and hash for instances of cls. Built once, then immutable.
    mode is None for comparers produced by a custom strategy.
    """

    __slots__ = ("cls", "mode", "_equal", "_hash", "_members")

    def __init__(self, cls: type[T], compiled: CompiledEquality, mode: MemberMode | None = None) -> None:
        self.cls = cls
        self.mode = mode
        self._equal = compiled.equal
        self._hash = compiled.hash
        self._members = tuple(compiled.members)

    @property
    def members(self) -> tuple[MemberDescriptor, ...]:
        """Participating members in comparison order (empty for opaque custom strategies)."""
        return self._members

    def equals(self, a: T | None, b: T | None) -> bool:
        return self._equal(a, b)

    def hash(self, obj: T | None) -> int:
        return self._hash(obj)

    def __repr__(self) -> str:
        mode = self.mode.value if self.mode is not None else "custom"
        return f"<MemberwiseComparer {self.cls.__qualname__} ({mode}, {len(self._members)} members)>"
