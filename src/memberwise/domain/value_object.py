"""ValueObject: value without identity; equality and hash by fields, compiled once per class."""
from __future__ import annotations

from typing import Any

from memberwise.equality.comparer import MemberwiseComparer
from memberwise.equality.members import MemberMode
from memberwise.equality.registry import ComparerRegistry, default_registry


class ValueObject:
    """
    Value object: ==, != and hash() delegate to the Fields-mode comparer for
    exactly type(self). Instances of different classes are never equal.

    Dataclass subclasses must pass eq=False, otherwise the generated __eq__
    replaces this one:

        @dataclass(frozen=True, eq=False)
        class Address(ValueObject):
            street: str
            city: str

    Set __memberwise_registry__ on a subclass to use a caller-owned registry.
    """

    __slots__ = ()

    __memberwise_registry__ = None

    @classmethod
    def _comparer(cls) -> MemberwiseComparer[Any]:
        registry: ComparerRegistry | None = cls.__memberwise_registry__
        if registry is None:
            registry = default_registry()
        return registry.get(cls, MemberMode.FIELDS)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._comparer().equals(self, other)

    def __ne__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return not self._comparer().equals(self, other)

    def __hash__(self) -> int:
        return self._comparer().hash(self)
