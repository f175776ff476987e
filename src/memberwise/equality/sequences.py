"""
Null-safe, order-sensitive elementwise equality and hashing for iterable members.
Elements dispatch on the category of their runtime class, resolved once per class.
"""
from __future__ import annotations

import collections.abc as cabc
from itertools import zip_longest
from typing import Any, Callable, Iterable

from memberwise.core.config import EqualitySettings
from memberwise.equality.categories import Category, category_of_type

HASH_MASK = (1 << 64) - 1

_MISSING = object()


def combine(running: int, value: int, multiplier: int) -> int:
    """Order-sensitive fold step shared by member and element hashing."""
    return (running * multiplier + value) & HASH_MASK


def is_hashable(value: Any) -> bool:
    return type(value).__hash__ is not None


class SequenceEquality:
    """
    Equal/hash for sequences plus the null-safe Reference operations they rely on.
    fallback_hash(value) hashes a non-iterable object structurally when hash() rejects it
    (the registry passes its Fields-mode comparer).
    """

    def __init__(
        self,
        settings: EqualitySettings,
        fallback_hash: Callable[[Any], int] | None = None,
    ) -> None:
        self._seed = settings.hash_seed
        self._multiplier = settings.hash_multiplier
        self._null_hash = settings.null_hash
        self._fallback_hash = fallback_hash

    def equal(self, a: Iterable[Any] | None, b: Iterable[Any] | None) -> bool:
        if a is b:
            return True
        if a is None or b is None:
            return False
        if isinstance(a, cabc.Sized) and isinstance(b, cabc.Sized) and len(a) != len(b):
            return False
        for x, y in zip_longest(a, b, fillvalue=_MISSING):
            if x is _MISSING or y is _MISSING:
                return False
            if not self.equal_element(x, y):
                return False
        return True

    def hash(self, seq: Iterable[Any] | None) -> int:
        if seq is None:
            return self._null_hash
        running = self._seed
        for item in seq:
            running = combine(running, self.hash_element(item), self._multiplier)
        return running

    def equal_element(self, x: Any, y: Any) -> bool:
        if x is y:
            return True
        if x is None or y is None:
            return False
        category = category_of_type(type(x))
        if category is not category_of_type(type(y)):
            return False
        if category is Category.SEQUENCE:
            return self.equal(x, y)
        return bool(x == y)

    def hash_element(self, x: Any) -> int:
        if x is None:
            return self._null_hash
        category = category_of_type(type(x))
        if category is Category.VALUE:
            return hash(x)
        if category is Category.SEQUENCE:
            return self.hash(x)
        return self.reference_hash(x)

    def reference_equal(self, a: Any, b: Any) -> bool:
        if a is b:
            return True
        if a is None or b is None:
            return False
        return bool(a == b)

    def reference_hash(self, value: Any) -> int:
        if value is None:
            return self._null_hash
        # Unordered containers: sum of entry hashes, independent of iteration order.
        # Applied to hashable ones too, so set and frozenset contents hash alike.
        if isinstance(value, cabc.Mapping):
            return sum(
                combine(self.hash_element(k), self.hash_element(v), self._multiplier)
                for k, v in value.items()
            ) & HASH_MASK
        if isinstance(value, cabc.Set):
            return sum(self.hash_element(item) for item in value) & HASH_MASK
        if is_hashable(value):
            try:
                return hash(value)
            except TypeError:
                # Hashable type, unhashable contents (a tuple holding a list).
                pass
        if isinstance(value, cabc.Iterable):
            return self.hash(value)
        if self._fallback_hash is None:
            raise TypeError(f"unhashable type: {type(value).__qualname__!r}")
        return self._fallback_hash(value)
