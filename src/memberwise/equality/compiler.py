"""
Equality function compiler: classified members -> one equality and one hash function.

Both functions walk the same member tuple in the same order, so equal instances
always hash equal. Building happens once; calling does no introspection.
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from memberwise.core.config import EqualitySettings
from memberwise.equality.categories import Category
from memberwise.equality.members import MemberDescriptor
from memberwise.equality.sequences import SequenceEquality, combine

EqualFn = Callable[[Any, Any], bool]
HashFn = Callable[[Any], int]


@dataclass(frozen=True)
class CompiledEquality:
    """A compiled (equal, hash) pair and the members it was built from."""

    equal: EqualFn
    hash: HashFn
    members: tuple[MemberDescriptor, ...] = ()


def _member_operations(
    category: Category | None, sequences: SequenceEquality
) -> tuple[EqualFn, HashFn]:
    if category is Category.VALUE:
        return operator.eq, hash
    if category is Category.REFERENCE:
        return sequences.reference_equal, sequences.reference_hash
    if category is Category.SEQUENCE:
        return sequences.equal, sequences.hash
    raise ValueError(f"member has no category: {category!r}")


def compile_equality(
    members: Sequence[MemberDescriptor],
    sequences: SequenceEquality,
    settings: EqualitySettings,
) -> CompiledEquality:
    members = tuple(members)
    plan = tuple(
        (operator.attrgetter(m.name), *_member_operations(m.category, sequences))
        for m in members
    )
    seed = settings.hash_seed
    multiplier = settings.hash_multiplier
    null_hash = settings.null_hash

    def equal(a: Any, b: Any) -> bool:
        if a is b:
            return True
        if a is None or b is None:
            return False
        for get, eq, _ in plan:
            if not eq(get(a), get(b)):
                return False
        return True

    def hash_(x: Any) -> int:
        if x is None:
            return null_hash
        running = seed
        for get, _, member_hash in plan:
            running = combine(running, member_hash(get(x)), multiplier)
        return running

    return CompiledEquality(equal=equal, hash=hash_, members=members)
