"""Default generation strategy: classify members, resolve categories, compile."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from memberwise.equality.compiler import CompiledEquality, compile_equality
from memberwise.equality.members import MemberDescriptor, MemberMode, classify_members, coerce_mode

if TYPE_CHECKING:
    from memberwise.equality.registry import ComparerRegistry


class MemberwiseStrategy:
    """
    Member-by-member equality for one mode.
    exclude: member names left out in addition to those marked with ignore.
    Subclass and override select_members() to change which members take part.
    """

    def __init__(self, mode: MemberMode | str = MemberMode.FIELDS, exclude: Iterable[str] = ()) -> None:
        self.mode = coerce_mode(mode)
        self.exclude = frozenset(exclude)

    def select_members(self, cls: type) -> tuple[MemberDescriptor, ...]:
        return classify_members(cls, self.mode, self.exclude)

    def build(self, cls: type, registry: ComparerRegistry) -> CompiledEquality:
        return compile_equality(self.select_members(cls), registry.sequences, registry.settings)

    def __repr__(self) -> str:
        if self.exclude:
            return f"{type(self).__name__}({self.mode.value!r}, exclude={sorted(self.exclude)!r})"
        return f"{type(self).__name__}({self.mode.value!r})"
