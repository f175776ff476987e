"""Generation strategy protocol: how a comparer's functions are produced for a class."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from memberwise.equality.compiler import CompiledEquality
    from memberwise.equality.registry import ComparerRegistry


@runtime_checkable
class EqualityStrategy(Protocol):
    """
    Produces the compiled pair for a class. The default is MemberwiseStrategy;
    a custom strategy replaces member classification and compilation entirely.
    """

    def build(self, cls: type, registry: ComparerRegistry) -> CompiledEquality:
        ...
