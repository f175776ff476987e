"""Comparer registry: one compiled comparer per (class, mode), built on first use and kept."""
from __future__ import annotations

import threading
from typing import Any, TypeVar

from memberwise.core.config import EqualitySettings, load_config_from_env
from memberwise.core.errors import MemberwiseError
from memberwise.core.logging import get_logger
from memberwise.equality.comparer import MemberwiseComparer
from memberwise.equality.members import MemberMode, coerce_mode
from memberwise.equality.protocol import EqualityStrategy
from memberwise.equality.sequences import SequenceEquality
from memberwise.equality.strategy import MemberwiseStrategy

T = TypeVar("T")

logger = get_logger(__name__)


class ComparerRegistry:
    """
    Explicit cache of generated comparers, keyed by (class, mode).
    Lookups of built comparers are plain dict reads; a miss builds under a lock
    and publishes only the finished comparer. A failed build leaves no entry,
    so the next call tries again. Entries are never replaced or evicted.
    """

    def __init__(self, settings: EqualitySettings | None = None) -> None:
        self.settings = settings if settings is not None else EqualitySettings()
        self.sequences = SequenceEquality(self.settings, fallback_hash=self._fields_hash)
        self._comparers: dict[tuple[type, MemberMode], MemberwiseComparer[Any]] = {}
        self._lock = threading.RLock()

    def get(self, cls: type[T], mode: MemberMode | str = MemberMode.FIELDS) -> MemberwiseComparer[T]:
        """Cached comparer for cls under mode; built on first request."""
        if not isinstance(cls, type):
            raise MemberwiseError(f"expected a class, got {cls!r}")
        key = (cls, coerce_mode(mode))
        comparer = self._comparers.get(key)
        if comparer is not None:
            return comparer
        with self._lock:
            comparer = self._comparers.get(key)
            if comparer is None:
                comparer = self._build(cls, MemberwiseStrategy(key[1]), key[1])
                self._comparers[key] = comparer
        return comparer

    def by_fields(self, cls: type[T]) -> MemberwiseComparer[T]:
        return self.get(cls, MemberMode.FIELDS)

    def by_properties(self, cls: type[T]) -> MemberwiseComparer[T]:
        return self.get(cls, MemberMode.PROPERTIES)

    def custom(self, cls: type[T], strategy: EqualityStrategy) -> MemberwiseComparer[T]:
        """Comparer from a caller-supplied strategy. Built now, not cached."""
        if not isinstance(strategy, EqualityStrategy):
            raise MemberwiseError(f"strategy must provide build(cls, registry), got {strategy!r}")
        mode = strategy.mode if isinstance(strategy, MemberwiseStrategy) else None
        return self._build(cls, strategy, mode)

    def _build(
        self, cls: type[T], strategy: EqualityStrategy, mode: MemberMode | None
    ) -> MemberwiseComparer[T]:
        if not isinstance(cls, type):
            raise MemberwiseError(f"expected a class, got {cls!r}")
        try:
            compiled = strategy.build(cls, self)
        except MemberwiseError as exc:
            logger.warning("Cannot build comparer for %s with %r: %s", cls.__qualname__, strategy, exc)
            raise
        comparer = MemberwiseComparer(cls, compiled, mode)
        logger.debug("Built %r", comparer)
        return comparer

    def _fields_hash(self, value: Any) -> int:
        return self.get(type(value), MemberMode.FIELDS).hash(value)

    def __contains__(self, key: object) -> bool:
        return key in self._comparers

    def __len__(self) -> int:
        return len(self._comparers)


_default: ComparerRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> ComparerRegistry:
    """Process-wide registry, created on first use with settings from MEMBERWISE_* variables."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = ComparerRegistry(load_config_from_env())
    return _default


def _resolve(registry: ComparerRegistry | None) -> ComparerRegistry:
    # An empty registry is falsy (__len__), so test for None explicitly.
    return registry if registry is not None else default_registry()


def comparer_for(
    cls: type[T],
    mode: MemberMode | str = MemberMode.FIELDS,
    registry: ComparerRegistry | None = None,
) -> MemberwiseComparer[T]:
    """Entry point: comparer for (cls, mode) from the given or the default registry."""
    return _resolve(registry).get(cls, mode)


def by_fields(cls: type[T], registry: ComparerRegistry | None = None) -> MemberwiseComparer[T]:
    return comparer_for(cls, MemberMode.FIELDS, registry)


def by_properties(cls: type[T], registry: ComparerRegistry | None = None) -> MemberwiseComparer[T]:
    return comparer_for(cls, MemberMode.PROPERTIES, registry)


def custom_comparer(
    cls: type[T],
    strategy: EqualityStrategy,
    registry: ComparerRegistry | None = None,
) -> MemberwiseComparer[T]:
    """Comparer built by strategy instead of the default classify/compile pipeline."""
    return _resolve(registry).custom(cls, strategy)
