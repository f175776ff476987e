"""Hash-combination settings: defaults, environment loading, validation."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any

from memberwise.core.errors import ConfigError

ENV_PREFIX = "MEMBERWISE_"


@dataclass(frozen=True)
class EqualitySettings:
    """
    Constants of the order-sensitive hash fold: running = running * multiplier + member_hash.
    Two comparers agree on hashes only if they share settings.
    """

    hash_seed: int = 17
    hash_multiplier: int = 31
    null_hash: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f.name, f"expected int, got {value!r}")
        if self.hash_multiplier <= 1 or self.hash_multiplier % 2 == 0:
            raise ConfigError("hash_multiplier", f"must be an odd integer > 1, got {self.hash_multiplier}")


class Config:
    """Reads MEMBERWISE_* variables; the result feeds EqualitySettings(**...)."""

    @classmethod
    def load_from_env(cls, prefix: str = ENV_PREFIX, **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Only EqualitySettings keys are kept."""
        known = {f.name for f in fields(EqualitySettings)}
        result = {k: v for k, v in defaults.items() if k in known}
        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            name = key[len(prefix):].lower()
            if name not in known:
                continue
            try:
                result[name] = int(value.strip())
            except ValueError:
                raise ConfigError(name, f"{key}={value!r} is not an integer") from None
        return result


def load_config_from_env(prefix: str = ENV_PREFIX, **defaults: Any) -> EqualitySettings:
    """Validated settings from the environment (e.g. MEMBERWISE_HASH_SEED=7)."""
    return EqualitySettings(**Config.load_from_env(prefix, **defaults))
