"""
Memberwise: structural equality and hashing for value objects.
Comparers are generated once per (class, mode) and served from a ComparerRegistry.
"""
from memberwise.core import ConfigError, EqualitySettings, MemberwiseError, UnsupportedMemberError, load_config_from_env
from memberwise.domain import ValueObject
from memberwise.equality import (
    Category,
    ComparerRegistry,
    EqualityStrategy,
    MemberMode,
    MemberwiseComparer,
    MemberwiseStrategy,
    by_fields,
    by_properties,
    comparer_for,
    custom_comparer,
    default_registry,
    ignore,
    ignored_field,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "EqualitySettings",
    "MemberwiseError",
    "UnsupportedMemberError",
    "load_config_from_env",
    "ValueObject",
    "Category",
    "ComparerRegistry",
    "EqualityStrategy",
    "MemberMode",
    "MemberwiseComparer",
    "MemberwiseStrategy",
    "by_fields",
    "by_properties",
    "comparer_for",
    "custom_comparer",
    "default_registry",
    "ignore",
    "ignored_field",
]
