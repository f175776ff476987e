from memberwise.equality.categories import Category, category_of_type, resolve_category
from memberwise.equality.comparer import MemberwiseComparer
from memberwise.equality.compiler import CompiledEquality, compile_equality
from memberwise.equality.ignore import IgnoreMarker, ignore, ignored_field
from memberwise.equality.members import MemberDescriptor, MemberMode, classify_members, describe_members
from memberwise.equality.protocol import EqualityStrategy
from memberwise.equality.registry import (
    ComparerRegistry,
    by_fields,
    by_properties,
    comparer_for,
    custom_comparer,
    default_registry,
)
from memberwise.equality.sequences import SequenceEquality
from memberwise.equality.strategy import MemberwiseStrategy

__all__ = [
    "Category",
    "category_of_type",
    "resolve_category",
    "MemberwiseComparer",
    "CompiledEquality",
    "compile_equality",
    "IgnoreMarker",
    "ignore",
    "ignored_field",
    "MemberDescriptor",
    "MemberMode",
    "classify_members",
    "describe_members",
    "EqualityStrategy",
    "ComparerRegistry",
    "by_fields",
    "by_properties",
    "comparer_for",
    "custom_comparer",
    "default_registry",
    "SequenceEquality",
    "MemberwiseStrategy",
]
