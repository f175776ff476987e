"""Domain base classes: ValueObject."""
from memberwise.domain.value_object import ValueObject

__all__ = [
    "ValueObject",
]
