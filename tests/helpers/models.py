"""Sample classes shared by the tests. Module level, so annotations resolve."""
from __future__ import annotations

import enum
import functools
from collections import deque
from dataclasses import dataclass, field
from typing import Annotated, Any, ClassVar, Optional, Sequence

from memberwise import ValueObject, ignore, ignored_field


@dataclass(frozen=True, eq=False)
class Address(ValueObject):
    street: str
    city: str


@dataclass(frozen=True, eq=False)
class Person(ValueObject):
    name: str
    address: Optional[Address]


@dataclass(frozen=True, eq=False)
class Resident(ValueObject):
    name: str
    addresses: Optional[list[Address]]


@dataclass(frozen=True, eq=False)
class Record(ValueObject):
    value1: str
    value2: str
    transient_value: Annotated[str, ignore]


@dataclass(eq=False)
class Draft:
    title: str
    revision: int = ignored_field(default=0)
    version: ClassVar[int] = 3


class Empty(ValueObject):
    pass


class Color(enum.Enum):
    RED = "red"
    BLUE = "blue"


class Point:
    x: int
    y: int

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class Point3D(Point):
    z: int
    origin: ClassVar[Point3D]

    def __init__(self, x: int, y: int, z: int) -> None:
        super().__init__(x, y)
        self.z = z


class Pair:
    __slots__ = ("left", "right")

    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right


class Temperature:
    """Fields and properties modes disagree on this class."""

    celsius: float
    source: str

    def __init__(self, celsius: float, source: str) -> None:
        self.celsius = celsius
        self.source = source

    @property
    def kelvin(self) -> float:
        return round(self.celsius + 273.15, 6)

    @property
    @ignore
    def label(self) -> str:
        return self.source

    @functools.cached_property
    def rounded(self) -> int:
        return round(self.celsius)

    @staticmethod
    def unit() -> str:
        return "C"


class Shape:
    @property
    def sides(self) -> int:
        return 0

    @property
    def name(self) -> str:
        return "shape"


class Square(Shape):
    name = "square"

    @property
    def sides(self) -> int:
        return 4

    @property
    def area(self) -> float:
        return 1.0


@dataclass(eq=False)
class Basket:
    items: tuple[int, ...]
    tags: frozenset[str]
    counts: dict[str, list[int]]
    history: Sequence[list[int]] = field(default_factory=list)
    queue: deque = field(default_factory=deque)
    color: Color = Color.RED
    payload: Any = None


@dataclass
class Unhashable:
    """Plain mutable dataclass: __eq__ by fields, __hash__ is None."""

    values: list[int]
    label: str


@dataclass(frozen=True, eq=False)
class Tagged(ValueObject):
    tag: Unhashable


class Broken:
    value: UndefinedName  # noqa: F821


class Flaky:
    value: LateBound  # noqa: F821


@dataclass(frozen=True)
class Tags:
    """Frozen dataclass: hashable type, but hash() fails on the list it holds."""

    values: list[int]


@dataclass(frozen=True, eq=False)
class Labelled(ValueObject):
    tags: Tags


@dataclass(frozen=True, eq=False)
class Note(ValueObject):
    text: str
    audit: str = field(default="", compare=False)
