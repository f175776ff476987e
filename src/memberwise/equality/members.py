"""Member classification: which members of a class take part, in which order, with which category."""
from __future__ import annotations

import dataclasses
import enum
import functools
from typing import Annotated, Any, ClassVar, Iterable, get_origin, get_type_hints

from memberwise.core.errors import MemberwiseError, UnsupportedMemberError
from memberwise.core.logging import get_logger
from memberwise.equality.categories import Category, resolve_category
from memberwise.equality.ignore import has_ignore_metadata, is_ignored_field, is_ignored_getter

logger = get_logger(__name__)


class MemberMode(str, enum.Enum):
    """Member selection: instance fields or properties."""

    FIELDS = "fields"
    PROPERTIES = "properties"


@dataclasses.dataclass(frozen=True)
class MemberDescriptor:
    """One member of a class under one mode. category is None for ignored members."""

    name: str
    annotation: Any
    mode: MemberMode
    category: Category | None
    ignored: bool = False


def coerce_mode(mode: MemberMode | str) -> MemberMode:
    try:
        return MemberMode(mode)
    except ValueError:
        choices = ", ".join(m.value for m in MemberMode)
        raise MemberwiseError(f"unknown member mode {mode!r} (expected one of: {choices})") from None


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _is_classvar(hint: Any) -> bool:
    if get_origin(hint) is Annotated:
        hint = hint.__origin__
    return hint is ClassVar or get_origin(hint) is ClassVar


def _annotation_ignored(hint: Any) -> bool:
    return get_origin(hint) is Annotated and has_ignore_metadata(hint.__metadata__)


def _type_hints(obj: Any, owner: type, member: str | None = None) -> dict[str, Any]:
    try:
        return get_type_hints(obj, include_extras=True)
    except (NameError, TypeError, SyntaxError) as exc:
        raise UnsupportedMemberError(
            f"cannot resolve annotations: {exc}", owner=owner, member=member
        ) from exc


def _slot_names(klass: type) -> list[str]:
    slots = vars(klass).get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [name for name in slots if not _is_dunder(name)]


def _field_members(cls: type) -> list[tuple[str, Any, bool]]:
    """(name, annotation, ignored) for instance fields, base class first."""
    hints = _type_hints(cls, cls)
    if dataclasses.is_dataclass(cls):
        result = []
        for f in dataclasses.fields(cls):
            annotation = hints.get(f.name, f.type)
            # compare=False fields stay out, as in dataclass-generated __eq__.
            ignored = not f.compare or is_ignored_field(f) or _annotation_ignored(annotation)
            result.append((f.name, annotation, ignored))
        return result

    # get_type_hints walks the MRO base-first, so insertion order is declaration order.
    found: dict[str, tuple[Any, bool]] = {}
    for name, hint in hints.items():
        if _is_dunder(name) or _is_classvar(hint):
            continue
        found[name] = (hint, _annotation_ignored(hint))
    for klass in reversed(cls.__mro__):
        for name in _slot_names(klass):
            found.setdefault(name, (Any, False))
    return [(name, hint, ignored) for name, (hint, ignored) in found.items()]


def _getter_of(attr: Any) -> Any:
    if isinstance(attr, property):
        return attr.fget
    if isinstance(attr, functools.cached_property):
        return attr.func
    return None


def _property_members(cls: type) -> list[tuple[str, Any, bool]]:
    """(name, annotation, ignored) for readable properties, base class first."""
    getters: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            getter = _getter_of(attr)
            if getter is not None:
                getters[name] = getter
            elif name in getters:
                del getters[name]

    result = []
    for name, getter in getters.items():
        annotation = _type_hints(getter, cls, name).get("return", Any)
        ignored = is_ignored_getter(getter) or _annotation_ignored(annotation)
        result.append((name, annotation, ignored))
    return result


def describe_members(
    cls: type,
    mode: MemberMode | str = MemberMode.FIELDS,
    exclude: Iterable[str] = (),
) -> tuple[MemberDescriptor, ...]:
    """Every member of the requested kind, ignored ones included and flagged."""
    if not isinstance(cls, type):
        raise MemberwiseError(f"expected a class, got {cls!r}")
    mode = coerce_mode(mode)
    excluded = frozenset(exclude)
    raw = _field_members(cls) if mode is MemberMode.FIELDS else _property_members(cls)

    descriptors = []
    for name, annotation, ignored in raw:
        ignored = ignored or name in excluded
        category = None if ignored else resolve_category(annotation, owner=cls, member=name)
        descriptors.append(MemberDescriptor(name, annotation, mode, category, ignored))
    return tuple(descriptors)


def classify_members(
    cls: type,
    mode: MemberMode | str = MemberMode.FIELDS,
    exclude: Iterable[str] = (),
) -> tuple[MemberDescriptor, ...]:
    """Members taking part in equality, in declared order. May be empty."""
    described = describe_members(cls, mode, exclude)
    ignored = [m.name for m in described if m.ignored]
    if ignored:
        logger.debug("%s: ignoring %s", cls.__qualname__, ", ".join(ignored))
    return tuple(m for m in described if not m.ignored)
