# Member enumeration and mask-directive lookup for record values.
# Public instance attributes, slots and readable properties participate; names
# starting with "_", class attributes and methods do not. Sorted by name.
from __future__ import annotations
import dataclasses, functools, inspect, operator, typing
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Tuple

from .errors import MemberAccessError
from .masking import MASK_METADATA_KEY, Mask

class Inspectable(Protocol):
    """Types that list their own ``(name, value)`` pairs instead of being introspected."""
    def __dump_members__(self) -> Iterable[Tuple[str, Any]]: ...

@dataclass(frozen=True)
class Member:
    name: str
    declared_type: Any
    accessor: Callable[[Any], Any]
    mask: Optional[Mask] = None

    def get(self, instance: Any) -> Any:
        try:
            return self.accessor(instance)
        except Exception as exc:
            raise MemberAccessError(type(instance), self.name, exc) from exc

@dataclass(frozen=True)
class _Layout:
    properties: Tuple[Member, ...]
    slots: Tuple[str, ...]
    hints: Dict[str, Any]
    masks: Dict[str, Mask]

def _is_public(name: str) -> bool:
    return not name.startswith("_")

def _class_hints(cls: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except Exception:
        pass
    # per class: resolved where possible, raw string annotations otherwise
    hints: Dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        try:
            hints.update(inspect.get_annotations(klass, eval_str=True))
        except Exception:
            hints.update(inspect.get_annotations(klass))
    return hints

def _split_annotated(hint: Any) -> Tuple[Any, Optional[Mask]]:
    if typing.get_origin(hint) is typing.Annotated:
        base, *extras = typing.get_args(hint)
        for extra in extras:
            if isinstance(extra, Mask):
                return base, extra
        return base, None
    return hint, None

def _return_hint(fget: Callable) -> Any:
    try:
        return typing.get_type_hints(fget, include_extras=True).get("return")
    except Exception:
        return inspect.get_annotations(fget).get("return")

@functools.lru_cache(maxsize=1024)
def _layout(cls: type) -> _Layout:
    hints: Dict[str, Any] = {}
    masks: Dict[str, Mask] = {}
    for name, hint in _class_hints(cls).items():
        hints[name], mask = _split_annotated(hint)
        if mask is not None:
            masks[name] = mask

    if dataclasses.is_dataclass(cls):
        for f in dataclasses.fields(cls):
            mask = f.metadata.get(MASK_METADATA_KEY)
            if mask is not None:
                masks[f.name] = mask

    # later classes in the MRO shadow earlier ones
    descriptors: Dict[str, Any] = {}
    slots: List[str] = []
    for klass in reversed(cls.__mro__):
        descriptors.update(vars(klass))
        declared = vars(klass).get("__slots__", ())
        if isinstance(declared, str):
            declared = (declared,)
        slots.extend(s for s in declared if _is_public(s) and s not in slots)

    properties: List[Member] = []
    for name, attr in descriptors.items():
        if not _is_public(name):
            continue
        if isinstance(attr, property):
            if attr.fget is None:
                continue
            fget = attr.fget
        elif isinstance(attr, functools.cached_property):
            fget = attr.func
        else:
            continue
        declared_type, mask = _split_annotated(_return_hint(fget))
        properties.append(Member(name, declared_type, operator.attrgetter(name), mask or masks.get(name)))

    return _Layout(tuple(properties), tuple(slots), hints, masks)

def _constant(value: Any) -> Callable[[Any], Any]:
    return lambda _instance: value

def members(instance: Any) -> List[Member]:
    """Serializable members of ``instance``, ordered by name (code point order)."""
    dump_members = getattr(type(instance), "__dump_members__", None)
    if dump_members is not None:
        return [Member(str(name), None, _constant(value)) for name, value in dump_members(instance)]

    layout = _layout(type(instance))
    found: Dict[str, Member] = {m.name: m for m in layout.properties}
    names = [n for n in layout.slots if n not in found and hasattr(instance, n)]
    names.extend(n for n in getattr(instance, "__dict__", {}) if _is_public(n) and n not in found and n not in names)
    for name in names:
        found[name] = Member(name, layout.hints.get(name), operator.attrgetter(name), layout.masks.get(name))
    return sorted(found.values(), key=operator.attrgetter("name"))

def mask_directive(member: Member) -> Optional[Mask]:
    return member.mask
