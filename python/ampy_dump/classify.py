# Type classifier: null, scalar leaf, mapping, sequence or record.
from __future__ import annotations
from collections.abc import Collection, Iterable, Mapping, Set
from enum import Enum
from typing import Any, FrozenSet, List, Tuple

from .scalars import is_leaf

class Shape(Enum):
    NULL = "null"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"

def classify(value: Any, extra_leaf_types: Tuple[type, ...] = ()) -> Shape:
    if value is None:
        return Shape.NULL
    if is_leaf(value, extra_leaf_types):
        return Shape.SCALAR
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if isinstance(value, Iterable):
        return Shape.SEQUENCE
    return Shape.RECORD

def sequence_items(value: Iterable) -> List[Any]:
    """Materialize a sequence; sets come back sorted when their elements allow it."""
    items = list(value)
    if isinstance(value, Set):
        try:
            items.sort()
        except TypeError:
            pass
    return items

def is_value_sequence(items: List[Any], extra_leaf_types: Tuple[type, ...] = (),
                      _path: FrozenSet[int] = frozenset()) -> bool:
    """True when every element is a leaf, None, or a nested collection of such."""
    if not items:
        return False
    for item in items:
        if item is None or is_leaf(item, extra_leaf_types):
            continue
        # only re-iterable collections qualify; an iterator would be consumed here
        if isinstance(item, Mapping) or not isinstance(item, Collection) or id(item) in _path:
            return False
        if not is_value_sequence(sequence_items(item), extra_leaf_types, _path | {id(item)}):
            return False
    return True
