# Transient tree produced by one serialize() call and rendered right after.
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union

class ScalarKind(Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    OPAQUE = "opaque"

@dataclass(frozen=True)
class NullNode:
    pass

@dataclass(frozen=True)
class ScalarNode:
    kind: ScalarKind
    text: str

@dataclass(frozen=True)
class TextNode:
    """Fallback text for records with nothing to enumerate."""
    text: str

@dataclass
class SequenceNode:
    items: List["Node"] = field(default_factory=list)
    # flat inline list of scalars
    value_form: bool = False

@dataclass
class RecordNode:
    pairs: List[Tuple[str, "Node"]] = field(default_factory=list)

Node = Union[NullNode, ScalarNode, TextNode, SequenceNode, RecordNode]

NULL = NullNode()
