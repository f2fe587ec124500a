"""Recursive serializer: walks an object graph into a node tree, then renders it.

Any failure while walking or rendering degrades the whole call to ``""``;
``serialize`` never raises.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Set

from .bootstrap import get_config
from .classify import Shape, classify, is_value_sequence, sequence_items
from .logging import get_logger
from .members import mask_directive, members
from .nodes import NULL, Node, NullNode, RecordNode, ScalarKind, ScalarNode, SequenceNode, TextNode
from .policy import DumpConfig
from .scalars import opaque_node, render_scalar, scalar_node
from .validate import check_output

NULL_ROOT = "{}"


class _Walker:
    def __init__(self, config: DumpConfig) -> None:
        self.extra = config.extra_leaf_types
        # ids of containers currently being descended
        self.path: Set[int] = set()

    @contextmanager
    def _descend(self, value: Any) -> Iterator[None]:
        self.path.add(id(value))
        try:
            yield
        finally:
            self.path.discard(id(value))

    def _cyclic(self, value: Any) -> bool:
        return value is not None and id(value) in self.path

    def node(self, value: Any) -> Node:
        shape = classify(value, self.extra)
        if shape is Shape.NULL:
            return NULL
        if shape is Shape.SCALAR:
            return scalar_node(value)
        with self._descend(value):
            if shape is Shape.MAPPING:
                return self.mapping(value)
            if shape is Shape.SEQUENCE:
                return self.sequence(value)
            return self.record(value)

    def _value_item(self, item: Any) -> Node:
        if item is None:
            return NULL
        if classify(item, self.extra) is Shape.SCALAR:
            return scalar_node(item)
        return SequenceNode([self._value_item(i) for i in sequence_items(item)], value_form=True)

    def sequence(self, value: Any) -> SequenceNode:
        items = sequence_items(value)
        if is_value_sequence(items, self.extra, frozenset({id(value)})):
            return SequenceNode([self._value_item(i) for i in items], value_form=True)
        return SequenceNode([self.node(i) for i in items if not self._cyclic(i)])

    def mapping(self, value: Any) -> RecordNode:
        pairs = sorted(((str(k), v) for k, v in value.items()), key=lambda kv: kv[0])
        return RecordNode([(k, self.node(v)) for k, v in pairs if not self._cyclic(v)])

    def record(self, value: Any) -> Node:
        found = members(value)
        if not found:
            return TextNode(str(value))
        pairs = []
        for member in found:
            mask = mask_directive(member)
            if mask is not None:
                text = mask.apply(member, value)
                pairs.append((member.name, NULL if text is None else ScalarNode(ScalarKind.STRING, text)))
                continue
            item = member.get(value)
            if self._cyclic(item):
                continue
            pairs.append((member.name, self.node(item)))
        return RecordNode(pairs)


class _Renderer:
    def __init__(self, config: DumpConfig) -> None:
        self.policy = config.policy
        self.legacy = config.legacy_value_collections

    def render(self, node: Node, indent: str) -> str:
        if isinstance(node, NullNode):
            return "null"
        if isinstance(node, ScalarNode):
            return render_scalar(node)
        if isinstance(node, TextNode):
            return render_scalar(opaque_node(node.text))
        inner = indent + self.policy.indent_unit
        if isinstance(node, SequenceNode):
            if node.value_form:
                return self.inline(node)
            return self.block("[", "]", [self.render(item, inner) for item in node.items], indent)
        colon = self.policy.colon
        return self.block("{", "}", [f'"{name}"{colon}{self.render(child, inner)}' for name, child in node.pairs], indent)

    def block(self, open_: str, close: str, entries: List[str], indent: str) -> str:
        if not entries:
            return open_ + close
        nl = self.policy.newline
        inner = indent + self.policy.indent_unit
        return open_ + nl + ("," + nl).join(inner + e for e in entries) + nl + indent + close

    def inline(self, node: SequenceNode) -> str:
        space = self.policy.space
        items = [self.inline(i) if isinstance(i, SequenceNode) else self.render(i, "") for i in node.items]
        body = ("," + space).join(items)
        if self.legacy:
            return "{" + space + body + space + "}"
        return "[" + body + "]"


def serialize(value: Any, outer_indent: str = "", config: Optional[DumpConfig] = None) -> str:
    """Dump ``value`` as JSON-shaped text for a log line.

    ``None`` gives ``"{}"``. A record with no public members gives ``str(value)``.
    ``outer_indent`` prefixes continuation lines in pretty mode.
    """
    if value is None:
        return NULL_ROOT
    try:
        cfg = config or get_config()
        node = _Walker(cfg).node(value)
        if isinstance(node, TextNode):
            return node.text
        text = _Renderer(cfg).render(node, outer_indent if cfg.policy.is_pretty else "")
    except Exception as exc:
        get_logger().warn("serialize failed", error=str(exc), type=type(value).__name__)
        return ""
    if cfg.validate_output and isinstance(node, (RecordNode, SequenceNode)):
        check_output(text)
    return text
