"""Value formatter: decides the kind of a leaf value and how it is quoted.

Kind precedence for a leaf value:

1. ``bool``                      -> BOOLEAN
2. ``Enum`` member               -> STRING (member name)
3. real numbers                  -> NUMBER (non-finite values become STRING)
4. ``datetime`` / ``date``       -> TIMESTAMP
5. ``str``                       -> STRING, never re-parsed
6. anything else                 -> OPAQUE, then its ``str()`` is sniffed as
   number, then ``true``/``false``, then ISO-8601 date/time.

Strings are quoted verbatim; embedded quotes and control characters are not
escaped.
"""
from __future__ import annotations

import math
import numbers
import types
import uuid
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any, Tuple

from .nodes import ScalarKind, ScalarNode

LEAF_TYPES: Tuple[type, ...] = (
    str, bytes, bytearray, bool, numbers.Number, Decimal,
    date, time, timedelta, uuid.UUID, Enum, PurePath,
    type, types.FunctionType, types.BuiltinFunctionType, types.MethodType, types.ModuleType,
)

def is_leaf(value: Any, extra: Tuple[type, ...] = ()) -> bool:
    return isinstance(value, LEAF_TYPES) or (bool(extra) and isinstance(value, extra))

def _float_node(f: float) -> ScalarNode:
    if math.isnan(f):
        return ScalarNode(ScalarKind.STRING, "NaN")
    if math.isinf(f):
        return ScalarNode(ScalarKind.STRING, "Infinity" if f > 0 else "-Infinity")
    return ScalarNode(ScalarKind.NUMBER, repr(f))

def format_timestamp(value: date) -> str:
    """ISO-8601 in UTC with millisecond precision; naive values are taken as UTC."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"

def opaque_node(text: str) -> ScalarNode:
    """Best-effort kind for the text form of a value with no dedicated rule."""
    try:
        return _float_node(float(text))
    except ValueError:
        pass
    lowered = text.strip().lower()
    if lowered in ("true", "false"):
        return ScalarNode(ScalarKind.BOOLEAN, lowered)
    try:
        return ScalarNode(ScalarKind.TIMESTAMP, format_timestamp(datetime.fromisoformat(text.strip())))
    except (ValueError, OverflowError):
        return ScalarNode(ScalarKind.OPAQUE, text)

def scalar_node(value: Any) -> ScalarNode:
    if isinstance(value, bool):
        return ScalarNode(ScalarKind.BOOLEAN, "true" if value else "false")
    if isinstance(value, Enum):
        return ScalarNode(ScalarKind.STRING, value.name)
    if isinstance(value, numbers.Integral):
        return ScalarNode(ScalarKind.NUMBER, str(int(value)))
    if isinstance(value, Decimal):
        if value.is_nan():
            return ScalarNode(ScalarKind.STRING, "NaN")
        if value.is_infinite():
            return _float_node(float(value))
        return ScalarNode(ScalarKind.NUMBER, str(value))
    if isinstance(value, numbers.Real):
        return _float_node(float(value))
    if isinstance(value, date):
        try:
            return ScalarNode(ScalarKind.TIMESTAMP, format_timestamp(value))
        except OverflowError:
            # UTC shift falls outside datetime.min..max
            return ScalarNode(ScalarKind.OPAQUE, str(value))
    if isinstance(value, str):
        return ScalarNode(ScalarKind.STRING, value)
    return opaque_node(str(value))

def render_scalar(node: ScalarNode) -> str:
    if node.kind in (ScalarKind.NUMBER, ScalarKind.BOOLEAN):
        return node.text
    return f'"{node.text}"'

def format_scalar(value: Any) -> str:
    """Render one leaf value as bare or quoted text."""
    return render_scalar(scalar_node(value))
