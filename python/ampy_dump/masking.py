# Mask directives and reference redaction strategies.
# A strategy is any callable (member, instance) -> str | None.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

if TYPE_CHECKING:
    from .members import Member

MASK_METADATA_KEY = "ampy_dump.mask"

MaskCallable = Callable[["Member", Any], Optional[str]]

@dataclass(frozen=True)
class Mask:
    strategy: MaskCallable

    def apply(self, member: "Member", instance: Any) -> Optional[str]:
        return self.strategy(member, instance)

def as_mask(strategy: Union[Mask, MaskCallable]) -> Mask:
    return strategy if isinstance(strategy, Mask) else Mask(strategy)

def masked_field(strategy: Union[Mask, MaskCallable], **kwargs: Any) -> Any:
    """``dataclasses.field`` carrying a mask directive in its metadata."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[MASK_METADATA_KEY] = as_mask(strategy)
    return field(metadata=metadata, **kwargs)

class MaskStrategy:
    """Fetches the member value and hands it to :meth:`redact`; None stays None."""

    def __call__(self, member: "Member", instance: Any) -> Optional[str]:
        value = member.get(instance)
        if value is None:
            return None
        return self.redact(value)

    def redact(self, value: Any) -> Optional[str]:
        raise NotImplementedError

@dataclass(frozen=True)
class Redact(MaskStrategy):
    placeholder: str = "***"

    def redact(self, value: Any) -> Optional[str]:
        return self.placeholder

@dataclass(frozen=True)
class KeepLast(MaskStrategy):
    # separators survive; only alphanumerics are starred
    count: int = 4
    char: str = "*"

    def redact(self, value: Any) -> Optional[str]:
        keep = self.count
        out = []
        for ch in reversed(str(value)):
            if ch.isalnum():
                if keep > 0:
                    keep -= 1
                    out.append(ch)
                else:
                    out.append(self.char)
            else:
                out.append(ch)
        return "".join(reversed(out))

@dataclass(frozen=True)
class Partial(MaskStrategy):
    def redact(self, value: Any) -> Optional[str]:
        text = str(value)
        if len(text) <= 6:
            return "***"
        return text[:2] + "***" + text[-2:]

def redact(placeholder: str = "***") -> Redact:
    return Redact(placeholder)

def keep_last(count: int = 4, char: str = "*") -> KeepLast:
    return KeepLast(count, char)

def partial() -> Partial:
    return Partial()
