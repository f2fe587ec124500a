# Format-mode policy and the immutable dump configuration.
from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Tuple

@dataclass(frozen=True)
class FormatPolicy:
    """Whitespace rules shared by every renderer.

    ``pretty`` indents two spaces per level and ends each structural line with
    the platform newline; ``compact`` emits no whitespace at all.
    """

    name: str
    indent_unit: str
    newline: str
    space: str

    @classmethod
    def pretty(cls, newline: str = os.linesep) -> "FormatPolicy":
        return cls(name="pretty", indent_unit="  ", newline=newline, space=" ")

    @classmethod
    def compact(cls) -> "FormatPolicy":
        return cls(name="compact", indent_unit="", newline="", space="")

    @classmethod
    def from_name(cls, name: str) -> "FormatPolicy":
        key = name.strip().lower()
        if key == "pretty":
            return cls.pretty()
        if key == "compact":
            return cls.compact()
        raise ValueError(f"unknown format mode: {name!r}")

    @property
    def is_pretty(self) -> bool:
        return bool(self.newline)

    @property
    def colon(self) -> str:
        return ":" + self.space

@dataclass(frozen=True)
class DumpConfig:
    policy: FormatPolicy = field(default_factory=FormatPolicy.pretty)
    # value collections keep the `{ a, b }` log form unless disabled
    legacy_value_collections: bool = True
    validate_output: bool = False
    extra_leaf_types: Tuple[type, ...] = ()

def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")

def config_from_env() -> DumpConfig:
    mode = os.environ.get("AMPY_DUMP_MODE") or "pretty"
    return DumpConfig(policy=FormatPolicy.from_name(mode), validate_output=_env_flag("AMPY_DUMP_VALIDATE"))
