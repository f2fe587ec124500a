# Process-wide configuration: built once at startup, read by every serialize() call.
import os
from typing import Iterable, Optional
from . import logging as _logging
from .logging import _NopLogger, _StdoutLogger
from .policy import DumpConfig, FormatPolicy, config_from_env

_global_cfg: Optional[DumpConfig] = None

def init(
    mode: str = "pretty",
    legacy_value_collections: bool = True,
    validate_output: bool = False,
    extra_leaf_types: Iterable[type] = (),
    enable_logs: bool = True,
    log_level: Optional[str] = None,
) -> DumpConfig:
    """Build the process-wide dump configuration and logger.

    ``mode`` is ``"pretty"`` or ``"compact"``. ``log_level`` falls back to
    ``AMPY_DUMP_LOG_LEVEL`` and then ``info``.
    """
    global _global_cfg
    _global_cfg = DumpConfig(
        policy=FormatPolicy.from_name(mode),
        legacy_value_collections=legacy_value_collections,
        validate_output=validate_output,
        extra_leaf_types=tuple(extra_leaf_types),
    )
    if enable_logs:
        level = log_level or os.environ.get("AMPY_DUMP_LOG_LEVEL") or "info"
        _logging.set_logger(_StdoutLogger(level))
    else:
        _logging.set_logger(_NopLogger())
    return _global_cfg

def get_config() -> DumpConfig:
    global _global_cfg
    if _global_cfg is None:
        _global_cfg = config_from_env()
    return _global_cfg

def shutdown() -> None:
    """Drop the configuration; the next call re-reads the environment."""
    global _global_cfg
    _global_cfg = None
    _logging.set_logger(_StdoutLogger())
