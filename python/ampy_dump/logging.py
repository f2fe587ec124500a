# JSON-structured logging facade used for dump diagnostics.

from __future__ import annotations
import json, sys, time
from typing import Any, Protocol, TextIO

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}

class _GlobalLogger(Protocol):
    def debug(self, msg: str, **kv: Any) -> None: ...
    def info(self, msg: str, **kv: Any) -> None: ...
    def warn(self, msg: str, **kv: Any) -> None: ...
    def error(self, msg: str, **kv: Any) -> None: ...

class _NopLogger:
    def debug(self, msg: str, **kv: Any) -> None: pass
    def info(self, msg: str, **kv: Any) -> None: pass
    def warn(self, msg: str, **kv: Any) -> None: pass
    def error(self, msg: str, **kv: Any) -> None: pass

def _emit(stream: TextIO, level: str, msg: str, kv: dict[str, Any]) -> None:
    rec = {"ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()), "level": level, "message": msg}
    if kv:
        rec.update(kv)
    stream.write(json.dumps(rec, separators=(",", ":"), ensure_ascii=False, default=str) + "\n")
    stream.flush()

class _StdoutLogger:
    def __init__(self, level: str = "info", stream: TextIO | None = None) -> None:
        self.threshold = LEVELS.get(level.lower(), LEVELS["info"])
        self.stream = stream

    def _log(self, level: str, msg: str, kv: dict[str, Any]) -> None:
        if LEVELS[level] >= self.threshold:
            # resolved per call so pytest's capsys sees the write
            _emit(self.stream or sys.stdout, level, msg, kv)

    def debug(self, msg: str, **kv: Any) -> None: self._log("debug", msg, kv)
    def info(self, msg: str, **kv: Any) -> None: self._log("info", msg, kv)
    def warn(self, msg: str, **kv: Any) -> None: self._log("warn", msg, kv)
    def error(self, msg: str, **kv: Any) -> None: self._log("error", msg, kv)

_global_logger: _GlobalLogger = _StdoutLogger()

def get_logger() -> _GlobalLogger:
    return _global_logger

def set_logger(logger: _GlobalLogger) -> None:
    """Replace the process-wide logging collaborator."""
    global _global_logger
    _global_logger = logger
