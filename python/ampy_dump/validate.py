# Diagnostic check that dumped text parses as JSON. Never changes the output.
from __future__ import annotations
import json
from typing import Optional

from .logging import _GlobalLogger, get_logger

def check_output(text: str, logger: Optional[_GlobalLogger] = None) -> bool:
    try:
        json.loads(text)
    except ValueError as exc:
        (logger or get_logger()).warn("malformed dump output", output=text, error=str(exc))
        return False
    return True
