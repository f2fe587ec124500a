__all__ = [
    "serialize", "init", "shutdown", "get_config", "get_logger", "set_logger",
    "DumpConfig", "FormatPolicy", "DumpError", "MemberAccessError",
    "Inspectable", "Member", "members",
    "Mask", "MaskStrategy", "masked_field", "redact", "keep_last", "partial",
]
__version__ = "0.1.0"

from .logging import get_logger, set_logger
from .bootstrap import init, shutdown, get_config
from .policy import DumpConfig, FormatPolicy
from .errors import DumpError, MemberAccessError
from .masking import Mask, MaskStrategy, keep_last, masked_field, partial, redact
from .members import Inspectable, Member, members
from .serializer import serialize
