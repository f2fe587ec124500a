from __future__ import annotations


class DumpError(Exception):
    """Base class for failures raised while walking an object graph."""


class MemberAccessError(DumpError):
    def __init__(self, owner: type, member: str, cause: BaseException) -> None:
        super().__init__(f"{owner.__name__}.{member}: {type(cause).__name__}: {cause}")
        self.owner = owner
        self.member = member
        self.cause = cause
