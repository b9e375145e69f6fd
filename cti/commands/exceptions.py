from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CommandFailure(Exception):
    """Raised by handlers and validators to reject a well-formed command.

    The dispatch loop keeps running after reporting it.
    """

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class ResultKind(Enum):
    SUCCESS = "success"
    UNKNOWN_COMMAND = "unknown_command"
    FAILURE = "failure"
    ERROR = "error"


@dataclass
class CommandResult:
    kind: ResultKind
    text: str = ""
    error: Exception | None = field(default=None, repr=False)

    @property
    def success(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    @property
    def fatal(self) -> bool:
        """Unexpected handler errors end the session after being reported."""
        return self.kind is ResultKind.ERROR
