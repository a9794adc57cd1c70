"""Value objects describing Subversion change-log entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class EditType(Enum):
    """Kind of change applied to a path in a change-set."""

    ADD = "A"
    EDIT = "M"
    DELETE = "D"

    @classmethod
    def from_action(cls, action: str) -> "EditType":
        """Return the edit type for an ``svn log`` action letter."""
        try:
            return cls(action.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown edit action: {action!r}") from None


@dataclass(frozen=True)
class RevisionInfo:
    """Module root URL as recorded at a given revision."""

    module: str
    revision: int

    def __post_init__(self) -> None:
        if self.revision < 0:
            raise ValueError(f"Revision must be non-negative, got {self.revision}")


@dataclass(frozen=True)
class LogEntry:
    """A single commit and the module roots known for the build that saw it."""

    revision: int
    revisions: Tuple[RevisionInfo, ...] = field(default_factory=tuple)
    author: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class ChangePath:
    """A file touched by a log entry."""

    path: str
    edit_type: EditType
    entry: LogEntry


__all__ = ["ChangePath", "EditType", "LogEntry", "RevisionInfo"]
