"""Helpers for building module revision lists in tests."""

from __future__ import annotations

from typing import Mapping, Tuple

from tsvnbrowser.models import ChangePath, EditType, LogEntry, RevisionInfo


def revisions_from(modules: Mapping[str, int]) -> Tuple[RevisionInfo, ...]:
    """Return ``RevisionInfo`` objects in the mapping's insertion order."""
    return tuple(RevisionInfo(module=module, revision=rev) for module, rev in modules.items())


def change_path(
    path: str,
    revision: int,
    modules: Mapping[str, int],
    edit_type: EditType = EditType.EDIT,
) -> ChangePath:
    """Return a change path attached to a fresh log entry."""
    entry = LogEntry(revision=revision, revisions=revisions_from(modules))
    return ChangePath(path=path, edit_type=edit_type, entry=entry)


__all__ = ["change_path", "revisions_from"]
