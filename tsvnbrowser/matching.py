"""Resolve changed paths against the module roots recorded for a build."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .logging import get_logger
from .models import RevisionInfo

_SEPARATOR = "/"

logger = get_logger("matching")


def split_segments(value: str) -> List[str]:
    """Split ``value`` on ``/``, dropping trailing empty segments.

    Empty segments elsewhere are kept, so ``http://host/repo`` splits into
    ``["http:", "", "host", "repo"]``.
    """
    if not value:
        # An empty root is one empty segment, which overlaps no path.
        return [value]
    segments = value.split(_SEPARATOR)
    while segments and not segments[-1]:
        segments.pop()
    return segments


def segment_overlap_offset(left: Sequence[str], right: Sequence[str]) -> Optional[int]:
    """Return the smallest shift at which the tail of ``left`` starts ``right``.

    ``left[offset:]`` must equal ``right[:len(left) - offset]``. Returns
    ``None`` when the two sequences never overlap.
    """
    left = list(left)
    right = list(right)
    offset = 0
    while left[offset:] != right[: len(left) - offset]:
        offset += 1
        if offset >= len(left):
            return None
    return offset


def best_module_for_revision(
    revisions: Iterable[RevisionInfo], revision: int
) -> Optional[str]:
    """Return the module whose revision is the closest one at or above ``revision``.

    Ties go to the first module in iteration order.
    """
    best_module: Optional[str] = None
    best_revision: Optional[int] = None
    for info in revisions:
        if info.revision < revision:
            continue
        if best_revision is None or info.revision < best_revision:
            best_module = info.module
            best_revision = info.revision
    if best_module is None:
        logger.debug("No module recorded at or after r%s", revision)
    return best_module


def best_module_for_revision_and_path(
    revisions: Iterable[RevisionInfo], revision: int, path: str
) -> Optional[str]:
    """Return the absolute URL of ``path`` under the best matching module root.

    The module root may already contain the leading part of ``path`` (e.g.
    root ``.../trunk/proj`` with path ``/trunk/proj/foo.txt``); the root is
    cut where ``path`` re-enters it so the URL is neither duplicated nor
    truncated.
    """
    if path.startswith(_SEPARATOR):
        # A leading separator would start the segment list with "".
        path = path[1:]
    path_segments = split_segments(path)

    best_url: Optional[str] = None
    best_revision: Optional[int] = None
    for info in revisions:
        module_segments = split_segments(info.module)
        offset = segment_overlap_offset(module_segments, path_segments)
        if offset is None:
            logger.debug("Skipping %s: no overlap with %s", info.module, path)
            continue
        if info.revision < revision:
            continue
        if best_revision is None or info.revision < best_revision:
            base = _SEPARATOR.join(module_segments[:offset])
            if not base.endswith(_SEPARATOR):
                base += _SEPARATOR
            best_url = base + path
            best_revision = info.revision

    if best_url is None:
        logger.debug("No module root matches %s at r%s", path, revision)
    return best_url


__all__ = [
    "best_module_for_revision",
    "best_module_for_revision_and_path",
    "segment_overlap_offset",
    "split_segments",
]
