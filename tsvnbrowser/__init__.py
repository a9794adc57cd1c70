"""TortoiseSVN command links for Subversion change logs."""

from .browser import TortoiseSvnBrowser, UnsupportedSchemeError, format_command_url
from .matching import (
    best_module_for_revision,
    best_module_for_revision_and_path,
    segment_overlap_offset,
)
from .models import ChangePath, EditType, LogEntry, RevisionInfo

__version__ = "1.0.0"

__all__ = [
    "ChangePath",
    "EditType",
    "LogEntry",
    "RevisionInfo",
    "TortoiseSvnBrowser",
    "UnsupportedSchemeError",
    "best_module_for_revision",
    "best_module_for_revision_and_path",
    "format_command_url",
    "segment_overlap_offset",
]
