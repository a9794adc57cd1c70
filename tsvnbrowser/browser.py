"""TortoiseSVN repository browser producing ``tsvncmd:`` links."""

from __future__ import annotations

from typing import Optional

from .config import BrowserConfig
from .logging import get_logger
from .matching import best_module_for_revision, best_module_for_revision_and_path
from .models import ChangePath, EditType, LogEntry

logger = get_logger("browser")


class UnsupportedSchemeError(NotImplementedError):
    """Raised when something tries to open a command link."""


def format_command_url(
    command: str,
    repo_url: str,
    start_revision: Optional[int] = None,
    end_revision: Optional[int] = None,
    *,
    scheme: str = "tsvncmd",
) -> str:
    """Return ``<scheme>:command:<command>?path:<repo_url>`` with an optional range."""
    if (start_revision is None) != (end_revision is None):
        raise ValueError("start_revision and end_revision must be given together")
    url = f"{scheme}:command:{command}?path:{repo_url}"
    if start_revision is not None:
        url += f"?startrev:{start_revision}?endrev:{end_revision}"
    return url


class TortoiseSvnBrowser:
    """Links change-log entries to TortoiseSVN diff and log dialogs.

    A ``None`` link means the file was not under any module root known to the
    build at that revision; callers simply render no link.
    """

    display_name = "TortoiseSVN"

    def __init__(self, config: BrowserConfig | None = None) -> None:
        self._config = config or BrowserConfig()

    @property
    def config(self) -> BrowserConfig:
        """Settings used to render links."""
        return self._config

    def get_diff_link(self, path: ChangePath) -> Optional[str]:
        """Return a diff link for an edited file, ``None`` for adds and deletes."""
        if path.edit_type is not EditType.EDIT:
            return None
        repo_url = self._resolve(path)
        if repo_url is None:
            return None
        revision = path.entry.revision
        return self._command(
            self._config.diff_command, repo_url, revision - 1, revision
        )

    def get_file_link(self, path: ChangePath) -> Optional[str]:
        """Return a log link for the file."""
        repo_url = self._resolve(path)
        if repo_url is None:
            return None
        return self._command(self._config.log_command, repo_url)

    def get_change_set_link(self, entry: LogEntry) -> Optional[str]:
        """Return a diff link covering the whole change-set."""
        repo_url = best_module_for_revision(entry.revisions, entry.revision)
        if repo_url is None:
            logger.debug("No change-set link for r%s", entry.revision)
            return None
        return self._command(
            self._config.diff_command, repo_url, entry.revision - 1, entry.revision
        )

    def open_connection(self, url: str) -> None:
        """Command links are handed to the desktop tool; they cannot be opened here."""
        raise UnsupportedSchemeError(f"Cannot open {self._config.scheme} link: {url}")

    # ------------------------------------------------------------------
    # Internals

    def _resolve(self, path: ChangePath) -> Optional[str]:
        repo_url = best_module_for_revision_and_path(
            path.entry.revisions, path.entry.revision, path.path
        )
        if repo_url is None:
            logger.debug("No link for %s at r%s", path.path, path.entry.revision)
        return repo_url

    def _command(
        self,
        command: str,
        repo_url: str,
        start_revision: Optional[int] = None,
        end_revision: Optional[int] = None,
    ) -> str:
        return format_command_url(
            command,
            repo_url,
            start_revision,
            end_revision,
            scheme=self._config.scheme,
        )


__all__ = ["TortoiseSvnBrowser", "UnsupportedSchemeError", "format_command_url"]
