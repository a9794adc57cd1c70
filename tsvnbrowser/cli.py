"""CLI entrypoints for tsvnbrowser commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .browser import TortoiseSvnBrowser
from .config import ConfigError, load_config
from .logging import configure_logging
from .models import ChangePath, EditType, LogEntry, RevisionInfo


def _parse_module(value: str) -> RevisionInfo:
    module, sep, revision = value.rpartition("@")
    if not sep or not module:
        raise argparse.ArgumentTypeError(f"expected URL@REVISION, got {value!r}")
    try:
        return RevisionInfo(module=module, revision=int(revision))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid revision in {value!r}: {exc}") from exc


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_entry_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--revision",
        "-r",
        type=int,
        required=True,
        help="Revision of the change-log entry.",
    )
    parser.add_argument(
        "--module",
        "-m",
        dest="modules",
        action="append",
        type=_parse_module,
        required=True,
        metavar="URL@REV",
        help="Module root recorded for the build (repeatable).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tsvnbrowser",
        description="Build TortoiseSVN command links for Subversion change-log entries.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .tsvnbrowser.yml or its directory (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    diff_parser = subparsers.add_parser(
        "diff",
        help="Link to the diff of a changed file.",
    )
    _add_verbose_option(diff_parser, suppress_default=True)
    _add_entry_options(diff_parser)
    diff_parser.add_argument("path", help="Repository path of the changed file.")
    diff_parser.add_argument(
        "--edit-type",
        "-e",
        default="M",
        choices=[edit.value for edit in EditType],
        help="svn action letter for the change (defaults to M).",
    )

    log_parser = subparsers.add_parser(
        "log",
        help="Link to the history of a file.",
    )
    _add_verbose_option(log_parser, suppress_default=True)
    _add_entry_options(log_parser)
    log_parser.add_argument("path", help="Repository path of the file.")

    changeset_parser = subparsers.add_parser(
        "changeset",
        help="Link to the diff of a whole change-set.",
    )
    _add_verbose_option(changeset_parser, suppress_default=True)
    _add_entry_options(changeset_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for tsvnbrowser commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    browser = TortoiseSvnBrowser(config)
    entry = LogEntry(revision=args.revision, revisions=tuple(args.modules))

    if args.command == "diff":
        change = ChangePath(
            path=args.path,
            edit_type=EditType.from_action(args.edit_type),
            entry=entry,
        )
        link = browser.get_diff_link(change)
        target = args.path
    elif args.command == "log":
        change = ChangePath(path=args.path, edit_type=EditType.EDIT, entry=entry)
        link = browser.get_file_link(change)
        target = args.path
    elif args.command == "changeset":
        link = browser.get_change_set_link(entry)
        target = f"r{args.revision}"
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")

    if link is None:
        parser.exit(1, f"No link for {target}\n")
    print(link)


if __name__ == "__main__":
    main(sys.argv[1:])
