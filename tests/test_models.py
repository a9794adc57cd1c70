"""Tests for change-log value objects."""

from __future__ import annotations

import dataclasses

import pytest

from tsvnbrowser.models import EditType, RevisionInfo


def test_revision_info_rejects_negative_revision() -> None:
    with pytest.raises(ValueError):
        RevisionInfo("http://server/repo/trunk", -1)


def test_revision_info_is_immutable() -> None:
    info = RevisionInfo("http://server/repo/trunk", 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.revision = 4  # type: ignore[misc]


def test_edit_type_from_action() -> None:
    assert EditType.from_action("M") is EditType.EDIT
    assert EditType.from_action(" a ") is EditType.ADD
    assert EditType.from_action("d") is EditType.DELETE


def test_edit_type_from_unknown_action() -> None:
    with pytest.raises(ValueError):
        EditType.from_action("R")
