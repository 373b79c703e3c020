"""Tests for domain value objects and enum parsing."""

import pytest

from tasknest.domain.enums import Priority, ShareType, TaskState
from tasknest.domain.value_objects import (
    TaskDescription,
    TaskName,
    parse_priority,
    parse_share_type,
)


class TestTaskName:
    def test_trims_surrounding_whitespace(self) -> None:
        assert TaskName("  Buy milk  ").value == "Buy milk"

    def test_boundaries(self) -> None:
        assert TaskName("a" * 5).value == "a" * 5
        assert TaskName("a" * 255).value == "a" * 255

    @pytest.mark.parametrize(
        ("value", "message"),
        [
            ("", "Task name is required"),
            ("    ", "Task name is required"),
            ("abcd", "Task name must be at least 5 characters"),
            ("a" * 256, "Task name must not exceed 255 characters"),
            (12345, "Task name must be a string"),
            (None, "Task name must be a string"),
        ],
    )
    def test_rejects(self, value, message) -> None:
        with pytest.raises(ValueError, match=message):
            TaskName(value)

    def test_length_is_measured_after_trim(self) -> None:
        """Padding does not count toward the minimum."""
        with pytest.raises(ValueError, match="at least 5"):
            TaskName("  abc  ")


class TestTaskDescription:
    def test_minimum_length(self) -> None:
        assert TaskDescription("x" * 15).value == "x" * 15
        with pytest.raises(ValueError, match="at least 15 characters"):
            TaskDescription("x" * 14)

    def test_no_upper_bound(self) -> None:
        assert len(TaskDescription("y" * 10_000).value) == 10_000


class TestParseShareType:
    @pytest.mark.parametrize("value", [None, ""])
    def test_unset_defaults_to_private(self, value) -> None:
        assert parse_share_type(value) is ShareType.PRIVATE

    def test_members(self) -> None:
        assert parse_share_type("PUBLIC") is ShareType.PUBLIC
        assert parse_share_type("SHARE_VIA_LINK") is ShareType.SHARE_VIA_LINK

    def test_rejects_unknown_and_legacy_input(self) -> None:
        """The legacy tag is only accepted from storage, never from callers."""
        with pytest.raises(ValueError, match="Share type must be one of"):
            parse_share_type("SHARE_VIE_LINK")
        with pytest.raises(ValueError, match="Share type must be one of"):
            parse_share_type("public")


class TestParsePriority:
    def test_members(self) -> None:
        for value in Priority.values():
            assert parse_priority(value).value == value

    def test_required(self) -> None:
        with pytest.raises(ValueError, match="Priority is required"):
            parse_priority(None)

    def test_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Priority must be one of"):
            parse_priority("URGENT")


class TestStoredTags:
    def test_legacy_share_tag_maps_to_share_via_link(self) -> None:
        assert ShareType.from_stored("SHARE_VIE_LINK") is ShareType.SHARE_VIA_LINK

    def test_unknown_share_tag_reads_as_private(self, caplog) -> None:
        assert ShareType.from_stored("FRIENDS_ONLY") is ShareType.PRIVATE
        assert "FRIENDS_ONLY" in caplog.text

    def test_missing_share_tag_reads_as_private(self) -> None:
        assert ShareType.from_stored(None) is ShareType.PRIVATE

    def test_unknown_priority_reads_as_none(self) -> None:
        assert Priority.from_stored("URGENT") is Priority.NONE
        assert Priority.from_stored(None) is Priority.NONE

    def test_task_state_from_flag(self) -> None:
        assert TaskState.from_is_active(True) is TaskState.ACTIVE
        assert TaskState.from_is_active(False) is TaskState.BINNED
