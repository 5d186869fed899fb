"""Tests for consume_entries."""

from __future__ import annotations

import logging

import pytest

from kitsci.foundation.domain.entries import consume_entries


@pytest.mark.unit
class TestConsumeEntries:
    def test_pairs_by_key(self) -> None:
        pairs: list[tuple[int, int | None]] = []
        consume_entries({"a": 1, "b": 2}, {"b": 20, "a": 10}, lambda d, s: pairs.append((d, s)))
        assert pairs == [(1, 10), (2, 20)]

    def test_missing_source_entry_passes_none(self) -> None:
        pairs: list[tuple[int, int | None]] = []
        consume_entries({"a": 1}, {}, lambda d, s: pairs.append((d, s)))
        assert pairs == [(1, None)]

    def test_none_source_treated_as_empty(self) -> None:
        pairs: list[tuple[int, int | None]] = []
        consume_entries({"a": 1, "b": 2}, None, lambda d, s: pairs.append((d, s)))
        assert pairs == [(1, None), (2, None)]

    def test_unknown_source_entries_skipped(self) -> None:
        seen: list[int] = []
        consume_entries({"a": 1}, {"a": 10, "z": 99}, lambda d, s: seen.append(s))
        assert seen == [10]

    def test_mismatch_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="kitsci.foundation.domain.entries"):
            consume_entries({"a": 1}, {"z": 2}, lambda d, s: None)
        messages = [record.getMessage() for record in caplog.records]
        assert "entry_missing_in_source" in messages
        assert "entry_unknown_to_schema" in messages
