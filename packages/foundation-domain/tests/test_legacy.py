"""Tests for the flat legacy key table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
from pydantic import BaseModel

from kitsci.foundation.domain.exceptions import DuplicateLegacyKeyError
from kitsci.foundation.domain.legacy import (
    LegacyFieldKind,
    LegacySchema,
    LegacySection,
    coerce_legacy_value,
    limit_field,
    number_field,
    toggle_field,
    trigger_field,
)
from kitsci.foundation.domain.limits import UNLIMITED
from kitsci.foundation.domain.settings import SettingMax, SettingTrigger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kitsci.foundation.domain.legacy import LegacyField


class _Sample(LegacySection, BaseModel):
    """Minimal section with one trigger and one limited item."""

    section: SettingTrigger = SettingTrigger()
    moon: SettingMax = SettingMax()
    interval: int = 2000

    def legacy_fields(self) -> Iterator[LegacyField]:
        yield toggle_field("toggle-sample", self.section)
        yield trigger_field("trigger-sample", self.section)
        yield toggle_field("toggle-moon", self.moon)
        yield limit_field("set-moon-max", self.moon)
        yield number_field("set-interval", self, "interval", integer=True)


@pytest.mark.unit
class TestCoerceLegacyValue:
    @pytest.mark.parametrize(("raw", "expected"), [(True, True), (1, True), ("false", False)])
    def test_toggle(self, raw: object, expected: bool) -> None:
        assert coerce_legacy_value(raw, LegacyFieldKind.TOGGLE) is expected

    def test_number_from_string(self) -> None:
        assert coerce_legacy_value("0.5", LegacyFieldKind.NUMBER) == 0.5

    def test_limit_normalizes_infinity(self) -> None:
        assert coerce_legacy_value(float("inf"), LegacyFieldKind.LIMIT) == UNLIMITED

    def test_limit_normalizes_negative(self) -> None:
        assert coerce_legacy_value(-7, LegacyFieldKind.LIMIT) == UNLIMITED

    def test_integer(self) -> None:
        assert coerce_legacy_value(3000, LegacyFieldKind.INTEGER) == 3000

    @pytest.mark.parametrize("raw", ["abc", [1], {"a": 1}, float("nan")])
    def test_unusable_values(self, raw: object) -> None:
        assert coerce_legacy_value(raw, LegacyFieldKind.NUMBER) is None


@pytest.mark.unit
class TestLegacySchema:
    def test_duplicate_key_raises(self) -> None:
        first = SettingMax()
        second = SettingMax()
        with pytest.raises(DuplicateLegacyKeyError) as exc_info:
            LegacySchema([toggle_field("toggle-x", first), toggle_field("toggle-x", second)])
        assert exc_info.value.key == "toggle-x"

    def test_dump_writes_every_field(self) -> None:
        schema = _Sample().legacy_schema()
        assert schema.dump() == {
            "toggle-sample": False,
            "trigger-sample": 1,
            "toggle-moon": False,
            "set-moon-max": UNLIMITED,
            "set-interval": 2000,
        }

    def test_keys_in_declaration_order(self) -> None:
        schema = _Sample().legacy_schema()
        assert schema.keys()[:2] == ["toggle-sample", "trigger-sample"]
        assert len(schema) == 5
        assert "set-moon-max" in schema

    def test_apply_counts_assigned_fields(self) -> None:
        sample = _Sample()
        applied = sample.legacy_schema().apply({"toggle-moon": True, "set-moon-max": 4})
        assert applied == 2
        assert sample.moon.enabled is True
        assert sample.moon.max == 4

    def test_apply_skips_missing_and_none(self) -> None:
        sample = _Sample()
        sample.legacy_schema().apply({"set-moon-max": None})
        assert sample.moon.max == UNLIMITED

    def test_apply_ignores_bad_values(self, caplog: pytest.LogCaptureFixture) -> None:
        sample = _Sample()
        with caplog.at_level(logging.WARNING):
            applied = sample.legacy_schema().apply({"trigger-sample": "lots"})
        assert applied == 0
        assert sample.section.trigger == 1
        assert "legacy_value_ignored" in [record.getMessage() for record in caplog.records]

    def test_unknown_keys(self) -> None:
        schema = _Sample().legacy_schema()
        assert schema.unknown_keys({"toggle-moon": True, "toggle-mars": True}) == ["toggle-mars"]


@pytest.mark.unit
class TestLegacySection:
    def test_from_legacy_options_overlays_defaults(self) -> None:
        sample = _Sample.from_legacy_options({"toggle-sample": True, "set-interval": 500})
        assert sample.section.enabled is True
        assert sample.section.trigger == 1
        assert sample.interval == 500

    def test_to_legacy_options_updates_mapping(self) -> None:
        subject: dict[str, object] = {"unrelated": True}
        _Sample().to_legacy_options(subject)  # type: ignore[arg-type]
        assert subject["unrelated"] is True
        assert subject["toggle-moon"] is False

    def test_round_trip(self) -> None:
        sample = _Sample()
        sample.moon.enabled = True
        sample.moon.max = 12
        sample.section.trigger = 0.3
        subject: dict[str, bool | int | float] = {}
        sample.to_legacy_options(subject)
        assert _Sample.from_legacy_options(subject) == sample

    def test_base_legacy_fields_not_implemented(self) -> None:
        with pytest.raises(NotImplementedError):
            LegacySection().legacy_schema()
