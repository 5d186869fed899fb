"""Tests for setting primitives and the merge operator."""

from __future__ import annotations

import pytest

from kitsci.foundation.domain.exceptions import DomainKeyMismatchError
from kitsci.foundation.domain.limits import UNLIMITED
from kitsci.foundation.domain.settings import (
    Setting,
    SettingLimited,
    SettingMax,
    SettingTrigger,
    ensure_domain_keys,
    fill_domain_keys,
)


@pytest.mark.unit
class TestDefaults:
    def test_setting_disabled_by_default(self) -> None:
        assert Setting().enabled is False

    def test_max_defaults_to_unlimited(self) -> None:
        assert SettingMax().max == UNLIMITED

    def test_trigger_defaults_to_one(self) -> None:
        assert SettingTrigger().trigger == 1

    def test_limited_defaults_to_false(self) -> None:
        assert SettingLimited().limited is False

    def test_assignment_is_not_validated(self) -> None:
        setting = SettingTrigger()
        setting.trigger = 1.5
        assert setting.trigger == 1.5

    def test_unknown_fields_ignored(self) -> None:
        setting = Setting.model_validate({"enabled": True, "bogus": 1})
        assert setting.enabled is True
        assert not hasattr(setting, "bogus")


@pytest.mark.unit
class TestLoad:
    def test_setting_copies_enabled(self) -> None:
        destination = Setting()
        destination.load(Setting(enabled=True))
        assert destination.enabled is True

    def test_none_source_is_skipped(self) -> None:
        destination = SettingMax(enabled=True, max=5)
        destination.load(None)
        assert destination.enabled is True
        assert destination.max == 5

    def test_max_copies_both_fields(self) -> None:
        destination = SettingMax(enabled=False, max=10)
        destination.load(SettingMax(enabled=True, max=20))
        assert destination.enabled is True
        assert destination.max == 20

    def test_max_normalizes_infinity(self) -> None:
        destination = SettingMax(max=10)
        destination.load(SettingMax(max=float("inf")))
        assert destination.max == UNLIMITED

    def test_max_normalizes_negative(self) -> None:
        destination = SettingMax(max=10)
        destination.load(SettingMax(max=-42))
        assert destination.max == UNLIMITED

    def test_trigger_copies_trigger(self) -> None:
        destination = SettingTrigger(trigger=1)
        destination.load(SettingTrigger(enabled=True, trigger=0.25))
        assert destination.enabled is True
        assert destination.trigger == 0.25

    def test_limited_copies_limited(self) -> None:
        destination = SettingLimited()
        destination.load(SettingLimited(enabled=True, limited=True))
        assert destination.limited is True

    def test_load_is_idempotent(self) -> None:
        source = SettingMax(enabled=True, max=7)
        destination = SettingMax()
        destination.load(source)
        once = destination.model_dump()
        destination.load(source)
        assert destination.model_dump() == once

    def test_load_does_not_alias_source(self) -> None:
        source = SettingTrigger(enabled=True, trigger=0.5)
        destination = SettingTrigger()
        destination.load(source)
        source.trigger = 0.9
        assert destination.trigger == 0.5


@pytest.mark.unit
class TestDomainKeys:
    def test_fill_adds_missing_key(self) -> None:
        filled = fill_domain_keys({"a": {"enabled": True}}, "name")
        assert filled == {"a": {"enabled": True, "name": "a"}}

    def test_fill_keeps_existing_key(self) -> None:
        filled = fill_domain_keys({"a": {"name": "b"}}, "name")
        assert filled == {"a": {"name": "b"}}

    def test_fill_drops_unknown_keys(self) -> None:
        filled = fill_domain_keys({"a": {}, "zz": {}}, "name", known=["a", "b"])
        assert filled == {"a": {"name": "a"}}

    def test_fill_passes_non_mapping_through(self) -> None:
        assert fill_domain_keys(None, "name") is None

    def test_ensure_accepts_matching_keys(self) -> None:
        class Item:
            name = "a"

        ensure_domain_keys({"a": Item()}, "name", "test")

    def test_ensure_rejects_foreign_key(self) -> None:
        class Item:
            name = "b"

        with pytest.raises(DomainKeyMismatchError) as exc_info:
            ensure_domain_keys({"a": Item()}, "name", "test")
        assert exc_info.value.context == {"section": "test", "key": "a", "tagged": "b"}
