"""Tests for the unlocking section and policy settings."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kitsci.domain.science.policies import PolicySettings
from kitsci.domain.science.unlocking import UnlockingSettings
from kitsci.foundation.application.game_snapshot import GameSnapshot
from kitsci.foundation.domain.game_types import Policy, Technology


@pytest.mark.unit
class TestPolicySettings:
    def test_nothing_enabled_by_default(self) -> None:
        settings = PolicySettings()
        assert set(settings.items) == set(Policy)
        assert not any(item.enabled for item in settings.items.values())

    def test_legacy_keys(self) -> None:
        flat: dict[str, bool | int | float] = {}
        PolicySettings().to_legacy_options(flat)
        assert flat["toggle-policies"] is False
        assert flat["toggle-liberty"] is False
        assert len(flat) == len(Policy) + 1


@pytest.mark.unit
class TestUnlockingSettings:
    def test_defaults(self) -> None:
        settings = UnlockingSettings()
        assert settings.enabled is False
        assert settings.techs.enabled is True
        assert settings.policies.enabled is False

    def test_load_recurses(self) -> None:
        source = UnlockingSettings(enabled=True)
        source.policies.items[Policy.LIBERTY].enabled = True
        source.techs.items[Technology.MATH].enabled = False
        destination = UnlockingSettings()
        destination.load(source)
        assert destination.enabled is True
        assert destination.policies.items[Policy.LIBERTY].enabled is True
        assert destination.techs.items[Technology.MATH].enabled is False

    def test_load_none_is_noop(self) -> None:
        settings = UnlockingSettings(enabled=True)
        settings.load(None)
        assert settings.enabled is True

    def test_legacy_schema_has_no_duplicates(self) -> None:
        schema = UnlockingSettings().legacy_schema()
        assert len(schema) == 1 + (1 + len(Technology)) + (1 + len(Policy))

    def test_from_legacy_options(self) -> None:
        settings = UnlockingSettings.from_legacy_options(
            {"toggle-upgrade": True, "toggle-policies": True, "toggle-liberty": True, "toggle-tech-math": False}
        )
        assert settings.enabled is True
        assert settings.policies.enabled is True
        assert settings.policies.items[Policy.LIBERTY].enabled is True
        assert settings.techs.items[Technology.MATH].enabled is False

    def test_validate_game_aggregates(self) -> None:
        game = GameSnapshot(
            technologies=tuple(Technology),
            policies=tuple(policy for policy in Policy if policy is not Policy.LIBERTY),
        )
        reports = UnlockingSettings().validate_game(game, MagicMock())
        assert [report.subject for report in reports] == ["technology", "policy"]
        assert reports[1].redundant_in_settings == ("liberty",)
