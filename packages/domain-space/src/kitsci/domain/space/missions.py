"""Space program (mission) settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import Field, field_validator, model_validator

from kitsci.foundation.application.drift import DriftReport, validate_game_entities
from kitsci.foundation.domain.entries import consume_entries
from kitsci.foundation.domain.game_types import Mission
from kitsci.foundation.domain.legacy import LegacySection, toggle_field
from kitsci.foundation.domain.settings import Setting, ensure_domain_keys, fill_domain_keys

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kitsci.foundation.domain.legacy import LegacyField
    from kitsci.foundation.domain.ports import GamePort, WarningSink


class MissionSetting(Setting):
    """Enable flag for launching one mission."""

    mission: Mission = Field(frozen=True)


def _default_missions() -> dict[Mission, MissionSetting]:
    return {mission: MissionSetting(mission=mission, enabled=True) for mission in Mission}


class MissionSettings(LegacySection, Setting):
    """Which space missions are launched automatically."""

    items: dict[Mission, MissionSetting] = Field(default_factory=_default_missions)

    @field_validator("items", mode="before")
    @classmethod
    def _tag_items(cls, value: object) -> object:
        return fill_domain_keys(value, "mission", Mission)

    @model_validator(mode="after")
    def _check_items(self) -> Self:
        ensure_domain_keys(self.items, "mission", "missions")
        return self

    def load(self, source: MissionSettings | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        consume_entries(self.items, source.items, MissionSetting.load)

    def legacy_fields(self) -> Iterator[LegacyField]:
        yield toggle_field("toggle-missions", self)
        for mission, item in self.items.items():
            yield toggle_field(f"toggle-{mission}", item)

    def validate_game(self, game: GamePort, sink: WarningSink | None = None) -> list[DriftReport]:
        return [validate_game_entities(game.missions, self.items, subject="mission", sink=sink)]
