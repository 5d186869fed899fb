"""Space construction settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import Field, field_validator, model_validator

from kitsci.domain.space.missions import MissionSettings
from kitsci.foundation.application.drift import DriftReport, validate_game_entities
from kitsci.foundation.domain.entries import consume_entries
from kitsci.foundation.domain.game_types import SpaceBuilding
from kitsci.foundation.domain.legacy import LegacySection, limit_field, toggle_field, trigger_field
from kitsci.foundation.domain.settings import SettingMax, SettingTrigger, ensure_domain_keys, fill_domain_keys

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kitsci.foundation.domain.legacy import LegacyField
    from kitsci.foundation.domain.ports import GamePort, WarningSink


class SpaceBuildingSetting(SettingMax):
    """How many of one space building to construct."""

    building: SpaceBuilding = Field(frozen=True)


def _default_buildings() -> dict[SpaceBuilding, SpaceBuildingSetting]:
    return {building: SpaceBuildingSetting(building=building) for building in SpaceBuilding}


class SpaceSettings(LegacySection, SettingTrigger):
    """Automatic construction of space buildings and mission launches.

    The trigger defaults to 0: space buildings are built as soon as they are
    affordable.
    """

    trigger: float = 0
    buildings: dict[SpaceBuilding, SpaceBuildingSetting] = Field(default_factory=_default_buildings)
    unlock_missions: MissionSettings = Field(default_factory=MissionSettings)

    @field_validator("buildings", mode="before")
    @classmethod
    def _tag_buildings(cls, value: object) -> object:
        return fill_domain_keys(value, "building", SpaceBuilding)

    @model_validator(mode="after")
    def _check_buildings(self) -> Self:
        ensure_domain_keys(self.buildings, "building", "space")
        return self

    def load(self, source: SpaceSettings | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        consume_entries(self.buildings, source.buildings, SpaceBuildingSetting.load)
        self.unlock_missions.load(source.unlock_missions)

    def legacy_fields(self) -> Iterator[LegacyField]:
        yield toggle_field("toggle-space", self)
        yield trigger_field("trigger-space", self)
        for building, item in self.buildings.items():
            yield toggle_field(f"toggle-{building}", item)
            yield limit_field(f"set-{building}-max", item)
        yield from self.unlock_missions.legacy_fields()

    def validate_game(self, game: GamePort, sink: WarningSink | None = None) -> list[DriftReport]:
        buildings = validate_game_entities(
            game.space_buildings, self.buildings, subject="space building", sink=sink
        )
        return [buildings, *self.unlock_missions.validate_game(game, sink)]
