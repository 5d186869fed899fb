"""Bonfire construction settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import Field, field_validator, model_validator

from kitsci.foundation.application.drift import DriftReport, validate_game_entities
from kitsci.foundation.domain.entries import consume_entries
from kitsci.foundation.domain.game_types import BonfireBuilding
from kitsci.foundation.domain.legacy import LegacySection, limit_field, toggle_field, trigger_field
from kitsci.foundation.domain.settings import SettingMax, SettingTrigger, ensure_domain_keys, fill_domain_keys

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kitsci.foundation.domain.legacy import LegacyField
    from kitsci.foundation.domain.ports import GamePort, WarningSink


class BonfireBuildingSetting(SettingMax):
    """How many of one bonfire building to construct."""

    building: BonfireBuilding = Field(frozen=True)


def _default_buildings() -> dict[BonfireBuilding, BonfireBuildingSetting]:
    return {
        building: BonfireBuildingSetting(building=building, enabled=True) for building in BonfireBuilding
    }


class BonfireSettings(LegacySection, SettingTrigger):
    """Automatic construction of bonfire buildings.

    The legacy alias of this section is ``build``.
    """

    trigger: float = 0
    buildings: dict[BonfireBuilding, BonfireBuildingSetting] = Field(default_factory=_default_buildings)

    @field_validator("buildings", mode="before")
    @classmethod
    def _tag_buildings(cls, value: object) -> object:
        return fill_domain_keys(value, "building", BonfireBuilding)

    @model_validator(mode="after")
    def _check_buildings(self) -> Self:
        ensure_domain_keys(self.buildings, "building", "bonfire")
        return self

    def load(self, source: BonfireSettings | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        consume_entries(self.buildings, source.buildings, BonfireBuildingSetting.load)

    def legacy_fields(self) -> Iterator[LegacyField]:
        yield toggle_field("toggle-build", self)
        yield trigger_field("trigger-build", self)
        for building, item in self.buildings.items():
            yield toggle_field(f"toggle-{building}", item)
            yield limit_field(f"set-{building}-max", item)

    def validate_game(self, game: GamePort, sink: WarningSink | None = None) -> list[DriftReport]:
        return [validate_game_entities(game.bonfire_buildings, self.buildings, subject="building", sink=sink)]
