"""Embassy construction settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import Field, field_validator, model_validator

from kitsci.foundation.application.drift import DriftReport, validate_game_entities
from kitsci.foundation.domain.entries import consume_entries
from kitsci.foundation.domain.game_types import Race
from kitsci.foundation.domain.legacy import LegacySection, limit_field, toggle_field, trigger_field
from kitsci.foundation.domain.settings import SettingMax, SettingTrigger, ensure_domain_keys, fill_domain_keys

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kitsci.foundation.domain.legacy import LegacyField
    from kitsci.foundation.domain.ports import GamePort, WarningSink


class EmbassySetting(SettingMax):
    """How many embassies to build with one race."""

    race: Race = Field(frozen=True)


def _default_embassies() -> dict[Race, EmbassySetting]:
    return {race: EmbassySetting(race=race) for race in Race}


class EmbassySettings(LegacySection, SettingTrigger):
    """Automatic embassy construction.

    Embassy items use the ``embassy-<race>`` legacy namespace so they do not
    collide with the race trade flags.
    """

    items: dict[Race, EmbassySetting] = Field(default_factory=_default_embassies)

    @field_validator("items", mode="before")
    @classmethod
    def _tag_items(cls, value: object) -> object:
        return fill_domain_keys(value, "race", Race)

    @model_validator(mode="after")
    def _check_items(self) -> Self:
        ensure_domain_keys(self.items, "race", "buildEmbassies")
        return self

    def load(self, source: EmbassySettings | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        consume_entries(self.items, source.items, EmbassySetting.load)

    def legacy_fields(self) -> Iterator[LegacyField]:
        yield toggle_field("toggle-buildEmbassies", self)
        yield trigger_field("trigger-buildEmbassies", self)
        for race, item in self.items.items():
            yield toggle_field(f"toggle-embassy-{race}", item)
            yield limit_field(f"set-embassy-{race}-max", item)

    def validate_game(self, game: GamePort, sink: WarningSink | None = None) -> list[DriftReport]:
        return [validate_game_entities(game.races, self.items, subject="race", sink=sink)]
