"""Technology research settings.

One enable flag per researchable technology. Technology flags use the
``toggle-tech-<name>`` legacy namespace because several technology names
are also building names (``hydroponics``, ``brewery``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import Field, field_validator, model_validator

from kitsci.foundation.application.drift import DriftReport, validate_game_entities
from kitsci.foundation.domain.entries import consume_entries
from kitsci.foundation.domain.game_types import Technology
from kitsci.foundation.domain.legacy import LegacySection, toggle_field
from kitsci.foundation.domain.settings import Setting, ensure_domain_keys, fill_domain_keys

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kitsci.foundation.domain.legacy import LegacyField
    from kitsci.foundation.domain.ports import GamePort, WarningSink


class TechSetting(Setting):
    """Enable flag for researching one technology."""

    tech: Technology = Field(frozen=True)


def _default_techs() -> dict[Technology, TechSetting]:
    return {tech: TechSetting(tech=tech, enabled=True) for tech in Technology}


class TechSettings(LegacySection, Setting):
    """Which technologies may be researched automatically."""

    items: dict[Technology, TechSetting] = Field(default_factory=_default_techs)

    @field_validator("items", mode="before")
    @classmethod
    def _tag_items(cls, value: object) -> object:
        return fill_domain_keys(value, "tech", Technology)

    @model_validator(mode="after")
    def _check_items(self) -> Self:
        ensure_domain_keys(self.items, "tech", "techs")
        return self

    def load(self, source: TechSettings | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        consume_entries(self.items, source.items, TechSetting.load)

    def legacy_fields(self) -> Iterator[LegacyField]:
        yield toggle_field("toggle-techs", self)
        for tech, item in self.items.items():
            yield toggle_field(f"toggle-tech-{tech}", item)

    def validate_game(self, game: GamePort, sink: WarningSink | None = None) -> list[DriftReport]:
        """Report technologies the game and these settings disagree on."""
        return [validate_game_entities(game.technologies, self.items, subject="technology", sink=sink)]
