"""The root of the settings tree.

``EngineState`` holds one instance of every section. It is the unit that is
imported, exported, merged and validated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from kitsci.domain.bonfire.bonfire import BonfireSettings
from kitsci.domain.engine.engine import EngineSettings
from kitsci.domain.science.unlocking import UnlockingSettings
from kitsci.domain.space.space import SpaceSettings
from kitsci.domain.trade.trade import TradeSettings
from kitsci.domain.workshop.resources import ResourcesSettings
from kitsci.foundation.domain.legacy import LegacySection

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from kitsci.foundation.application.drift import DriftReport
    from kitsci.foundation.domain.legacy import LegacyField
    from kitsci.foundation.domain.ports import GamePort, WarningSink


class EngineState(LegacySection, BaseModel):
    """Complete settings tree.

    Attributes:
        engine: Master switch and tick interval.
        bonfire: Bonfire construction.
        space: Space construction and missions.
        trade: Trading, embassies and race discovery.
        unlocking: Research and policies.
        resources: Workshop resource reserves.

    Building a tree builds its legacy key table, so two fields sharing a
    flat key raise ``DuplicateLegacyKeyError`` on construction.

    Example:
        >>> state = EngineState()
        >>> state.trade.races["dragons"].limited = True
        >>> state.legacy_schema().dump()["toggle-limited-dragons"]
        True
    """

    model_config = ConfigDict(extra="ignore")

    engine: EngineSettings = Field(default_factory=EngineSettings)
    bonfire: BonfireSettings = Field(default_factory=BonfireSettings)
    space: SpaceSettings = Field(default_factory=SpaceSettings)
    trade: TradeSettings = Field(default_factory=TradeSettings)
    unlocking: UnlockingSettings = Field(default_factory=UnlockingSettings)
    resources: ResourcesSettings = Field(default_factory=ResourcesSettings)

    @model_validator(mode="after")
    def _check_legacy_keys(self) -> Self:
        self.legacy_schema()
        return self

    def sections(self) -> Iterator[LegacySection]:
        """Yield every top-level section, in serialization order."""
        yield self.engine
        yield self.bonfire
        yield self.space
        yield self.trade
        yield self.unlocking
        yield self.resources

    def load(self, source: EngineState | None) -> None:
        """Merge ``source`` into this tree, section by section."""
        if source is None:
            return
        self.engine.load(source.engine)
        self.bonfire.load(source.bonfire)
        self.space.load(source.space)
        self.trade.load(source.trade)
        self.unlocking.load(source.unlocking)
        self.resources.load(source.resources)

    def legacy_fields(self) -> Iterator[LegacyField]:
        for section in self.sections():
            yield from section.legacy_fields()

    def prepare_legacy_options(self, subject: Mapping[str, object]) -> None:
        for section in self.sections():
            section.prepare_legacy_options(subject)

    def validate_game(self, game: GamePort, sink: WarningSink | None = None) -> list[DriftReport]:
        """Report drift of every section against the live game.

        Args:
            game: Read-only view of the game's entity registries.
            sink: Receives one warning per discrepancy. Defaults to the
                module logger of the drift validator.

        Returns:
            One report per compared collection.
        """
        return [
            *self.bonfire.validate_game(game, sink),
            *self.space.validate_game(game, sink),
            *self.trade.validate_game(game, sink),
            *self.unlocking.validate_game(game, sink),
            *self.resources.validate_game(game, sink),
        ]
