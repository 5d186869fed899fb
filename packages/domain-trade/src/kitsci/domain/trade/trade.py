"""Trade settings.

Trading is configured per race: whether to trade at all, whether trading is
"limited" (only when it is profitable), and in which seasons. Some races
require a resource to be traded with; that requirement is fixed per race
and is neither merged nor written to the legacy format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import Field, field_validator, model_validator

from kitsci.domain.trade.embassy import EmbassySettings
from kitsci.foundation.application.drift import DriftReport, validate_game_entities
from kitsci.foundation.domain.entries import consume_entries
from kitsci.foundation.domain.game_types import Race, Resource, Season
from kitsci.foundation.domain.legacy import LegacySection, toggle_field, trigger_field
from kitsci.foundation.domain.settings import (
    Setting,
    SettingLimited,
    SettingTrigger,
    ensure_domain_keys,
    fill_domain_keys,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kitsci.foundation.domain.legacy import LegacyField
    from kitsci.foundation.domain.ports import GamePort, WarningSink

BLACKCOIN_TRIGGER = 10000
"""Default blackcoin price (in relics) at which blackcoin is sold."""


def _default_seasons() -> dict[Season, Setting]:
    return {season: Setting() for season in Season}


class TradeSettingsItem(SettingLimited):
    """Trade settings for one race.

    Attributes:
        race: Race this item trades with.
        seasons: Per-season enable flags.
        require: Resource needed to trade with the race, if any.
    """

    race: Race = Field(frozen=True)
    seasons: dict[Season, Setting] = Field(default_factory=_default_seasons)
    require: Resource | None = Field(default=None, frozen=True)

    def load(self, source: TradeSettingsItem | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        consume_entries(self.seasons, source.seasons, Setting.load)


# race: (summer, autumn, winter, spring, require)
_RACE_DEFAULTS: dict[Race, tuple[bool, bool, bool, bool, Resource | None]] = {
    Race.DRAGONS: (True, True, True, True, Resource.TITANIUM),
    Race.GRIFFINS: (False, True, False, False, Resource.WOOD),
    Race.LEVIATHANS: (True, True, True, True, Resource.UNOBTAINIUM),
    Race.LIZARDS: (True, False, False, False, Resource.MINERALS),
    Race.NAGAS: (True, False, False, True, None),
    Race.SHARKS: (False, False, True, False, Resource.IRON),
    Race.SPIDERS: (True, True, False, True, None),
    Race.ZEBRAS: (True, True, True, True, None),
}


def _default_races() -> dict[Race, TradeSettingsItem]:
    races: dict[Race, TradeSettingsItem] = {}
    for race, (summer, autumn, winter, spring, require) in _RACE_DEFAULTS.items():
        races[race] = TradeSettingsItem(
            race=race,
            enabled=True,
            limited=True,
            seasons={
                Season.SUMMER: Setting(enabled=summer),
                Season.AUTUMN: Setting(enabled=autumn),
                Season.WINTER: Setting(enabled=winter),
                Season.SPRING: Setting(enabled=spring),
            },
            require=require,
        )
    return races


def _default_blackcoin() -> SettingTrigger:
    return SettingTrigger(enabled=True, trigger=BLACKCOIN_TRIGGER)


def _default_unlock_races() -> Setting:
    return Setting(enabled=True)


class TradeSettings(LegacySection, SettingTrigger):
    """Automatic trading with the other races.

    Attributes:
        races: Per-race trade settings.
        build_embassies: Embassy construction.
        feed_leviathans: Feed necrocorns to the leviathans.
        trade_blackcoin: Buy and sell blackcoin; the trigger is an absolute
            relic price, not a fraction.
        unlock_races: Send explorers to discover new races.
    """

    races: dict[Race, TradeSettingsItem] = Field(default_factory=_default_races)
    build_embassies: EmbassySettings = Field(default_factory=EmbassySettings)
    feed_leviathans: Setting = Field(default_factory=Setting)
    trade_blackcoin: SettingTrigger = Field(default_factory=_default_blackcoin)
    unlock_races: Setting = Field(default_factory=_default_unlock_races)

    @field_validator("races", mode="before")
    @classmethod
    def _tag_races(cls, value: object) -> object:
        return fill_domain_keys(value, "race", Race)

    @model_validator(mode="after")
    def _check_races(self) -> Self:
        ensure_domain_keys(self.races, "race", "trade")
        return self

    def load(self, source: TradeSettings | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        consume_entries(self.races, source.races, TradeSettingsItem.load)
        self.build_embassies.load(source.build_embassies)
        self.feed_leviathans.load(source.feed_leviathans)
        self.trade_blackcoin.load(source.trade_blackcoin)
        self.unlock_races.load(source.unlock_races)

    def legacy_fields(self) -> Iterator[LegacyField]:
        yield toggle_field("toggle-trade", self)
        yield trigger_field("trigger-trade", self)
        for race, item in self.races.items():
            yield toggle_field(f"toggle-{race}", item)
            yield toggle_field(f"toggle-limited-{race}", item, "limited")
            for season, setting in item.seasons.items():
                yield toggle_field(f"toggle-{race}-{season}", setting)
        yield from self.build_embassies.legacy_fields()
        yield toggle_field("toggle-autofeed", self.feed_leviathans)
        yield toggle_field("toggle-crypto", self.trade_blackcoin)
        yield trigger_field("toggle-crypto-trigger", self.trade_blackcoin)
        yield toggle_field("toggle-races", self.unlock_races)

    def validate_game(self, game: GamePort, sink: WarningSink | None = None) -> list[DriftReport]:
        """Report races the game and these settings disagree on.

        Embassy items share the race keys and are not reported twice.
        """
        return [validate_game_entities(game.races, self.races, subject="race", sink=sink)]
