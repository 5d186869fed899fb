"""Unlocking section: research and policy adoption under one toggle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from kitsci.domain.science.policies import PolicySettings
from kitsci.domain.science.techs import TechSettings
from kitsci.foundation.domain.legacy import LegacySection, toggle_field
from kitsci.foundation.domain.settings import Setting

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kitsci.foundation.application.drift import DriftReport
    from kitsci.foundation.domain.legacy import LegacyField
    from kitsci.foundation.domain.ports import GamePort, WarningSink


def _default_techs() -> TechSettings:
    return TechSettings(enabled=True)


class UnlockingSettings(LegacySection, Setting):
    """Automatic research and policy adoption.

    Attributes:
        techs: Technology research, enabled by default.
        policies: Policy adoption, disabled by default.
    """

    techs: TechSettings = Field(default_factory=_default_techs)
    policies: PolicySettings = Field(default_factory=PolicySettings)

    def load(self, source: UnlockingSettings | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        self.techs.load(source.techs)
        self.policies.load(source.policies)

    def legacy_fields(self) -> Iterator[LegacyField]:
        yield toggle_field("toggle-upgrade", self)
        yield from self.techs.legacy_fields()
        yield from self.policies.legacy_fields()

    def validate_game(self, game: GamePort, sink: WarningSink | None = None) -> list[DriftReport]:
        return [*self.techs.validate_game(game, sink), *self.policies.validate_game(game, sink)]
