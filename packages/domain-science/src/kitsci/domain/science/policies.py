"""Policy adoption settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import Field, field_validator, model_validator

from kitsci.foundation.application.drift import DriftReport, validate_game_entities
from kitsci.foundation.domain.entries import consume_entries
from kitsci.foundation.domain.game_types import Policy
from kitsci.foundation.domain.legacy import LegacySection, toggle_field
from kitsci.foundation.domain.settings import Setting, ensure_domain_keys, fill_domain_keys

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kitsci.foundation.domain.legacy import LegacyField
    from kitsci.foundation.domain.ports import GamePort, WarningSink


class PolicySetting(Setting):
    """Enable flag for adopting one policy."""

    policy: Policy = Field(frozen=True)


def _default_policies() -> dict[Policy, PolicySetting]:
    return {policy: PolicySetting(policy=policy) for policy in Policy}


class PolicySettings(LegacySection, Setting):
    """Which policies may be adopted automatically.

    Policies are mutually exclusive in the game, so none is enabled by
    default.
    """

    items: dict[Policy, PolicySetting] = Field(default_factory=_default_policies)

    @field_validator("items", mode="before")
    @classmethod
    def _tag_items(cls, value: object) -> object:
        return fill_domain_keys(value, "policy", Policy)

    @model_validator(mode="after")
    def _check_items(self) -> Self:
        ensure_domain_keys(self.items, "policy", "policies")
        return self

    def load(self, source: PolicySettings | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        consume_entries(self.items, source.items, PolicySetting.load)

    def legacy_fields(self) -> Iterator[LegacyField]:
        yield toggle_field("toggle-policies", self)
        for policy, item in self.items.items():
            yield toggle_field(f"toggle-{policy}", item)

    def validate_game(self, game: GamePort, sink: WarningSink | None = None) -> list[DriftReport]:
        return [validate_game_entities(game.policies, self.items, subject="policy", sink=sink)]
