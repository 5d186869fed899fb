"""Workshop resource stock and consumption settings.

Unlike every other collection, the resource collection starts empty and
mirrors the data it is loaded from: loading a tree or a flat legacy mapping
adds an entry for every known resource it mentions. Entries are never
removed.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Self

from pydantic import Field, field_validator, model_validator

from kitsci.foundation.application.drift import DriftReport, validate_game_entities
from kitsci.foundation.domain.entries import consume_entries
from kitsci.foundation.domain.game_types import Resource
from kitsci.foundation.domain.legacy import LegacyField, LegacyFieldKind, LegacySection, toggle_field
from kitsci.foundation.domain.limits import normalize_limit
from kitsci.foundation.domain.settings import Setting, ensure_domain_keys, fill_domain_keys

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from kitsci.foundation.domain.ports import GamePort, WarningSink

logger = logging.getLogger(__name__)

DEFAULT_CONSUME_RATE = 0.6
"""Fraction of a resource's surplus the workshop may consume."""

_RESOURCE_KEY = re.compile(r"^(?:toggle-resource-(?P<toggle>.+)|set-resource-(?P<name>.+)-(?:stock|consume))$")
_RESOURCES = frozenset(resource.value for resource in Resource)


class ResourcesSettingsItem(Setting):
    """Stock and consumption settings for one resource.

    Attributes:
        resource: Resource this item controls.
        stock: Amount kept in reserve (``UNLIMITED`` keeps everything).
        consume: Fraction of the surplus the workshop may consume.
    """

    resource: Resource = Field(frozen=True)
    stock: float = 0
    consume: float = DEFAULT_CONSUME_RATE

    def load(self, source: ResourcesSettingsItem | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        self.stock = normalize_limit(source.stock)
        self.consume = source.consume


class ResourcesSettings(LegacySection, Setting):
    """Resource reserves respected by the workshop."""

    enabled: bool = True
    items: dict[Resource, ResourcesSettingsItem] = Field(default_factory=dict)

    @field_validator("items", mode="before")
    @classmethod
    def _tag_items(cls, value: object) -> object:
        return fill_domain_keys(value, "resource", Resource)

    @model_validator(mode="after")
    def _check_items(self) -> Self:
        ensure_domain_keys(self.items, "resource", "resources")
        return self

    def add(self, resource: Resource) -> ResourcesSettingsItem:
        """Return the entry for ``resource``, creating a default one if needed."""
        item = self.items.get(resource)
        if item is None:
            item = ResourcesSettingsItem(resource=resource)
            self.items[resource] = item
            logger.debug("resource_entry_added", extra={"resource": resource.value})
        return item

    def load(self, source: ResourcesSettings | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        for resource in source.items:
            self.add(resource)
        consume_entries(self.items, source.items, ResourcesSettingsItem.load)

    def prepare_legacy_options(self, subject: Mapping[str, object]) -> None:
        for key in subject:
            match = _RESOURCE_KEY.match(key)
            if match is None:
                continue
            name = match.group("toggle") or match.group("name")
            if name in _RESOURCES:
                self.add(Resource(name))
            else:
                logger.debug("legacy_resource_unknown", extra={"key": key})

    def legacy_fields(self) -> Iterator[LegacyField]:
        yield toggle_field("toggle-resources", self)
        for resource, item in self.items.items():
            yield toggle_field(f"toggle-resource-{resource}", item)
            yield LegacyField(f"set-resource-{resource}-stock", item, "stock", LegacyFieldKind.LIMIT)
            yield LegacyField(f"set-resource-{resource}-consume", item, "consume", LegacyFieldKind.NUMBER)

    def validate_game(self, game: GamePort, sink: WarningSink | None = None) -> list[DriftReport]:
        """Report tracked resources the game no longer has.

        The collection is sparse, so untracked game resources are expected and
        not reported.
        """
        return [
            validate_game_entities(
                game.resources, self.items, subject="resource", sink=sink, report_missing=False
            )
        ]
