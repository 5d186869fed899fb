"""Nested legacy storage blob.

The oldest persisted settings format groups the flat legacy namespace into
four buckets::

    {
        "toggles":   {"trade": true, "space": false},
        "triggers":  {"trade": 1, "space": 0},
        "items":     {"toggle-dragons": true, "set-moonBase-max": -1},
        "resources": {"wood": {"enabled": true, "stock": 1000, "consume": 0.6}},
    }

Section toggles and triggers are stored under their section alias, items
under their full flat key, and workshop resources as one record per
resource. :class:`LegacyStorage` converts between this blob and the flat
mapping understood by the legacy key tables. Values are carried over
untouched: coercion happens when the flat mapping is applied to a tree.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

if TYPE_CHECKING:
    from collections.abc import Collection

logger = logging.getLogger(__name__)

_TOGGLE_PREFIX = "toggle-"
_TRIGGER_PREFIX = "trigger-"
_RESOURCE_KEY = re.compile(
    r"^(?:toggle-resource-(?P<toggle>.+)|set-resource-(?P<name>.+)-(?P<field>stock|consume))$"
)


class LegacyResourceEntry(BaseModel):
    """Stock and consume settings of one workshop resource.

    Absent values stay ``None`` and are omitted from the flat mapping.
    """

    model_config = ConfigDict(extra="ignore")

    enabled: Any = None
    stock: Any = None
    consume: Any = None


class LegacyStorage(BaseModel):
    """The nested legacy storage blob."""

    model_config = ConfigDict(extra="ignore")

    toggles: dict[str, Any] = Field(default_factory=dict)
    triggers: dict[str, Any] = Field(default_factory=dict)
    items: dict[str, Any] = Field(default_factory=dict)
    resources: dict[str, LegacyResourceEntry] = Field(default_factory=dict)

    @field_validator("toggles", "triggers", "items", "resources", mode="before")
    @classmethod
    def _drop_malformed(cls, value: object, info: ValidationInfo) -> object:
        if not isinstance(value, Mapping):
            logger.warning(
                "legacy_storage_bucket_dropped",
                extra={"bucket": info.field_name, "type": type(value).__name__},
            )
            return {}
        if info.field_name != "resources":
            return value

        entries: dict[object, object] = {}
        for name, entry in value.items():
            if isinstance(entry, Mapping | LegacyResourceEntry):
                entries[name] = entry
            else:
                logger.warning(
                    "legacy_resource_entry_dropped",
                    extra={"resource": str(name), "type": type(entry).__name__},
                )
        return entries

    @classmethod
    def parse(cls, data: object) -> LegacyStorage:
        """Validate a raw blob, dropping the parts of it that are malformed.

        A bucket that is not a mapping, or a resource entry that is not a
        mapping, is dropped on its own and the rest of the blob is kept. Only
        a blob that is not a mapping at all degrades to an empty blob.

        Args:
            data: Decoded JSON value read from storage.

        Returns:
            The parsed blob. Never raises.
        """
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            logger.warning(
                "legacy_storage_malformed",
                extra={"errors": exc.error_count()},
            )
            return cls()

    def to_flat(self) -> dict[str, Any]:
        """Flatten the blob into the legacy key namespace."""
        flat: dict[str, Any] = {}
        for alias, enabled in self.toggles.items():
            flat[f"{_TOGGLE_PREFIX}{alias}"] = enabled
        for alias, trigger in self.triggers.items():
            flat[f"{_TRIGGER_PREFIX}{alias}"] = trigger
        flat.update(self.items)
        for name, entry in self.resources.items():
            if entry.enabled is not None:
                flat[f"toggle-resource-{name}"] = entry.enabled
            if entry.stock is not None:
                flat[f"set-resource-{name}-stock"] = entry.stock
            if entry.consume is not None:
                flat[f"set-resource-{name}-consume"] = entry.consume
        return flat

    @classmethod
    def from_flat(cls, flat: Mapping[str, Any], section_toggles: Collection[str]) -> LegacyStorage:
        """Group a flat legacy mapping into the nested blob.

        Args:
            flat: Flat legacy mapping.
            section_toggles: Aliases whose ``toggle-<alias>`` key is a
                section toggle rather than an item.

        Returns:
            The nested blob. ``LegacyStorage.from_flat(f, a).to_flat()``
            contains exactly the keys of ``f``.
        """
        storage = cls()
        for key, value in flat.items():
            match = _RESOURCE_KEY.match(key)
            if match is not None:
                name = match.group("toggle") or match.group("name")
                entry = storage.resources.setdefault(name, LegacyResourceEntry())
                setattr(entry, match.group("field") or "enabled", value)
                continue

            if key.startswith(_TRIGGER_PREFIX):
                storage.triggers[key.removeprefix(_TRIGGER_PREFIX)] = value
                continue

            alias = key.removeprefix(_TOGGLE_PREFIX)
            if key.startswith(_TOGGLE_PREFIX) and alias in section_toggles:
                storage.toggles[alias] = value
                continue

            storage.items[key] = value
        return storage
