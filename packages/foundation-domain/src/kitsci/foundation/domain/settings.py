"""Setting primitives shared by every automation section.

Four value variants cover every configurable behaviour:

- ``Setting``: a plain enable flag.
- ``SettingMax``: enable flag plus a maximum quantity (``UNLIMITED`` = no cap).
- ``SettingTrigger``: enable flag plus a trigger threshold.
- ``SettingLimited``: enable flag plus an independent "limited" flag.

The models are mutable Pydantic models. Assignment is plain field
assignment: there is no validation and there are no side effects at this
layer. Range clamping belongs to the input-parsing boundary.

Each variant implements ``load()``, the merge operator: values present on
the source are copied onto the receiver, and nothing is ever reset to a
schema default.

Example:
    >>> destination = SettingMax(enabled=False, max=10)
    >>> destination.load(SettingMax(enabled=True, max=float("inf")))
    >>> destination.enabled, destination.max
    (True, -1)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from kitsci.foundation.domain.exceptions import DomainKeyMismatchError
from kitsci.foundation.domain.limits import UNLIMITED, normalize_limit

logger = logging.getLogger(__name__)


class Setting(BaseModel):
    """A plain enable flag."""

    model_config = ConfigDict(extra="ignore")

    enabled: bool = False

    def load(self, source: Setting | None) -> None:
        """Copy the values of ``source`` onto this setting.

        Args:
            source: A setting of the same shape. ``None`` is skipped.
        """
        if source is None:
            return
        self.enabled = source.enabled


class SettingMax(Setting):
    """An enable flag with a maximum quantity."""

    max: float = UNLIMITED

    def load(self, source: SettingMax | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        self.max = normalize_limit(source.max)


class SettingTrigger(Setting):
    """An enable flag with a trigger threshold.

    For automation sections the trigger is a ``[0, 1]`` fraction of
    storage capacity.
    """

    trigger: float = 1

    def load(self, source: SettingTrigger | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        self.trigger = source.trigger


class SettingLimited(Setting):
    """An enable flag with an independent "limited" flag."""

    limited: bool = False

    def load(self, source: SettingLimited | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        self.limited = source.limited


def fill_domain_keys(value: Any, key_field: str, known: Iterable[str] | None = None) -> Any:
    """Tag raw item mappings with the key they are stored under.

    Used as a ``mode="before"`` validator on domain-keyed collections so an
    imported JSON document does not have to repeat every domain key inside
    its item.

    Args:
        value: Raw collection value (usually a dict of dicts).
        key_field: Name of the domain key field on the item model.
        known: Closed set of domain keys. Entries stored under any other key
            are dropped instead of failing validation.

    Returns:
        The collection with ``key_field`` filled in where it was missing.
    """
    if not isinstance(value, Mapping):
        return value
    accepted = None if known is None else {str(key) for key in known}
    tagged: dict[Any, Any] = {}
    for key, item in value.items():
        if accepted is not None and str(key) not in accepted:
            logger.debug("entry_unknown_to_schema", extra={"key": str(key), "field": key_field})
            continue
        if isinstance(item, Mapping) and key_field not in item:
            item = {**item, key_field: key}
        tagged[key] = item
    return tagged


def ensure_domain_keys(items: Mapping[Any, Any], key_field: str, section: str) -> None:
    """Fail fast when an item is stored under a foreign domain key.

    Args:
        items: Domain-keyed collection.
        key_field: Name of the domain key field on the item model.
        section: Section name, for the error context.

    Raises:
        DomainKeyMismatchError: If an item's own key differs from its mapping key.
    """
    for key, item in items.items():
        tagged = getattr(item, key_field)
        if tagged != key:
            raise DomainKeyMismatchError(section=section, key=str(key), tagged=str(tagged))
