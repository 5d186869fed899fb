"""Conversion between the settings tree and the legacy formats.

Two legacy formats exist:

- the flat mapping, one ``str -> bool | number`` entry per field;
- the nested storage blob (see :class:`LegacyStorage`), which groups the
  same keys into toggles, triggers, items and resources.

Conversion to either format is total. Conversion from either format starts
from a default tree and overlays whatever keys are present, so missing or
malformed values keep their defaults.

Example:
    >>> flat = to_legacy(EngineState())
    >>> from_legacy(flat) == EngineState()
    True
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kitsci.domain.engine.state import EngineState
from kitsci.foundation.application.legacy_storage import LegacyStorage

if TYPE_CHECKING:
    from collections.abc import Mapping

    from kitsci.foundation.domain.legacy import LegacyValue

logger = logging.getLogger(__name__)

SECTION_TOGGLES = frozenset({"engine", "build", "space", "trade", "upgrade", "resources"})
"""Aliases whose ``toggle-<alias>`` key is stored as a section toggle in the blob."""


def to_legacy(state: EngineState) -> dict[str, LegacyValue]:
    """Serialize a settings tree into the flat legacy mapping.

    Every field is written, including fields at their default.
    """
    subject: dict[str, LegacyValue] = {}
    state.to_legacy_options(subject)
    return subject


def from_legacy(subject: Mapping[str, object]) -> EngineState:
    """Deserialize a flat legacy mapping into a fresh settings tree.

    Keys missing from ``subject`` keep their default value. Keys unknown to
    the tree are dropped.
    """
    state = EngineState()
    state.prepare_legacy_options(subject)
    schema = state.legacy_schema()
    applied = schema.apply(subject)
    unknown = schema.unknown_keys(subject)
    if unknown:
        logger.debug("legacy_keys_dropped", extra={"count": len(unknown), "keys": unknown[:10]})
    logger.debug("legacy_options_applied", extra={"applied": applied, "offered": len(subject)})
    return state


def to_legacy_storage(state: EngineState) -> LegacyStorage:
    """Serialize a settings tree into the nested storage blob."""
    return LegacyStorage.from_flat(to_legacy(state), SECTION_TOGGLES)


def from_legacy_storage(data: object) -> EngineState:
    """Deserialize a nested storage blob, as decoded from JSON.

    Malformed buckets and resource entries are skipped. A blob that is not
    a mapping yields the default tree.
    """
    return from_legacy(LegacyStorage.parse(data).to_flat())
