"""Settings session service.

Owns the settings tree of one automation session and is the single entry
point for importing, exporting, resetting and validating it. All imports
merge into the existing tree in place, so components holding a reference
to a section keep seeing current values.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from kitsci.domain.engine.legacy import (
    from_legacy,
    from_legacy_storage,
    to_legacy,
    to_legacy_storage,
)
from kitsci.domain.engine.state import EngineState
from kitsci.foundation.domain.exceptions import DomainKeyMismatchError

if TYPE_CHECKING:
    from kitsci.foundation.application.drift import DriftReport
    from kitsci.foundation.application.legacy_storage import LegacyStorage
    from kitsci.foundation.domain.legacy import LegacyValue
    from kitsci.foundation.domain.ports import GamePort, WarningSink

logger = logging.getLogger(__name__)


def _deep_merge(base: dict[Any, Any], overlay: Mapping[Any, Any]) -> dict[Any, Any]:
    """Overlay ``overlay`` onto ``base`` recursively, without mutating either."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class SettingsService:
    """Import/export and validation for one settings tree.

    Args:
        state: Tree to operate on. Defaults to a fresh default tree.

    Example:
        >>> service = SettingsService()
        >>> service.import_legacy({"toggle-trade": True})
        >>> service.state.trade.enabled
        True
    """

    def __init__(self, state: EngineState | None = None) -> None:
        self._state = state if state is not None else EngineState()

    @property
    def state(self) -> EngineState:
        """The settings tree owned by this service."""
        return self._state

    def load(self, source: EngineState) -> None:
        """Merge a complete tree into the session tree."""
        self._state.load(source)
        logger.debug("settings_loaded")

    def reset(self) -> None:
        """Replace the session tree with the defaults."""
        self._state = EngineState()
        logger.info("settings_reset")

    def import_legacy(self, subject: Mapping[str, object]) -> None:
        """Merge a flat legacy mapping into the session tree.

        Args:
            subject: Flat legacy mapping. Unknown keys and unusable values
                are ignored.
        """
        self._state.load(from_legacy(subject))
        logger.info("legacy_settings_imported", extra={"keys": len(subject)})

    def import_legacy_storage(self, data: object) -> None:
        """Merge a nested legacy storage blob into the session tree."""
        self._state.load(from_legacy_storage(data))
        logger.info("legacy_storage_imported")

    def export_legacy(self) -> dict[str, LegacyValue]:
        """Serialize the session tree into the flat legacy mapping."""
        return to_legacy(self._state)

    def export_legacy_storage(self) -> LegacyStorage:
        """Serialize the session tree into the nested storage blob."""
        return to_legacy_storage(self._state)

    def import_settings(self, data: object) -> bool:
        """Merge a (possibly partial) JSON settings document.

        The document is overlaid on the current tree, so sections, items and
        fields it omits keep their current values. Unknown domain keys and
        fields are dropped.

        Args:
            data: Decoded JSON document shaped like :meth:`export_settings`.

        Returns:
            True if the document was applied, False if it was rejected.
        """
        if not isinstance(data, Mapping):
            logger.warning("settings_import_rejected", extra={"reason": "not a mapping"})
            return False

        try:
            imported = EngineState.model_validate(_deep_merge(self._state.model_dump(), data))
        except PydanticValidationError as exc:
            logger.warning(
                "settings_import_rejected",
                extra={"reason": "invalid values", "errors": exc.error_count()},
            )
            return False
        except DomainKeyMismatchError as exc:
            logger.warning("settings_import_rejected", extra={"reason": exc.message, **exc.context})
            return False

        self._state.load(imported)
        logger.info("settings_imported")
        return True

    def export_settings(self) -> dict[str, Any]:
        """Serialize the session tree as a JSON-compatible document."""
        return self._state.model_dump(mode="json")

    def validate_game(self, game: GamePort, sink: WarningSink | None = None) -> list[DriftReport]:
        """Report drift between the session tree and the live game.

        Never raises and never modifies the tree.
        """
        reports = self._state.validate_game(game, sink)
        drifted = [report.subject for report in reports if report.has_drift]
        if drifted:
            logger.info("game_drift_detected", extra={"subjects": drifted})
        return reports
