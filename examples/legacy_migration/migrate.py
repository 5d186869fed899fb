"""Legacy storage migration walkthrough.

Demonstrates the consumer pattern: a host reads the old nested storage blob,
hands it to a settings session, checks the result against the live game,
and persists the new JSON document.

Usage::

    from examples.legacy_migration.migrate import migrate_storage

    result = migrate_storage(blob, game)
    save(result.document)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from kitsci.domain.engine import SettingsService
from kitsci.infra.observability import get_logger

if TYPE_CHECKING:
    from kitsci.foundation.application.drift import DriftReport
    from kitsci.foundation.domain.ports import GamePort, WarningSink


@dataclass(frozen=True, slots=True)
class MigrationResult:
    """Outcome of one migration.

    Attributes:
        document: New-format JSON document.
        flat: Flat legacy mapping of the migrated settings.
        reports: Drift reports against the live game.
    """

    document: dict[str, Any]
    flat: dict[str, bool | int | float]
    reports: list[DriftReport]

    @property
    def drifted(self) -> list[str]:
        """Subjects with at least one discrepancy."""
        return [report.subject for report in self.reports if report.has_drift]


def migrate_storage(
    blob: object,
    game: GamePort,
    *,
    sink: WarningSink | None = None,
) -> MigrationResult:
    """Migrate a legacy storage blob into the current settings format.

    Args:
        blob: Legacy storage blob as decoded from JSON.
        game: Live game registries to validate against.
        sink: Receives drift warnings. Defaults to a structlog logger.

    Returns:
        The migrated document, its flat form, and the drift reports.
    """
    service = SettingsService()
    service.import_legacy_storage(blob)
    reports = service.validate_game(game, sink if sink is not None else get_logger("kitsci.migration"))
    return MigrationResult(
        document=service.export_settings(),
        flat=service.export_legacy(),
        reports=reports,
    )
