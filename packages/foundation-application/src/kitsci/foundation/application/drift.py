"""Game-state drift detection.

Compares the domain keys a settings section tracks with the entity names the
live game currently reports. Discrepancies in either direction are reported
as human-readable warnings:

- missing in settings: the game has an entity the schema does not track
  (the game gained content after this release)
- redundant in settings: the schema tracks an entity the game no longer has
  (content was renamed or retired)

Validation is purely diagnostic. It never mutates settings and never raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kitsci.foundation.domain.ports import WarningSink

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DriftReport:
    """Outcome of comparing one section against the live game.

    Attributes:
        subject: Entity kind that was compared (e.g., ``"technology"``).
        missing_in_settings: Live entities the settings do not track.
        redundant_in_settings: Tracked keys the game no longer reports.
    """

    subject: str
    missing_in_settings: tuple[str, ...] = ()
    redundant_in_settings: tuple[str, ...] = ()

    @property
    def has_drift(self) -> bool:
        """True if either direction reported a discrepancy."""
        return bool(self.missing_in_settings or self.redundant_in_settings)


def difference(subject: Iterable[T], other: Iterable[T]) -> list[T]:
    """Return the items of ``subject`` that are not in ``other``.

    Order (and multiplicity) of ``subject`` is preserved.
    """
    excluded = set(other)
    return [item for item in subject if item not in excluded]


def validate_game_entities(
    live: Iterable[str],
    tracked: Iterable[str],
    *,
    subject: str,
    sink: WarningSink | None = None,
    report_missing: bool = True,
) -> DriftReport:
    """Compute and report drift between live entities and tracked keys.

    Args:
        live: Entity names reported by the game, in game order.
        tracked: Domain keys declared by the settings section.
        subject: Human-readable entity kind used in warnings.
        sink: Receives one warning string per discrepancy. Defaults to this
            module's logger.
        report_missing: Set to False for sparse collections, where untracked
            live entities are expected.

    Returns:
        DriftReport with both differences.
    """
    if sink is None:
        sink = logger

    live_names = [str(name) for name in live]
    tracked_names = [str(name) for name in tracked]

    missing = difference(live_names, tracked_names) if report_missing else []
    redundant = difference(tracked_names, live_names)

    for name in missing:
        sink.warning(f"The {subject} '{name}' is not tracked in Kitten Scientists!")
    for name in redundant:
        sink.warning(f"The {subject} '{name}' is not a {subject} in Kitten Game!")

    return DriftReport(
        subject=subject,
        missing_in_settings=tuple(missing),
        redundant_in_settings=tuple(redundant),
    )
