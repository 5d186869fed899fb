"""Engine settings: the master switch and the automation tick interval."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kitsci.foundation.domain.legacy import LegacySection, number_field, toggle_field
from kitsci.foundation.domain.settings import Setting

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kitsci.foundation.domain.legacy import LegacyField

DEFAULT_INTERVAL = 2000
"""Milliseconds between two automation ticks."""


class EngineSettings(LegacySection, Setting):
    """Master switch of the automation engine."""

    interval: int = DEFAULT_INTERVAL

    def load(self, source: EngineSettings | None) -> None:  # type: ignore[override]
        if source is None:
            return
        super().load(source)
        self.interval = source.interval

    def legacy_fields(self) -> Iterator[LegacyField]:
        yield toggle_field("toggle-engine", self)
        yield number_field("set-interval", self, "interval", integer=True)
