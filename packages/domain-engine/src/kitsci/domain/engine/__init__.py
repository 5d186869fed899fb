"""kitsci Domain Engine -- the complete settings tree and its session service."""

from kitsci.domain.engine.engine import DEFAULT_INTERVAL, EngineSettings
from kitsci.domain.engine.legacy import (
    SECTION_TOGGLES,
    from_legacy,
    from_legacy_storage,
    to_legacy,
    to_legacy_storage,
)
from kitsci.domain.engine.service import SettingsService
from kitsci.domain.engine.state import EngineState

__all__ = [
    "DEFAULT_INTERVAL",
    "SECTION_TOGGLES",
    "EngineSettings",
    "EngineState",
    "SettingsService",
    "from_legacy",
    "from_legacy_storage",
    "to_legacy",
    "to_legacy_storage",
]
