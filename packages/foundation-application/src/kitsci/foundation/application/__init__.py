"""kitsci Foundation Application -- settings boundaries.

This package holds the parts of the settings model that face the outside
world: drift validation against the live game, parsing of user-entered
values, and the nested legacy storage blob.
"""

from kitsci.foundation.application.drift import DriftReport, difference, validate_game_entities
from kitsci.foundation.application.game_snapshot import GameSnapshot
from kitsci.foundation.application.input_parsing import (
    parse_limit,
    parse_percentage,
    render_limit,
    render_percentage,
)
from kitsci.foundation.application.legacy_storage import LegacyResourceEntry, LegacyStorage

__all__ = [
    "DriftReport",
    "GameSnapshot",
    "LegacyResourceEntry",
    "LegacyStorage",
    "difference",
    "parse_limit",
    "parse_percentage",
    "render_limit",
    "render_percentage",
    "validate_game_entities",
]
