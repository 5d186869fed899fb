"""kitsci Foundation Domain -- pure Python settings primitives.

This package provides the building blocks every automation section is made
of: setting primitives, the unbounded-quantity sentinel, game entity
identifiers, the flat legacy key table, exceptions, and port interfaces.
"""

from kitsci.foundation.domain.entries import consume_entries
from kitsci.foundation.domain.exceptions import (
    DomainKeyMismatchError,
    DuplicateLegacyKeyError,
    InvalidSettingValueError,
    SchemaError,
    SettingsError,
)
from kitsci.foundation.domain.game_types import (
    BonfireBuilding,
    Mission,
    Policy,
    Race,
    Resource,
    Season,
    SpaceBuilding,
    Technology,
)
from kitsci.foundation.domain.legacy import (
    LegacyField,
    LegacyFieldKind,
    LegacySchema,
    LegacySection,
    LegacyValue,
    coerce_legacy_value,
    limit_field,
    number_field,
    toggle_field,
    trigger_field,
)
from kitsci.foundation.domain.limits import UNLIMITED, is_unlimited, normalize_limit
from kitsci.foundation.domain.ports import GamePort, WarningSink
from kitsci.foundation.domain.settings import (
    Setting,
    SettingLimited,
    SettingMax,
    SettingTrigger,
    ensure_domain_keys,
    fill_domain_keys,
)

__all__ = [
    "UNLIMITED",
    "BonfireBuilding",
    "DomainKeyMismatchError",
    "DuplicateLegacyKeyError",
    "GamePort",
    "InvalidSettingValueError",
    "LegacyField",
    "LegacyFieldKind",
    "LegacySchema",
    "LegacySection",
    "LegacyValue",
    "Mission",
    "Policy",
    "Race",
    "Resource",
    "SchemaError",
    "Season",
    "Setting",
    "SettingLimited",
    "SettingMax",
    "SettingTrigger",
    "SettingsError",
    "SpaceBuilding",
    "Technology",
    "WarningSink",
    "coerce_legacy_value",
    "consume_entries",
    "ensure_domain_keys",
    "fill_domain_keys",
    "is_unlimited",
    "limit_field",
    "normalize_limit",
    "number_field",
    "toggle_field",
    "trigger_field",
]
