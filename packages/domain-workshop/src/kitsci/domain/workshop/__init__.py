"""kitsci Domain Workshop -- resource reserve settings."""

from kitsci.domain.workshop.resources import DEFAULT_CONSUME_RATE, ResourcesSettings, ResourcesSettingsItem

__all__ = [
    "DEFAULT_CONSUME_RATE",
    "ResourcesSettings",
    "ResourcesSettingsItem",
]
