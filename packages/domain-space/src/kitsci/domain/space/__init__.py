"""kitsci Domain Space -- space construction and mission settings."""

from kitsci.domain.space.missions import MissionSetting, MissionSettings
from kitsci.domain.space.space import SpaceBuildingSetting, SpaceSettings

__all__ = [
    "MissionSetting",
    "MissionSettings",
    "SpaceBuildingSetting",
    "SpaceSettings",
]
