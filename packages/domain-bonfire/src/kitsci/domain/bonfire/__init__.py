"""kitsci Domain Bonfire -- bonfire construction settings."""

from kitsci.domain.bonfire.bonfire import BonfireBuildingSetting, BonfireSettings

__all__ = [
    "BonfireBuildingSetting",
    "BonfireSettings",
]
