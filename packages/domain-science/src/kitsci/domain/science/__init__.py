"""kitsci Domain Science -- research and policy settings."""

from kitsci.domain.science.policies import PolicySetting, PolicySettings
from kitsci.domain.science.techs import TechSetting, TechSettings
from kitsci.domain.science.unlocking import UnlockingSettings

__all__ = [
    "PolicySetting",
    "PolicySettings",
    "TechSetting",
    "TechSettings",
    "UnlockingSettings",
]
