"""kitsci Domain Trade -- trade and embassy settings."""

from kitsci.domain.trade.embassy import EmbassySetting, EmbassySettings
from kitsci.domain.trade.trade import BLACKCOIN_TRIGGER, TradeSettings, TradeSettingsItem

__all__ = [
    "BLACKCOIN_TRIGGER",
    "EmbassySetting",
    "EmbassySettings",
    "TradeSettings",
    "TradeSettingsItem",
]
