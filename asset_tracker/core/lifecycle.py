# asset_tracker/core/lifecycle.py
from datetime import date
from enum import Enum
from typing import Optional

from asset_tracker.models.asset import Asset

CRITICAL_DAYS = 90
WARNING_DAYS = 180


class EolStatus(str, Enum):
    OK = "ok"
    WARNING = "warning"    # 91-180 days left
    CRITICAL = "critical"  # 90 days or less left


def classify(asset: Asset, today: Optional[date] = None) -> EolStatus:
    """Bucket an asset by time left before its end of life. Expired assets are OK."""
    days_left = asset.days_until_end_of_life(today or date.today())
    if 0 < days_left <= CRITICAL_DAYS:
        return EolStatus.CRITICAL
    if 0 < days_left <= WARNING_DAYS:
        return EolStatus.WARNING
    return EolStatus.OK
