"""
Postpartum clock: elapsed days and weeks since delivery.
"""

import math
from datetime import date, datetime, time

SECONDS_PER_DAY = 60 * 60 * 24


def compute_days(delivery_date: date, now: date | datetime | None = None) -> int:
    """
    Whole days elapsed since delivery, rounded up.

    With a datetime, elapsed time is measured from midnight of the delivery
    date, so any part of a day counts as a full day. The distance is
    absolute: a delivery date after `now` still yields a positive count.
    """
    if now is None:
        now = date.today()

    if isinstance(now, datetime):
        delivered_at = datetime.combine(delivery_date, time.min, tzinfo=now.tzinfo)
        elapsed = abs((now - delivered_at).total_seconds())
        return math.ceil(elapsed / SECONDS_PER_DAY)

    return abs((now - delivery_date).days)


def compute_week(delivery_date: date, now: date | datetime | None = None) -> int:
    """
    Postpartum week: ceil(elapsed days / 7), never lower than 1.

    The delivery day itself (0 elapsed days) counts as week 1.
    """
    days = compute_days(delivery_date, now)
    return max(1, math.ceil(days / 7))


def days_since_delivery(delivery_date: date, today: date | None = None) -> int:
    """Completed days since delivery, for display. Zero before delivery."""
    today = today or date.today()
    return max(0, (today - delivery_date).days)
