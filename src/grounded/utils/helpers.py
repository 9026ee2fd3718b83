"""
General helper functions
"""
from typing import Any, List, Optional
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what the database columns store"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_money(value: Any) -> Decimal:
    """Round a numeric value to whole cents"""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(value: Any) -> str:
    """Format an amount as a dollar string, e.g. $82.50"""
    return f"${to_money(value):,.2f}"


def format_time_ago(when: datetime, now: Optional[datetime] = None) -> str:
    """
    Human label for how long ago something happened.

    Minutes under an hour, hours under a day, "Yesterday" for exactly one
    day, whole days otherwise. Future times count as just now.
    """
    now = now or utcnow()
    seconds = max(0, int((now - when).total_seconds()))
    minutes = seconds // 60
    hours = seconds // 3600
    days = seconds // 86400

    if minutes < 60:
        return f"{minutes} minutes ago"
    elif hours < 24:
        return f"{hours} hours ago"
    elif days == 1:
        return "Yesterday"
    return f"{days} days ago"


def ensure_list(value: Any) -> List[Any]:
    """
    Coerce a multi-valued field into a list.

    Absent or empty values become ``[]``, lists/tuples/sets are copied into a
    list and any other scalar is wrapped as a single-element list.
    """
    if value is None or value == "":
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]
