"""
Helpers shared by the domain models
"""
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as returned by SQLite) as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def round_money(value: Decimal) -> Decimal:
    """Round an amount to cents"""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
