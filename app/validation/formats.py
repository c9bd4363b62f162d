"""Field formats shared by the validator and the points engine.

The parse helpers raise ValueError on bad input. The validator turns that
into a user-facing reason; the engine treats it as an internal error since
it only ever sees validated receipts.
"""
import math
import re
from datetime import date, datetime, time

# ASCII only
RETAILER_PATTERN = re.compile(r"[A-Za-z0-9 \-&]+")
DESCRIPTION_PATTERN = re.compile(r"[A-Za-z0-9 \-]+")
AMOUNT_PATTERN = re.compile(r"[0-9]+\.[0-9]{2}")

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")

ALPHANUMERIC = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")


def is_valid_retailer(value: str) -> bool:
    return bool(value) and RETAILER_PATTERN.fullmatch(value) is not None


def is_valid_description(value: str) -> bool:
    return bool(value) and DESCRIPTION_PATTERN.fullmatch(value) is not None


def is_valid_amount(value: str) -> bool:
    """Exactly two fractional digits, no sign, no exponent, and small enough
    to read as a finite float."""
    if AMOUNT_PATTERN.fullmatch(value) is None:
        return False
    return math.isfinite(float(value))


def parse_purchase_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD calendar date."""
    if DATE_PATTERN.fullmatch(value) is None:
        raise ValueError(f"'{value}' is not in YYYY-MM-DD format")
    # strptime rejects impossible dates such as 2022-13-01 or 2022-02-30
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_purchase_time(value: str) -> time:
    """Parse a zero-padded 24-hour HH:MM time."""
    if TIME_PATTERN.fullmatch(value) is None:
        raise ValueError(f"'{value}' is not in HH:MM format")
    return datetime.strptime(value, "%H:%M").time()


def parse_amount(value: str) -> float:
    """Parse a validated money string into a float."""
    if not is_valid_amount(value):
        raise ValueError(f"'{value}' is not a two-decimal amount")
    return float(value)


def parse_cents(value: str) -> int:
    """Parse a validated money string into whole cents, exactly."""
    if not is_valid_amount(value):
        raise ValueError(f"'{value}' is not a two-decimal amount")
    dollars, cents = value.split(".")
    return int(dollars) * 100 + int(cents)


def count_alphanumeric(value: str) -> int:
    """Count ASCII letters and digits."""
    return sum(1 for char in value if char in ALPHANUMERIC)
