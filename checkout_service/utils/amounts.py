"""
Donation amount validation and minor-unit conversion.

Amounts arrive in the major unit (Naira) and Stripe wants an integer in the
minor unit (kobo). Conversion goes through Decimal built from the value's
shortest repr, rounding half up, so 25.005 -> 2501 instead of the 2500 a
float multiply would give.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP

from checkout_service.errors import InvalidAmount

MINOR_UNITS_PER_MAJOR = 100
# Stripe amounts are 64-bit integers; 1e16 NGN is already 1e18 kobo
MAX_AMOUNT_EXPONENT = 16

# ASCII only: Decimal() would also take "1_000" and non-Latin digits
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_amount(raw) -> Decimal:
    """
    Validate a caller-supplied amount. Accepts JSON numbers and plain
    decimal strings; raises InvalidAmount for anything missing, non-numeric,
    non-finite or <= 0.
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidAmount(raw)

    if isinstance(raw, float):
        if not math.isfinite(raw):
            raise InvalidAmount(raw)
        text = repr(raw)
    elif isinstance(raw, int):
        text = str(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not _NUMBER_RE.fullmatch(text):
            raise InvalidAmount(raw)
    else:
        raise InvalidAmount(raw)

    amount = Decimal(text)
    if amount <= 0:
        raise InvalidAmount(raw)
    return amount


def to_minor_units(amount: Decimal) -> int:
    """
    Round to the nearest kobo. Raises InvalidAmount for amounts at or above
    10**MAX_AMOUNT_EXPONENT, which no gateway would take.
    """
    if amount.adjusted() >= MAX_AMOUNT_EXPONENT:
        raise InvalidAmount(amount)
    # at most 19 significant digits here, well inside the default precision
    rounded = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return int(rounded * MINOR_UNITS_PER_MAJOR)


def amount_to_minor_units(raw) -> int:
    """parse_amount + to_minor_units; amounts that round to 0 are invalid."""
    try:
        minor = to_minor_units(parse_amount(raw))
    except InvalidAmount:
        raise InvalidAmount(raw) from None
    if minor <= 0:
        raise InvalidAmount(raw)
    return minor
