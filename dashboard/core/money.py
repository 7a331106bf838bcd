"""Money Conversion — decimal currency amounts to integer minor units.

Invariants:
    - Amounts are Decimal end to end; floats never enter the conversion
    - Rounding is half-up to the nearest minor unit
    - MAX_AMOUNT is the largest amount whose minor units fit the BIGINT column
"""

from decimal import ROUND_HALF_UP, Decimal

from dashboard.core.domain_types import AmountMinorUnits

MINOR_UNITS_PER_MAJOR = 100
# invoices.amount is BIGINT
MAX_AMOUNT_MINOR_UNITS = 2**63 - 1
MAX_AMOUNT = Decimal(MAX_AMOUNT_MINOR_UNITS) / MINOR_UNITS_PER_MAJOR
_ONE_MINOR_UNIT = Decimal("0.01")


def round_to_minor_unit(amount: Decimal) -> Decimal:
    """Round a major-unit amount to two decimal places, half-up."""
    return amount.quantize(_ONE_MINOR_UNIT, rounding=ROUND_HALF_UP)


def to_minor_units(amount: Decimal) -> AmountMinorUnits:
    """Convert a major-unit amount (e.g. dollars) to minor units (cents)."""
    return AmountMinorUnits(int(round_to_minor_unit(amount) * MINOR_UNITS_PER_MAJOR))
