"""Money Conversion — decimal major units to integer minor units."""

from decimal import Decimal

import pytest

from dashboard.core.money import round_to_minor_unit, to_minor_units


@pytest.mark.parametrize("amount, expected", [
    ("12.50", 1250),
    ("99.99", 9999),
    ("10", 1000),
    ("0.01", 1),
    ("157.95", 15795),
])
def test_to_minor_units(amount, expected):
    result = to_minor_units(Decimal(amount))
    assert result == expected
    assert isinstance(result, int)


def test_rounding_is_half_up():
    assert round_to_minor_unit(Decimal("1.005")) == Decimal("1.01")
    assert round_to_minor_unit(Decimal("1.004")) == Decimal("1.00")
    assert to_minor_units(Decimal("2.675")) == 268
