"""Invoice Form Schema — alias handling and typed error codes."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from dashboard.core.domain_types import InvoiceStatus
from dashboard.schemas.invoice import InvoiceForm


def test_accepts_alias_and_field_name():
    by_alias = InvoiceForm.model_validate({"customerId": "c1", "amount": "3", "status": "paid"})
    by_name = InvoiceForm(customer_id="c1", amount="3", status="paid")
    assert by_alias == by_name
    assert by_alias.amount == Decimal("3.00")
    assert by_alias.status is InvoiceStatus.PAID


def test_error_types_are_domain_kinds():
    with pytest.raises(ValidationError) as exc_info:
        InvoiceForm.model_validate({"customerId": "", "amount": "-1", "status": "x"})
    types = {e["loc"][0]: e["type"] for e in exc_info.value.errors()}
    assert types == {
        "customerId": "invalid_type",
        "amount": "constraint_violation",
        "status": "invalid_type",
    }
