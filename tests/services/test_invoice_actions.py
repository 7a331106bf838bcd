"""Invoice Actions — orchestration of validate → persist → revalidate → redirect.

Tests cover:
    - valid create/update → store called with minor units, one revalidation, Redirect
    - invalid input → ErrorState, no store call, no revalidation
    - delete → store called, revalidation, Revalidated (no redirect)
    - strict persistence failure propagates and skips revalidation
    - best-effort persistence failure still redirects
"""

import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from dashboard.core.domain_types import InvoiceStatus
from dashboard.core.errors import PersistenceError
from dashboard.core.outcomes import ErrorState, Redirect, Revalidated
from dashboard.infrastructure.invoice_store import InvoiceStore
from dashboard.services.invoice_actions import InvoiceActions
from tests.services.fakes import RecordingInvoiceStore, RecordingRevalidator

TODAY = datetime.date(2026, 10, 19)


def _actions(store=None, revalidator=None) -> InvoiceActions:
    return InvoiceActions(
        store or RecordingInvoiceStore(),
        revalidator or RecordingRevalidator(),
        today=lambda: TODAY,
    )


# ─── create ──────────────────────────────────────────────────────

async def test_create_persists_minor_units_and_redirects():
    store, revalidator = RecordingInvoiceStore(), RecordingRevalidator()
    outcome = await _actions(store, revalidator).create(
        {"customerId": "c1", "amount": "99.99", "status": "paid"},
    )

    assert outcome == Redirect("/dashboard/invoices")
    assert store.calls == [("create", "c1", 9999, InvoiceStatus.PAID, TODAY)]
    assert revalidator.paths == ["/dashboard/invoices"]


async def test_create_twelve_fifty_is_1250_cents():
    store = RecordingInvoiceStore()
    await _actions(store).create(
        {"customerId": "c1", "amount": "12.50", "status": "pending"},
    )
    assert store.calls[0][2] == 1250


@pytest.mark.parametrize("amount", ["0", "-1", "-99.99", ""])
async def test_create_rejects_non_positive_amount_without_writing(amount):
    store, revalidator = RecordingInvoiceStore(), RecordingRevalidator()
    outcome = await _actions(store, revalidator).create(
        {"customerId": "c1", "amount": amount, "status": "paid"},
    )

    assert isinstance(outcome, ErrorState)
    assert outcome.errors["amount"] == ["Amount must be greater than $0"]
    assert store.calls == []
    assert revalidator.paths == []


async def test_create_reports_all_field_errors_with_create_message():
    outcome = await _actions().create({"amount": "10", "status": "late"})

    assert isinstance(outcome, ErrorState)
    assert outcome.message == "Missing Fields. Failed to create invoice"
    assert set(outcome.errors) == {"customerId", "status"}


async def test_create_uses_configured_path():
    revalidator = RecordingRevalidator()
    actions = InvoiceActions(
        RecordingInvoiceStore(), revalidator,
        invoices_path="/admin/invoices", today=lambda: TODAY,
    )
    outcome = await actions.create(
        {"customerId": "c1", "amount": "1", "status": "paid"},
    )
    assert outcome == Redirect("/admin/invoices")
    assert revalidator.paths == ["/admin/invoices"]


# ─── update ──────────────────────────────────────────────────────

async def test_update_persists_and_redirects():
    store, revalidator = RecordingInvoiceStore(), RecordingRevalidator()
    outcome = await _actions(store, revalidator).update(
        "inv-1", {"customerId": "c2", "amount": "157.95", "status": "pending"},
    )

    assert outcome == Redirect("/dashboard/invoices")
    assert store.calls == [("update", "inv-1", "c2", 15795, InvoiceStatus.PENDING)]
    assert revalidator.paths == ["/dashboard/invoices"]


async def test_update_invalid_uses_update_message():
    store = RecordingInvoiceStore()
    outcome = await _actions(store).update("inv-1", {"customerId": "c1"})

    assert isinstance(outcome, ErrorState)
    assert outcome.message == "Missing Fields. Failed to update invoice"
    assert set(outcome.errors) == {"amount", "status"}
    assert store.calls == []


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_revalidates_without_redirect():
    store, revalidator = RecordingInvoiceStore(), RecordingRevalidator()
    outcome = await _actions(store, revalidator).delete("inv-1")

    assert outcome == Revalidated("/dashboard/invoices")
    assert store.calls == [("delete", "inv-1")]
    assert revalidator.paths == ["/dashboard/invoices"]


# ─── persistence policy ──────────────────────────────────────────

async def test_strict_failure_propagates_and_skips_revalidation():
    store = RecordingInvoiceStore(error=PersistenceError("create"))
    revalidator = RecordingRevalidator()

    with pytest.raises(PersistenceError):
        await _actions(store, revalidator).create(
            {"customerId": "c1", "amount": "5", "status": "paid"},
        )
    assert revalidator.paths == []


async def test_best_effort_failure_still_redirects():
    db = MagicMock()
    db.execute = AsyncMock(
        side_effect=OperationalError("INSERT INTO invoices", {}, Exception("connection lost")),
    )
    db.rollback = AsyncMock()
    revalidator = RecordingRevalidator()
    store = InvoiceStore(db, best_effort=True)

    outcome = await _actions(store, revalidator).create(
        {"customerId": "c1", "amount": "5", "status": "paid"},
    )

    assert outcome == Redirect("/dashboard/invoices")
    assert revalidator.paths == ["/dashboard/invoices"]
    db.rollback.assert_awaited_once()
