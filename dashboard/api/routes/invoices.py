"""Invoice Routes — form-encoded create/update/delete behind a signed-in session.

Invariants:
    - Every route requires a session user (require_user)
    - Redirect → 303 See Other; ErrorState → 422 with {errors, message}
    - Delete → 204; the caller stays on its current view
    - Responses carry X-View-Version for the revalidated invoices path
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse

from dashboard.api.deps import get_invoice_actions, get_revalidator, require_user
from dashboard.core.domain_types import InvoiceId
from dashboard.core.outcomes import ActionOutcome, Redirect
from dashboard.infrastructure.revalidation import VersionedPathRevalidator
from dashboard.services.invoice_actions import InvoiceActions

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/invoices", tags=["invoices"],
    dependencies=[Depends(require_user)],
)

VIEW_VERSION_HEADER = "X-View-Version"


@router.post("")
async def create_invoice(
    request: Request,
    actions: InvoiceActions = Depends(get_invoice_actions),
    revalidator: VersionedPathRevalidator = Depends(get_revalidator),
):
    """Create an invoice from form fields customerId, amount, status."""
    form = await request.form()
    outcome = await actions.create(form)
    return _render(outcome, revalidator)


@router.put("/{invoice_id}")
async def update_invoice(
    invoice_id: str,
    request: Request,
    actions: InvoiceActions = Depends(get_invoice_actions),
    revalidator: VersionedPathRevalidator = Depends(get_revalidator),
):
    """Replace customer, amount and status of an invoice."""
    form = await request.form()
    outcome = await actions.update(InvoiceId(invoice_id), form)
    return _render(outcome, revalidator)


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_id: str,
    actions: InvoiceActions = Depends(get_invoice_actions),
    revalidator: VersionedPathRevalidator = Depends(get_revalidator),
):
    """Delete an invoice; a missing id is not an error."""
    outcome = await actions.delete(InvoiceId(invoice_id))
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers={VIEW_VERSION_HEADER: str(revalidator.version(outcome.path))},
    )


def _render(outcome: ActionOutcome, revalidator: VersionedPathRevalidator):
    if isinstance(outcome, Redirect):
        return RedirectResponse(
            url=outcome.path,
            status_code=status.HTTP_303_SEE_OTHER,
            headers={VIEW_VERSION_HEADER: str(revalidator.version(outcome.path))},
        )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=outcome.to_response(),
    )
