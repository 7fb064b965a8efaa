import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from app.api.deps import get_checkout_service
from app.services.checkout_service import CheckoutService, PRODUCTS
from app.services.pages import render_landing, render_payment_form, render_redirect_form

router = APIRouter()
logger = logging.getLogger("PayGate.Checkout")


@router.get("/", response_class=HTMLResponse)
async def landing_page():
    return HTMLResponse(render_landing(PRODUCTS.values()))


@router.get("/pay/{benefit}", response_class=HTMLResponse)
async def pay_for_benefit(
    benefit: str,
    amount: Optional[str] = None,
    member_id: Optional[str] = Query(None, alias="memberId"),
    email: Optional[str] = None,
    service: CheckoutService = Depends(get_checkout_service),
):
    product = PRODUCTS.get(benefit)
    if not product:
        raise HTTPException(status_code=404, detail="Payment option not found")

    if not amount:
        return HTMLResponse(render_payment_form(product.slug, product.name))

    # InvalidAmountError and PaymentError are turned into responses by the app handlers
    init = await service.start_payment(product, amount, member_id=member_id, email=email)
    logger.info(f"Redirecting payer to PayGate for request {init.pay_request_id}")
    return HTMLResponse(render_redirect_form(init.pay_request_id, init.checksum))
