import logging
from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import ValidationError

from app.api.deps import get_provider, get_settings
from app.config import Settings
from app.intergrations.base import BasePaymentProvider
from app.schemas.paygate import NotifyPayload, ReturnPayload
from app.services.pages import render_status_page


router = APIRouter()
logger = logging.getLogger("PayGate.Webhooks")


async def read_callback_body(request: Request) -> dict:
    """PayGate posts form-encoded data; JSON bodies are accepted as well."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


@router.get("/return", response_class=HTMLResponse)
async def payment_return(
    request: Request,
    settings: Settings = Depends(get_settings),
    provider: BasePaymentProvider = Depends(get_provider),
):
    """Browser redirect after payment. Display only; /notify carries the authoritative result."""
    payload = ReturnPayload.model_validate(dict(request.query_params))

    # A checksum is only enforced when the gateway sends one
    if payload.checksum:
        if not provider.verify_webhook(payload.checksum_fields(settings.paygate_id), payload.checksum):
            logger.warning(
                f"SECURITY: Rejected return with invalid checksum "
                f"(reference={payload.reference}, request={payload.pay_request_id})"
            )
            return PlainTextResponse("Invalid transaction data", status_code=400)

    return HTMLResponse(render_status_page(
        payload.transaction_status or "0",
        payload.reference,
        payload.transaction_id,
    ))


@router.post("/notify")
async def payment_notify(
    request: Request,
    provider: BasePaymentProvider = Depends(get_provider),
):
    body = await read_callback_body(request)
    try:
        payload = NotifyPayload.model_validate(body)
    except ValidationError as e:
        logger.warning(f"Malformed notify body rejected: {e.error_count()} invalid fields")
        return PlainTextResponse("ERROR", status_code=400)

    if not provider.verify_webhook(payload.checksum_fields(), payload.checksum):
        logger.warning(
            f"SECURITY: Rejected notify with invalid checksum "
            f"(reference={payload.reference}, request={payload.pay_request_id})"
        )
        return PlainTextResponse("ERROR", status_code=400)

    logger.info(
        "Payment notification received: "
        f"reference={payload.reference} status={payload.transaction_status} "
        f"transaction_id={payload.transaction_id} result_code={payload.result_code} "
        f"amount={payload.amount} result_desc={payload.result_desc}"
    )

    # PayGate keeps redelivering until it sees exactly "OK"
    return PlainTextResponse("OK", status_code=200)
