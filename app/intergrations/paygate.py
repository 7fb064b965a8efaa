from typing import Optional, Sequence
from urllib.parse import parse_qsl

import httpx

from .base import BasePaymentProvider, PaymentError
from app.config import Settings
from app.core.security import verify_checksum
from app.schemas.paygate import GatewayResponse, InitiatePayload

INITIATE_URL = "https://secure.paygate.co.za/payweb3/initiate.trans"
PROCESS_URL = "https://secure.paygate.co.za/payweb3/process.trans"


def decode_form(body: str) -> dict:
    # PayGate answers KEY=VALUE&KEY=VALUE...
    return dict(parse_qsl(body, keep_blank_values=True))


class PayGateProvider(BasePaymentProvider):
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__()
        self.settings = settings
        self.transport = transport

    async def initiate(self, payload: InitiatePayload) -> GatewayResponse:
        self.logger.info(f"[PAYGATE] Initiating payment for {payload.reference} ({payload.amount} cents)")

        async with httpx.AsyncClient(transport=self.transport, timeout=self.settings.gateway_timeout) as client:
            try:
                response = await client.post(
                    INITIATE_URL,
                    data=payload.as_form(),
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
            except httpx.HTTPError as e:
                self.logger.error(f"PayGate Connection Failed: {e!r}")
                raise PaymentError(f"Could not connect to PayGate: {e}", "PAYGATE")

        data = decode_form(response.text)

        if not response.is_success:
            self.logger.error(f"PayGate rejected initiate with HTTP {response.status_code}: {data}")
            raise PaymentError(f"PayGate returned HTTP {response.status_code}", "PAYGATE", data)

        result = GatewayResponse(data=data)
        if not result.is_valid:
            self.logger.error(f"PayGate initiate response incomplete for {payload.reference}: {data}")
            message = "PayGate response missing PAY_REQUEST_ID or CHECKSUM"
            if result.error:
                message = f"{message} (ERROR={result.error})"
            raise PaymentError(message, "PAYGATE", data)

        self.logger.info(f"[PAYGATE] Request {result.pay_request_id} created for {payload.reference}")
        return result

    def verify_webhook(self, fields: Sequence[str], checksum: str) -> bool:
        return verify_checksum(fields, self.settings.paygate_key, checksum)
