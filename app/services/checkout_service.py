import time
from typing import Dict, NamedTuple, Optional

from app.config import Settings
from app.intergrations.base import BasePaymentProvider
from app.schemas.paygate import GatewayResponse, PaymentRequest
from app.services.payload_builder import build_initiate_payload, parse_amount_cents

DEFAULT_MEMBER_ID = "GEN"


class Product(NamedTuple):
    slug: str
    name: str
    description: str
    reference_prefix: str
    user1_tag: str


PRODUCTS: Dict[str, Product] = {
    "benefit-a": Product(
        slug="benefit-a",
        name="Chauffeur Drive",
        description="Premium chauffeur service payment",
        reference_prefix="CHAUFFEUR-DRIVE",
        user1_tag="CHAUFFEUR_DRIVE",
    ),
    "benefit-b": Product(
        slug="benefit-b",
        name="Luxury African Safari",
        description="Luxury safari experience payment",
        reference_prefix="SAFARI",
        user1_tag="LUXURY_SAFARI",
    ),
}


def make_reference(product: Product, member_id: str, now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return f"{product.reference_prefix}-{member_id}-{now_ms}"


class CheckoutService:
    def __init__(self, settings: Settings, provider: BasePaymentProvider):
        self.settings = settings
        self.provider = provider

    async def start_payment(
        self,
        product: Product,
        amount: str,
        member_id: Optional[str] = None,
        email: Optional[str] = None,
    ) -> GatewayResponse:
        """Validates the amount, signs the initiate payload and opens a PayGate request."""
        amount_cents = parse_amount_cents(amount)

        request = PaymentRequest(
            reference=make_reference(product, member_id or DEFAULT_MEMBER_ID),
            amount_cents=amount_cents,
            email=email or "",
            user1_tag=product.user1_tag,
        )
        payload = build_initiate_payload(request, self.settings)
        return await self.provider.initiate(payload)
