from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

from app.config import Settings
from app.core.security import compute_checksum
from app.schemas.paygate import InitiatePayload, PaymentRequest

LOCALE = "en-za"
COUNTRY = "ZAF"


class InvalidAmountError(ValueError):
    pass


def parse_amount_cents(raw: Optional[str]) -> int:
    """Converts a Rand amount such as "19.99" to integer cents, rounding half up."""
    try:
        amount = Decimal(str(raw).strip())
    except (InvalidOperation, TypeError):
        raise InvalidAmountError(f"Amount '{raw}' is not a number")

    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError(f"Amount '{raw}' must be greater than 0")

    try:
        cents = int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        raise InvalidAmountError(f"Amount '{raw}' is too large")
    if cents < 1:
        raise InvalidAmountError(f"Amount '{raw}' is less than one cent")
    return cents


def format_transaction_date(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def build_initiate_payload(
    request: PaymentRequest,
    settings: Settings,
    now: Optional[datetime] = None,
) -> InitiatePayload:
    # One timestamp for both the stored field and the checksum source
    moment = now or datetime.now()

    unsigned = InitiatePayload(
        paygate_id=settings.paygate_id,
        reference=request.reference,
        amount=str(request.amount_cents),
        currency=request.currency,
        return_url=settings.return_url,
        transaction_date=format_transaction_date(moment),
        locale=LOCALE,
        country=COUNTRY,
        email=request.email or "",
        notify_url=settings.notify_url,
        user1=request.user1_tag or "",
    )
    checksum = compute_checksum(unsigned.checksum_fields(), settings.paygate_key)
    return unsigned.model_copy(update={"checksum": checksum})
