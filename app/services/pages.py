import os
from typing import Iterable, Optional

from fastapi.templating import Jinja2Templates

from app.intergrations.paygate import PROCESS_URL
from app.schemas.paygate import TransactionStatus

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
templates = Jinja2Templates(directory=os.path.join(BASE_DIR, "templates"))

STATUS_DISPLAY = {
    TransactionStatus.APPROVED: {
        "title": "Payment Approved!",
        "message": "Your payment has been successfully processed.",
        "color": "#10b981",
        "icon": "✓",
        "footer": "You will receive a confirmation email shortly.",
    },
    TransactionStatus.DECLINED: {
        "title": "Payment Declined",
        "message": "Unfortunately, your payment was declined. Please try again or use a different payment method.",
        "color": "#ef4444",
        "icon": "✗",
        "footer": "Please contact support if you need assistance.",
    },
    TransactionStatus.PENDING: {
        "title": "Payment Pending",
        "message": "Your payment is being processed. You will receive a confirmation shortly.",
        "color": "#f59e0b",
        "icon": "⏱",
        "footer": "",
    },
}


def _render(name: str, **context) -> str:
    return templates.get_template(name).render(**context)


def render_landing(products: Iterable) -> str:
    return _render("landing.html", products=list(products))


def render_payment_form(benefit_type: str, benefit_name: str) -> str:
    return _render("payment_form.html", benefit_type=benefit_type, benefit_name=benefit_name)


def render_redirect_form(pay_request_id: str, checksum: str) -> str:
    return _render(
        "redirect.html",
        process_url=PROCESS_URL,
        pay_request_id=pay_request_id,
        checksum=checksum,
    )


def render_status_page(
    status: Optional[str],
    reference: Optional[str] = None,
    transaction_id: Optional[str] = None,
) -> str:
    outcome = TransactionStatus.from_code(status)
    return _render(
        "status.html",
        outcome=outcome.value,
        display=STATUS_DISPLAY[outcome],
        reference=reference,
        transaction_id=transaction_id,
    )
