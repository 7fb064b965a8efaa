from fastapi import Depends, Request

from app.config import Settings
from app.intergrations.base import BasePaymentProvider
from app.services.checkout_service import CheckoutService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_provider(request: Request) -> BasePaymentProvider:
    return request.app.state.provider


def get_checkout_service(
    settings: Settings = Depends(get_settings),
    provider: BasePaymentProvider = Depends(get_provider),
) -> CheckoutService:
    return CheckoutService(settings, provider)
