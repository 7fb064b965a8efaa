from abc import ABC, abstractmethod
from typing import Any, Sequence
import logging

from app.schemas.paygate import GatewayResponse, InitiatePayload


class PaymentError(Exception):
    def __init__(self, message: str, provider_code: str, raw_response: Any = None):
        self.message = message
        self.provider_code = provider_code
        self.raw_response = raw_response
        super().__init__(self.message)


class BasePaymentProvider(ABC):
    def __init__(self):
        self.logger = logging.getLogger(f"PayGate.Provider.{self.__class__.__name__}")

    @abstractmethod
    async def initiate(self, payload: InitiatePayload) -> GatewayResponse:
        pass

    @abstractmethod
    def verify_webhook(self, fields: Sequence[str], checksum: str) -> bool:
        pass
