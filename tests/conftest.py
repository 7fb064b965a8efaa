import os

# app.main reads these at import time
os.environ.setdefault("PAYGATE_ID", "10011072130")
os.environ.setdefault("PAYGATE_KEY", "secret")
os.environ.setdefault("BASE_URL", "http://testserver")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.intergrations.base import BasePaymentProvider
from app.core.security import verify_checksum
from app.main import create_app
from app.schemas.paygate import GatewayResponse


class FakePayGate(BasePaymentProvider):
    """Records initiate calls and answers with a canned gateway response."""

    def __init__(self, settings, response=None, error=None):
        super().__init__()
        self.settings = settings
        self.response = response if response is not None else {"PAY_REQUEST_ID": "PR-1", "CHECKSUM": "abc123"}
        self.error = error
        self.calls = []

    async def initiate(self, payload):
        self.calls.append(payload)
        if self.error:
            raise self.error
        return GatewayResponse(data=self.response)

    def verify_webhook(self, fields, checksum):
        return verify_checksum(fields, self.settings.paygate_key, checksum)


@pytest.fixture
def settings():
    return Settings(paygate_id="M1", paygate_key="S", base_url="http://testserver")


@pytest.fixture
def gateway(settings):
    return FakePayGate(settings)


@pytest.fixture
def client(settings, gateway):
    app = create_app(settings, provider=gateway)
    with TestClient(app) as test_client:
        yield test_client
