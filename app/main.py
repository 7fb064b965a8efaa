import json
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

# Internal Imports
from app.api.checkout import router as checkout_router
from app.api.webhooks import router as webhook_router
from app.config import Settings, load_settings
from app.intergrations.base import BasePaymentProvider, PaymentError
from app.intergrations.paygate import PayGateProvider
from app.services.payload_builder import InvalidAmountError

logger = logging.getLogger("PayGate.App")


def create_app(settings: Optional[Settings] = None, provider: Optional[BasePaymentProvider] = None) -> FastAPI:
    # Missing PAYGATE_ID / PAYGATE_KEY raises ConfigError here and stops startup
    settings = settings or load_settings()

    app = FastAPI(title="PayGate PayWeb3 Checkout", version="1.0.0")
    app.state.settings = settings
    app.state.provider = provider or PayGateProvider(settings)

    # --- API ROUTERS ---
    # Callbacks first so /pay/return is not taken for a product slug
    app.include_router(webhook_router, prefix="/pay", tags=["Callbacks"])
    app.include_router(checkout_router, tags=["Checkout"])

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    # --- ERROR HANDLERS ---
    @app.exception_handler(InvalidAmountError)
    async def invalid_amount_handler(request: Request, exc: InvalidAmountError):
        logger.info(f"Rejected amount on {request.url.path}: {exc}")
        return PlainTextResponse("Error: Please provide a valid amount greater than 0.", status_code=400)

    @app.exception_handler(PaymentError)
    async def payment_error_handler(request: Request, exc: PaymentError):
        logger.error(f"{exc.provider_code} initiate failed: {exc.message}")
        if exc.raw_response is not None:
            return PlainTextResponse(f"Initiate failed: {json.dumps(exc.raw_response)}", status_code=500)
        return PlainTextResponse(f"Error: {exc.message}", status_code=500)

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception):
        return JSONResponse(
            status_code=404,
            content={"message": "Page not found. Visit / for the available payment options."}
        )

    return app


settings = load_settings()
logging.basicConfig(level=settings.log_level)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
