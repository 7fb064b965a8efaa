import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()


class ConfigError(RuntimeError):
    pass


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    paygate_id: str
    paygate_key: str
    base_url: str = "http://localhost:3000"
    port: int = 3000
    gateway_timeout: float = 30.0
    log_level: str = "INFO"

    @property
    def return_url(self) -> str:
        return f"{self.base_url}/pay/return"

    @property
    def notify_url(self) -> str:
        return f"{self.base_url}/pay/notify"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Reads process configuration. Missing merchant credentials are fatal."""
    env = os.environ if environ is None else environ

    paygate_id = env.get("PAYGATE_ID")
    paygate_key = env.get("PAYGATE_KEY")
    if not paygate_id or not paygate_key:
        raise ConfigError("Missing PAYGATE_ID or PAYGATE_KEY in environment")

    try:
        return Settings(
            paygate_id=paygate_id,
            paygate_key=paygate_key,
            base_url=(env.get("BASE_URL") or "http://localhost:3000").rstrip("/"),
            port=int(env.get("PORT") or 3000),
            gateway_timeout=float(env.get("GATEWAY_TIMEOUT") or 30),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )
    except ValueError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
