import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

# Force-load .env (Windows-safe, reload-safe)
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

TRUTHY = {"1", "true", "yes", "on"}

# prices are stored in cents and displayed with a dollar sign
SUPPORTED_CURRENCIES = {"usd"}
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseModel):
    stripe_secret_key: str
    stripe_publishable_key: str
    currency: str = "usd"
    expose_gateway_errors: bool = True
    log_level: str = "INFO"

    @field_validator("stripe_secret_key")
    @classmethod
    def _secret_key(cls, value: str) -> str:
        # the secret key authenticates the server and must never reach a browser
        if not value.startswith(("sk_", "rk_")):
            raise ValueError("STRIPE_SECRET_KEY must be a secret (sk_) or restricted (rk_) key")
        return value

    @field_validator("stripe_publishable_key")
    @classmethod
    def _publishable_key(cls, value: str) -> str:
        if not value.startswith("pk_"):
            raise ValueError("STRIPE_PUBLISHABLE_KEY must be a publishable (pk_) key")
        return value

    @field_validator("currency")
    @classmethod
    def _currency(cls, value: str) -> str:
        value = value.lower()
        if value not in SUPPORTED_CURRENCIES:
            raise ValueError(f"CHECKOUT_CURRENCY must be one of {sorted(SUPPORTED_CURRENCIES)}")
        return value

    @field_validator("log_level")
    @classmethod
    def _log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}")
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(dotenv_path=ENV_PATH)

        secret_key = os.getenv("STRIPE_SECRET_KEY")
        publishable_key = os.getenv("STRIPE_PUBLISHABLE_KEY")
        if not secret_key or not publishable_key:
            raise RuntimeError(
                "STRIPE_SECRET_KEY and STRIPE_PUBLISHABLE_KEY must be set. Check your .env file."
            )

        try:
            return cls(
                stripe_secret_key=secret_key,
                stripe_publishable_key=publishable_key,
                currency=os.getenv("CHECKOUT_CURRENCY", "usd"),
                expose_gateway_errors=os.getenv("EXPOSE_GATEWAY_ERRORS", "true").lower() in TRUTHY,
                log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            )
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration: {err}") from err
