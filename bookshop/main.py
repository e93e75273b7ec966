import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from bookshop.config import Settings
from bookshop.routes import router
from bookshop.stripe_service import PaymentGateway, StripeGateway

STATIC_DIR = Path(__file__).resolve().parent / "static"


def create_app(settings: Optional[Settings] = None, gateway: Optional[PaymentGateway] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Bookshop Checkout")

    # One gateway per process, handed to each request's orchestrator
    app.state.settings = settings
    app.state.gateway = gateway or StripeGateway(settings.stripe_secret_key)

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    app.include_router(router)

    return app


app = create_app()
