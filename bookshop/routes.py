from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, field_validator

from bookshop import catalog
from bookshop.errors import GatewayError, SelectionError
from bookshop.models import to_major_units
from bookshop.orchestrator import CheckoutOrchestrator

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["major_units"] = to_major_units

router = APIRouter()


class PaymentIntentRequest(BaseModel):
    item: Optional[str] = None
    amount: Optional[int] = None

    @field_validator("item", mode="before")
    @classmethod
    def _item_id(cls, value):
        # browsers may post the id as a number: {"item": 1}
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


def get_orchestrator(request: Request) -> CheckoutOrchestrator:
    settings = request.app.state.settings
    return CheckoutOrchestrator(
        request.app.state.gateway,
        currency=settings.currency,
        expose_gateway_errors=settings.expose_gateway_errors,
    )


@router.get("/")
def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"items": catalog.all_items()})


@router.get("/checkout")
def checkout(
    request: Request,
    item: Optional[str] = None,
    orchestrator: CheckoutOrchestrator = Depends(get_orchestrator),
):
    selection = orchestrator.select(item)
    selected = selection.item

    return templates.TemplateResponse(request, "checkout.html", {
        "item_id": selected.id if selected else None,
        "title": selected.title if selected else None,
        "amount": selected.unit_amount if selected else None,
        "error": selection.error,
        "publishable_key": request.app.state.settings.stripe_publishable_key,
    })


@router.post("/create-payment-intent")
def create_payment_intent(
    payload: PaymentIntentRequest,
    orchestrator: CheckoutOrchestrator = Depends(get_orchestrator),
):
    try:
        intent = orchestrator.create_intent(item_id=payload.item, amount=payload.amount)
    except SelectionError as err:
        return JSONResponse(status_code=400, content={"error": str(err)})
    except GatewayError as err:
        return JSONResponse(status_code=500, content={"error": orchestrator.describe_error(err)})

    return {"client_secret": intent.client_secret}


@router.get("/success")
def success(
    request: Request,
    payment_intent: Optional[str] = None,
    orchestrator: CheckoutOrchestrator = Depends(get_orchestrator),
):
    outcome = orchestrator.resolve(payment_intent)
    return templates.TemplateResponse(request, "success.html", {"outcome": outcome})
