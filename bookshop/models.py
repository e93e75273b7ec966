from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

CENTS = Decimal("0.01")


def to_major_units(amount: int) -> Decimal:
    """Convert an integer amount in minor units (cents) to major units."""
    return (Decimal(amount) / 100).quantize(CENTS)


class IntentStatus(str, Enum):
    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_ACTION = "requires_action"
    PROCESSING = "processing"
    REQUIRES_CAPTURE = "requires_capture"
    CANCELED = "canceled"
    SUCCEEDED = "succeeded"


HEADLINES = {
    IntentStatus.SUCCEEDED: "Thank you for your order!",
    IntentStatus.PROCESSING: "Your payment is processing.",
    IntentStatus.REQUIRES_CAPTURE: "Your payment is authorized.",
    IntentStatus.REQUIRES_ACTION: "Your payment needs further action.",
    IntentStatus.REQUIRES_PAYMENT_METHOD: "Your payment was not successful.",
    IntentStatus.REQUIRES_CONFIRMATION: "Your payment was not confirmed.",
    IntentStatus.CANCELED: "Your payment was canceled.",
}


class CatalogItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    unit_amount: int                                # minor units


class CheckoutSelection(BaseModel):
    item: Optional[CatalogItem] = None
    error: Optional[str] = None


class PaymentIntentRef(BaseModel):
    id: str                                         # Stripe PaymentIntent ID
    client_secret: str
    amount: int


class IntentState(BaseModel):
    id: str
    amount: int
    status: str                                     # as reported by Stripe


class PaymentOutcome(BaseModel):
    amount: Optional[Decimal] = None                # major units
    intent_id: Optional[str] = None
    status: Optional[str] = None
    error: Optional[str] = None

    @property
    def headline(self) -> str:
        if self.error:
            return "Something went wrong"
        try:
            return HEADLINES[IntentStatus(self.status)]
        except ValueError:
            return f"Payment status: {self.status}"
