import logging
from typing import Optional

from bookshop import catalog
from bookshop.errors import CheckoutError, GatewayError, MissingReference, SelectionError
from bookshop.models import (
    CheckoutSelection,
    PaymentIntentRef,
    PaymentOutcome,
    to_major_units,
)
from bookshop.stripe_service import PaymentGateway

logger = logging.getLogger(__name__)

INTENT_NOT_FOUND = "PaymentIntent not found"
GENERIC_GATEWAY_ERROR = "We could not reach the payment provider. Please try again."


class CheckoutOrchestrator:
    """Walks one shopper through selection, intent creation and resolution.

    Holds no per-shopper state: everything a step needs arrives with the
    request or is fetched again from the gateway, which stays the system of
    record for payment state.
    """

    def __init__(self, gateway: PaymentGateway, currency: str = "usd", expose_gateway_errors: bool = True):
        self.gateway = gateway
        self.currency = currency
        self.expose_gateway_errors = expose_gateway_errors

    def select(self, item_id: Optional[str]) -> CheckoutSelection:
        try:
            item = catalog.lookup(item_id)
        except SelectionError as err:
            return CheckoutSelection(error=str(err))
        return CheckoutSelection(item=item)

    def create_intent(self, item_id: Optional[str] = None, amount: Optional[int] = None) -> PaymentIntentRef:
        """Create a PaymentIntent charging the catalog price.

        The price always comes from the catalog. A client-supplied amount only
        picks an item when no item id is sent, and is otherwise ignored.
        """
        if item_id is not None:
            item = catalog.lookup(item_id)
            if amount is not None and amount != item.unit_amount:
                logger.warning(
                    "Ignoring client amount %s for item %s, charging %s",
                    amount, item.id, item.unit_amount,
                )
        elif amount is not None:
            item = catalog.find_by_amount(amount)
        else:
            raise SelectionError(catalog.NO_ITEM_SELECTED)

        return self.gateway.create_intent(item.unit_amount, self.currency)

    def resolve(self, intent_id: Optional[str]) -> PaymentOutcome:
        try:
            if not intent_id:
                raise MissingReference(INTENT_NOT_FOUND)
            state = self.gateway.retrieve_intent(intent_id)
        except CheckoutError as err:
            return PaymentOutcome(error=self.describe_error(err))

        logger.info("PaymentIntent %s is %s", state.id, state.status)
        return PaymentOutcome(
            amount=to_major_units(state.amount),
            intent_id=state.id,
            status=state.status,
        )

    def describe_error(self, err: CheckoutError) -> str:
        if isinstance(err, GatewayError) and not self.expose_gateway_errors:
            return GENERIC_GATEWAY_ERROR
        return str(err)
