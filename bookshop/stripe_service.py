import logging
from typing import Protocol

import stripe

from bookshop.errors import GatewayError
from bookshop.models import IntentState, PaymentIntentRef

logger = logging.getLogger(__name__)


class PaymentGateway(Protocol):
    def create_intent(self, amount: int, currency: str) -> PaymentIntentRef:
        ...

    def retrieve_intent(self, intent_id: str) -> IntentState:
        ...


def _gateway_error(err: stripe.StripeError) -> GatewayError:
    # user_message drops the "Request req_...:" prefix Stripe adds to str(err)
    return GatewayError(err.user_message or str(err))


class StripeGateway:
    """Payment gateway backed by the Stripe PaymentIntents API.

    The secret key travels with every call instead of living in the
    module-global ``stripe.api_key``, so several gateways can coexist.
    """

    def __init__(self, secret_key: str):
        self.secret_key = secret_key

    def create_intent(self, amount: int, currency: str) -> PaymentIntentRef:
        try:
            intent = stripe.PaymentIntent.create(
                api_key=self.secret_key,
                amount=amount,
                currency=currency,
                automatic_payment_methods={"enabled": True},
            )
        except stripe.StripeError as err:
            logger.error("PaymentIntent creation failed for %s %s: %s", amount, currency, err)
            raise _gateway_error(err) from err
        except Exception as err:
            logger.exception("PaymentIntent creation failed for %s %s", amount, currency)
            raise GatewayError(str(err)) from err

        logger.info("Created PaymentIntent %s for %s %s", intent.id, amount, currency)
        return PaymentIntentRef(id=intent.id, client_secret=intent.client_secret, amount=intent.amount)

    def retrieve_intent(self, intent_id: str) -> IntentState:
        try:
            intent = stripe.PaymentIntent.retrieve(intent_id, api_key=self.secret_key)
        except stripe.StripeError as err:
            logger.error("PaymentIntent %s retrieval failed: %s", intent_id, err)
            raise _gateway_error(err) from err
        except Exception as err:
            logger.exception("PaymentIntent %s retrieval failed", intent_id)
            raise GatewayError(str(err)) from err

        return IntentState(id=intent.id, amount=intent.amount, status=intent.status)
