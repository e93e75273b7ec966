import os

# bookshop.main builds its app at import time from the environment
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_dummy")
os.environ.setdefault("STRIPE_PUBLISHABLE_KEY", "pk_test_dummy")

import pytest
from fastapi.testclient import TestClient

from bookshop.config import Settings
from bookshop.errors import GatewayError
from bookshop.main import create_app
from bookshop.models import IntentState, PaymentIntentRef


class FakeGateway:
    """In-memory stand-in for Stripe that records every call."""

    def __init__(self):
        self.intents = {}
        self.created = []
        self.retrieved = []
        self.error = None

    def create_intent(self, amount, currency):
        self.created.append((amount, currency))
        if self.error:
            raise GatewayError(self.error)
        intent_id = f"pi_fake_{len(self.created)}"
        self.intents[intent_id] = IntentState(id=intent_id, amount=amount, status="requires_payment_method")
        return PaymentIntentRef(id=intent_id, client_secret=f"{intent_id}_secret_test", amount=amount)

    def retrieve_intent(self, intent_id):
        self.retrieved.append(intent_id)
        if self.error:
            raise GatewayError(self.error)
        if intent_id not in self.intents:
            raise GatewayError(f"No such payment_intent: '{intent_id}'")
        return self.intents[intent_id]

    def settle(self, intent_id, status="succeeded"):
        """Simulate the browser-side confirmation finishing at Stripe."""
        intent = self.intents[intent_id]
        self.intents[intent_id] = intent.model_copy(update={"status": status})


@pytest.fixture
def settings():
    return Settings(stripe_secret_key="sk_test_123", stripe_publishable_key="pk_test_123")


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(settings, gateway):
    with TestClient(create_app(settings, gateway)) as c:
        yield c
