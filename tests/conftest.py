import asyncio
import os
from datetime import timedelta

os.environ.setdefault("JWT_SECRET_KEY", "bistro-boss-test-signing-secret-0123456789")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.core.error_messages import PaymentProviderError
from app.database import MongoDB
from app.main import create_app
from app.models.user import Role
from app.services.payment.base import BasePaymentGateway, PaymentIntent
from app.utils.auth_utils import create_access_token

ADMIN_EMAIL = "admin@example.com"
USER_EMAIL = "diner@example.com"


class RecordingGateway(BasePaymentGateway):
    """Stands in for Stripe; remembers every amount it was asked for."""

    def __init__(self):
        self.calls = []
        self.fail_with = None

    @property
    def provider_name(self) -> str:
        return "recording"

    async def create_payment_intent(self, amount: int, currency: str) -> PaymentIntent:
        self.calls.append((amount, currency))
        if self.fail_with:
            raise self.fail_with
        return PaymentIntent(
            id=f"pi_test_{len(self.calls)}",
            client_secret=f"pi_test_{len(self.calls)}_secret",
            amount=amount,
            currency=currency,
        )


def run(coro):
    return asyncio.run(coro)


def bearer(email: str, expires_delta: timedelta = None) -> dict:
    data = {"email": email}
    token = create_access_token(data, expires_delta) if expires_delta else create_access_token(data)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def mongo():
    return MongoDB(AsyncMongoMockClient(), "bistroDB")


@pytest.fixture
def gateway():
    return RecordingGateway()


@pytest.fixture
def client(mongo, gateway):
    return TestClient(create_app(mongo=mongo, payment_gateway=gateway))


@pytest.fixture
def admin(mongo):
    run(mongo.users.insert_one({"email": ADMIN_EMAIL, "name": "Admin", "role": Role.ADMIN.value}))
    return bearer(ADMIN_EMAIL)


@pytest.fixture
def diner(mongo):
    run(mongo.users.insert_one({"email": USER_EMAIL, "name": "Diner", "role": Role.DEFAULT.value}))
    return bearer(USER_EMAIL)


@pytest.fixture
def provider_error():
    return PaymentProviderError("Your card was declined.", code="card_declined")
