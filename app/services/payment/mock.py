"""
Offline payment gateway.

Used when no Stripe key is configured so the checkout flow can be exercised
locally. The client secrets it returns are not accepted by Stripe.js.
"""

import logging
import uuid

from app.core.error_messages import PaymentProviderError
from app.services.payment.base import BasePaymentGateway, PaymentIntent

logger = logging.getLogger(__name__)


class MockPaymentGateway(BasePaymentGateway):

    @property
    def provider_name(self) -> str:
        return "mock"

    async def create_payment_intent(self, amount: int, currency: str) -> PaymentIntent:
        if amount <= 0:
            raise PaymentProviderError("Amount must be greater than 0", code="invalid_amount")

        intent_id = f"pi_mock_{uuid.uuid4().hex[:24]}"
        logger.debug("Mock: created payment intent %s", intent_id)
        return PaymentIntent(
            id=intent_id,
            client_secret=f"{intent_id}_secret_mock",
            amount=amount,
            currency=currency,
            status="requires_payment_method",
        )
