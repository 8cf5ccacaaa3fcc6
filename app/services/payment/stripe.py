"""
Stripe payment gateway.

Used whenever STRIPE_SECRET_KEY is configured.
"""

import logging

import stripe
from fastapi.concurrency import run_in_threadpool

from app.core.error_messages import PaymentProviderError
from app.services.payment.base import BasePaymentGateway, PaymentIntent

logger = logging.getLogger(__name__)


class StripePaymentGateway(BasePaymentGateway):

    def __init__(self, secret_key: str):
        if not secret_key:
            raise ValueError("STRIPE_SECRET_KEY is required for the Stripe gateway")
        self._api_key = secret_key

    @property
    def provider_name(self) -> str:
        return "stripe"

    async def create_payment_intent(self, amount: int, currency: str) -> PaymentIntent:
        params = {
            "api_key": self._api_key,
            "amount": amount,
            "currency": currency,
            "payment_method_types": ["card"],
        }
        try:
            # The SDK is blocking
            intent = await run_in_threadpool(stripe.PaymentIntent.create, **params)
        except stripe.StripeError as e:
            logger.error("Stripe: failed to create PaymentIntent - %s", e)
            raise PaymentProviderError(e.user_message or str(e), code=e.code or "stripe_error")

        logger.info("Stripe: PaymentIntent %s created for %d %s", intent.id, amount, currency)
        return PaymentIntent(
            id=intent.id,
            client_secret=intent.client_secret,
            amount=intent.amount,
            currency=intent.currency,
            status=intent.status,
        )
