"""
Payment gateway selection.

Returns StripePaymentGateway when STRIPE_SECRET_KEY is set, otherwise the
offline MockPaymentGateway.
"""

import logging

from fastapi import Request

from app.services.payment.base import BasePaymentGateway, PaymentIntent, to_minor_units
from app.services.payment.mock import MockPaymentGateway
from app.services.payment.stripe import StripePaymentGateway

logger = logging.getLogger(__name__)


def build_payment_gateway(settings) -> BasePaymentGateway:
    if settings.STRIPE_SECRET_KEY:
        logger.info("Payment gateway: Stripe")
        return StripePaymentGateway(settings.STRIPE_SECRET_KEY)
    logger.warning("Payment gateway: STRIPE_SECRET_KEY not set, using mock gateway")
    return MockPaymentGateway()


def get_payment_gateway(request: Request) -> BasePaymentGateway:
    return request.app.state.payment_gateway


__all__ = [
    "build_payment_gateway",
    "get_payment_gateway",
    "to_minor_units",
    "BasePaymentGateway",
    "PaymentIntent",
    "MockPaymentGateway",
    "StripePaymentGateway",
]
