"""
Payment gateway interface.

The server only ever asks the provider for one thing: a payment intent the
client can confirm with its card details. Implementations receive the amount
already converted to minor units.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


def to_minor_units(price: float) -> int:
    """
    Convert a price in major units to the integer amount the provider expects.

    The fractional part below one minor unit is truncated, not rounded:
    12.999 becomes 1299.
    """
    return int(price * 100)


@dataclass
class PaymentIntent:
    id: str
    client_secret: str
    amount: int
    currency: str
    status: Optional[str] = None


class BasePaymentGateway(ABC):

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @abstractmethod
    async def create_payment_intent(self, amount: int, currency: str) -> PaymentIntent:
        """
        Create a card payment intent for ``amount`` minor units.

        Raises:
            PaymentProviderError: if the provider rejects or cannot be reached
        """
        pass
