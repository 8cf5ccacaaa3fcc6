# app/schemas/payments.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.schemas.fields import Email


class PaymentIntentRequest(BaseModel):
    price: float = Field(gt=0)


class PaymentIntentResponse(BaseModel):
    clientSecret: str


class PaymentCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: Email
    price: float
    transactionId: Optional[str] = None
    cartItemIds: List[str] = []
    menuItemIds: List[str] = []
    status: Optional[str] = None
