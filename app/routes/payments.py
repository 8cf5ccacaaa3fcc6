# app/routes/payments.py
import logging

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.database import MongoDB, get_db
from app.middleware.rbac import ensure_same_user, get_current_user
from app.models.payments import list_payments, record_payment
from app.schemas.payments import PaymentCreate, PaymentIntentRequest, PaymentIntentResponse
from app.services.payment import BasePaymentGateway, get_payment_gateway, to_minor_units
from app.utils.mongo_utils import delete_result, insert_result, serialize

logger = logging.getLogger(__name__)

payments_router = APIRouter(tags=["Payments"])


@payments_router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    data: PaymentIntentRequest,
    user=Depends(get_current_user),
    gateway: BasePaymentGateway = Depends(get_payment_gateway),
):
    amount = to_minor_units(data.price)
    logger.info("Creating payment intent of %d for %s", amount, user["email"])
    intent = await gateway.create_payment_intent(amount, settings.STRIPE_CURRENCY)
    return {"clientSecret": intent.client_secret}


@payments_router.get("/payments/{email}")
async def get_payments(email: str, user=Depends(get_current_user), db: MongoDB = Depends(get_db)):
    ensure_same_user(email, user)
    return serialize(await list_payments(db, email))


@payments_router.post("/payments")
async def finalize_payment(data: PaymentCreate, db: MongoDB = Depends(get_db)):
    payment_res, delete_res = await record_payment(db, data.model_dump(exclude_none=True))
    return {"paymentRes": insert_result(payment_res), "deleteResult": delete_result(delete_res)}
