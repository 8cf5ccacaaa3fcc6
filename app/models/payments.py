# app/models/payments.py
import logging

from app.utils.mongo_utils import to_object_id

logger = logging.getLogger(__name__)


async def list_payments(db, email: str):
    return await db.payments.find({"email": email}).to_list(None)


async def record_payment(db, payment: dict):
    """
    Persist a checkout and purge the cart entries it paid for.

    The two writes are not transactional: if the purge fails the payment
    stays recorded and the cart entries remain. Every id is validated before
    the first write so a malformed id never leaves a half-finished checkout.
    """
    cart_ids = [to_object_id(i) for i in payment.get("cartItemIds", [])]
    menu_ids = [to_object_id(i) for i in payment.get("menuItemIds", [])]

    # menuItemIds are stored as ObjectIds so the order stats join matches menu._id
    document = {**payment, "menuItemIds": menu_ids}
    payment_res = await db.payments.insert_one(document)

    delete_res = await db.carts.delete_many({"_id": {"$in": cart_ids}})
    logger.info(
        "Payment %s recorded for %s, removed %d cart entries",
        payment_res.inserted_id, payment.get("email"), delete_res.deleted_count,
    )
    if delete_res.deleted_count != len(cart_ids):
        logger.warning(
            "Payment %s listed %d cart entries but %d were removed",
            payment_res.inserted_id, len(cart_ids), delete_res.deleted_count,
        )
    return payment_res, delete_res
