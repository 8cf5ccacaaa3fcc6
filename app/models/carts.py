# app/models/carts.py
from app.utils.mongo_utils import to_object_id


async def list_cart(db, email: str):
    return await db.carts.find({"email": email}).to_list(None)


async def add_to_cart(db, data: dict):
    return await db.carts.insert_one(dict(data))


async def remove_from_cart(db, cart_id: str):
    return await db.carts.delete_one({"_id": to_object_id(cart_id)})
