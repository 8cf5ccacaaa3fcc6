# app/routes/carts.py
from fastapi import APIRouter, Depends

from app.database import MongoDB, get_db
from app.models.carts import add_to_cart, list_cart, remove_from_cart
from app.schemas.carts import CartItemCreate
from app.schemas.fields import Email
from app.utils.mongo_utils import delete_result, insert_result, serialize

# Carts are scoped by the email query only; no token is required
carts_router = APIRouter(prefix="/carts", tags=["Carts"])


@carts_router.get("")
async def get_cart(email: Email, db: MongoDB = Depends(get_db)):
    return serialize(await list_cart(db, email))


@carts_router.post("")
async def add_cart_item(data: CartItemCreate, db: MongoDB = Depends(get_db)):
    return insert_result(await add_to_cart(db, data.model_dump(exclude_none=True)))


@carts_router.delete("/{cart_id}")
async def delete_cart_item(cart_id: str, db: MongoDB = Depends(get_db)):
    return delete_result(await remove_from_cart(db, cart_id))
