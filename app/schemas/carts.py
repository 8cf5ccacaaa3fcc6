# app/schemas/carts.py
from pydantic import BaseModel, ConfigDict
from typing import Optional

from app.schemas.fields import Email


class CartItemCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: Email
    menuId: str
    name: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = None
