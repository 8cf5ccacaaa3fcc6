# app/schemas/menu.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class MenuItemCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    category: str
    price: float = Field(ge=0)
    recipe: Optional[str] = None
    image: Optional[str] = None


class MenuItemUpdate(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    recipe: Optional[str] = None
    image: Optional[str] = None
