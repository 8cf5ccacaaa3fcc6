# app/schemas/dashboard_schema.py
from pydantic import BaseModel
from typing import Optional


class AdminStats(BaseModel):
    users: int
    menuItems: int
    orders: int
    revenue: float


class CategoryStats(BaseModel):
    category: Optional[str]
    quantity: int
    revenue: float
