# app/schemas/user.py
from pydantic import BaseModel, ConfigDict
from typing import Optional

from app.schemas.fields import Email


class TokenRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: Email


class TokenResponse(BaseModel):
    token: str


class UserCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: Email
    name: Optional[str] = None


class AdminCheck(BaseModel):
    admin: bool
