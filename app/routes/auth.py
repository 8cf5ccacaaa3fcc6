# app/routes/auth.py
from fastapi import APIRouter

from app.schemas.user import TokenRequest, TokenResponse
from app.utils.auth_utils import create_access_token

auth_router = APIRouter(tags=["Auth"])


@auth_router.post("/jwt", response_model=TokenResponse)
async def issue_token(data: TokenRequest):
    return {"token": create_access_token(data.model_dump())}
