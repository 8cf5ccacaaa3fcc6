# app/middleware/rbac.py
import logging

import jwt
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from app.core.error_messages import ErrorResponses
from app.database import MongoDB, get_db
from app.models.user import Role, find_user_by_email, role_of
from app.utils.auth_utils import decode_token

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="jwt")


def get_current_user(token: str = Depends(oauth2_scheme)) -> dict:
    try:
        payload = decode_token(token)
    except jwt.PyJWTError as e:
        logger.debug("Rejected token: %s", e)
        raise ErrorResponses.UNAUTHORIZED
    if not payload.get("email"):
        raise ErrorResponses.UNAUTHORIZED
    return payload


async def require_admin(
    user: dict = Depends(get_current_user),
    db: MongoDB = Depends(get_db),
) -> dict:
    # Role comes from the stored user, never from the token claims
    stored = await find_user_by_email(db, user["email"])
    if stored is None or role_of(stored) is not Role.ADMIN:
        logger.info("Admin access denied for %s", user["email"])
        raise ErrorResponses.FORBIDDEN
    return user


def ensure_same_user(email: str, user: dict) -> None:
    if email != user.get("email"):
        raise ErrorResponses.FORBIDDEN
