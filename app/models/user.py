# app/models/user.py
from enum import Enum
from typing import Optional

from app.utils.mongo_utils import to_object_id


class Role(str, Enum):
    DEFAULT = "default"
    ADMIN = "admin"


def role_of(user: dict) -> Role:
    """Stored role as a Role; anything missing or unrecognised counts as default."""
    try:
        return Role(user.get("role", Role.DEFAULT.value))
    except ValueError:
        return Role.DEFAULT


async def find_user_by_email(db, email: str) -> Optional[dict]:
    return await db.users.find_one({"email": email})


async def list_users(db):
    return await db.users.find({}).to_list(None)


async def create_user(db, data: dict):
    """Insert the user unless one with the same email exists; returns None if it does."""
    if await find_user_by_email(db, data["email"]):
        return None
    user = {**data, "role": Role.DEFAULT.value}
    return await db.users.insert_one(user)


async def promote_to_admin(db, user_id: str):
    return await db.users.update_one(
        {"_id": to_object_id(user_id)},
        {"$set": {"role": Role.ADMIN.value}},
    )


async def delete_user(db, user_id: str):
    return await db.users.delete_one({"_id": to_object_id(user_id)})
