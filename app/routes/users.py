# app/routes/users.py
from fastapi import APIRouter, Depends

from app.database import MongoDB, get_db
from app.middleware.rbac import ensure_same_user, get_current_user, require_admin
from app.models.user import (
    Role,
    create_user,
    delete_user,
    find_user_by_email,
    list_users,
    promote_to_admin,
    role_of,
)
from app.schemas.user import AdminCheck, UserCreate
from app.utils.mongo_utils import delete_result, insert_result, serialize, update_result

users_router = APIRouter(prefix="/users", tags=["Users"])


@users_router.get("")
async def get_users(admin=Depends(require_admin), db: MongoDB = Depends(get_db)):
    return serialize(await list_users(db))


@users_router.get("/admin/{email}", response_model=AdminCheck)
async def check_admin(email: str, user=Depends(get_current_user), db: MongoDB = Depends(get_db)):
    ensure_same_user(email, user)
    stored = await find_user_by_email(db, email)
    return {"admin": stored is not None and role_of(stored) is Role.ADMIN}


# Called on every sign-in; only the first one for an email inserts
@users_router.post("")
async def register_user(data: UserCreate, db: MongoDB = Depends(get_db)):
    result = await create_user(db, data.model_dump(exclude_none=True))
    if result is None:
        return {"message": "User Already Exist", "insertedId": None}
    return insert_result(result)


@users_router.patch("/admin/{user_id}")
async def make_admin(user_id: str, admin=Depends(require_admin), db: MongoDB = Depends(get_db)):
    return update_result(await promote_to_admin(db, user_id))


@users_router.delete("/{user_id}")
async def remove_user(user_id: str, admin=Depends(require_admin), db: MongoDB = Depends(get_db)):
    return delete_result(await delete_user(db, user_id))
