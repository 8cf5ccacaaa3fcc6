# app/routes/menu.py
from fastapi import APIRouter, Depends

from app.core.error_messages import ErrorResponses
from app.database import MongoDB, get_db
from app.middleware.rbac import require_admin
from app.models.menu import (
    create_menu_item,
    delete_menu_item,
    get_menu_item,
    list_menu,
    update_menu_item,
)
from app.schemas.menu import MenuItemCreate, MenuItemUpdate
from app.utils.mongo_utils import delete_result, insert_result, serialize, update_result

menu_router = APIRouter(prefix="/menu", tags=["Menu"])


@menu_router.get("")
async def get_menu(db: MongoDB = Depends(get_db)):
    return serialize(await list_menu(db))


# Admin edit form loads a single item
@menu_router.get("/{item_id}")
async def get_item(item_id: str, admin=Depends(require_admin), db: MongoDB = Depends(get_db)):
    return serialize(await get_menu_item(db, item_id))


@menu_router.post("")
async def add_item(data: MenuItemCreate, admin=Depends(require_admin), db: MongoDB = Depends(get_db)):
    return insert_result(await create_menu_item(db, data.model_dump(exclude_none=True)))


@menu_router.patch("/{item_id}")
async def edit_item(
    item_id: str,
    data: MenuItemUpdate,
    admin=Depends(require_admin),
    db: MongoDB = Depends(get_db),
):
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        raise ErrorResponses.EMPTY_UPDATE
    return update_result(await update_menu_item(db, item_id, changes))


@menu_router.delete("/{item_id}")
async def remove_item(item_id: str, admin=Depends(require_admin), db: MongoDB = Depends(get_db)):
    return delete_result(await delete_menu_item(db, item_id))
