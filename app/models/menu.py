# app/models/menu.py
from app.utils.mongo_utils import to_object_id

# Fields an admin may change on an existing menu item
UPDATABLE_FIELDS = ("name", "category", "price", "recipe", "image")


async def list_menu(db):
    return await db.menu.find({}).to_list(None)


async def get_menu_item(db, item_id: str):
    return await db.menu.find_one({"_id": to_object_id(item_id)})


async def create_menu_item(db, data: dict):
    return await db.menu.insert_one(dict(data))


async def update_menu_item(db, item_id: str, changes: dict):
    fields = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
    return await db.menu.update_one({"_id": to_object_id(item_id)}, {"$set": fields})


async def delete_menu_item(db, item_id: str):
    return await db.menu.delete_one({"_id": to_object_id(item_id)})
