# app/models/stats.py

REVENUE_PIPELINE = [
    {"$group": {"_id": None, "totalRevenue": {"$sum": "$price"}}},
]

ORDER_STATS_PIPELINE = [
    # one row per purchased menu item
    {"$unwind": "$menuItemIds"},
    {
        "$lookup": {
            "from": "menu",
            "localField": "menuItemIds",
            "foreignField": "_id",
            "as": "menuItems",
        }
    },
    {"$unwind": "$menuItems"},
    {
        "$group": {
            "_id": "$menuItems.category",
            "quantity": {"$sum": 1},
            "revenue": {"$sum": "$menuItems.price"},
        }
    },
    {"$project": {"_id": 0, "category": "$_id", "quantity": "$quantity", "revenue": "$revenue"}},
]


async def total_revenue(db):
    result = await db.payments.aggregate(REVENUE_PIPELINE).to_list(None)
    return result[0]["totalRevenue"] if result else 0


async def admin_stats(db) -> dict:
    """Approximate collection sizes plus revenue summed over every payment."""
    return {
        "users": await db.users.estimated_document_count(),
        "menuItems": await db.menu.estimated_document_count(),
        "orders": await db.payments.estimated_document_count(),
        "revenue": await total_revenue(db),
    }


async def order_stats(db):
    return await db.payments.aggregate(ORDER_STATS_PIPELINE).to_list(None)
