# app/routes/stats.py
from typing import List

from fastapi import APIRouter, Depends

from app.database import MongoDB, get_db
from app.middleware.rbac import require_admin
from app.models.stats import admin_stats, order_stats
from app.schemas.dashboard_schema import AdminStats, CategoryStats

stats_router = APIRouter(tags=["Stats"])


@stats_router.get("/admin-stats", response_model=AdminStats)
async def get_admin_stats(admin=Depends(require_admin), db: MongoDB = Depends(get_db)):
    return await admin_stats(db)


@stats_router.get("/order-stats", response_model=List[CategoryStats])
async def get_order_stats(db: MongoDB = Depends(get_db)):
    return await order_stats(db)
