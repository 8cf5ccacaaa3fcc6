# app/routes/reviews.py
from fastapi import APIRouter, Depends

from app.database import MongoDB, get_db
from app.models.reviews import list_reviews
from app.utils.mongo_utils import serialize

reviews_router = APIRouter(prefix="/reviews", tags=["Reviews"])


@reviews_router.get("")
async def get_reviews(db: MongoDB = Depends(get_db)):
    return serialize(await list_reviews(db))
