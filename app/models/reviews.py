# app/models/reviews.py


async def list_reviews(db):
    return await db.reviews.find({}).to_list(None)
