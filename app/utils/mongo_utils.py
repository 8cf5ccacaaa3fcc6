# app/utils/mongo_utils.py
from datetime import datetime

from bson import ObjectId
from bson.errors import InvalidId

from app.core.error_messages import ErrorResponses


def to_object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ErrorResponses.INVALID_ID


def serialize(obj):
    """Recursively render ObjectId values as strings so documents are JSON-safe."""
    if isinstance(obj, ObjectId):
        return str(obj)
    if isinstance(obj, dict):
        return {k: serialize(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [serialize(item) for item in obj]
    if isinstance(obj, datetime):
        return obj.isoformat()
    return obj


def insert_result(result) -> dict:
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}


def update_result(result) -> dict:
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedId": serialize(result.upserted_id),
    }


def delete_result(result) -> dict:
    return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}
