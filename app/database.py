# app/database.py
import logging

import certifi
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient

logger = logging.getLogger(__name__)


class MongoDB:
    """Owns the store client and exposes the five collections the server uses."""

    def __init__(self, client, db_name: str, owns_client: bool = False):
        self.client = client
        self.db = client[db_name]
        self.owns_client = owns_client

    @classmethod
    def connect(cls, settings) -> "MongoDB":
        kwargs = {}
        if settings.MONGO_URL.startswith("mongodb+srv://"):
            kwargs["tlsCAFile"] = certifi.where()
        client = AsyncIOMotorClient(settings.MONGO_URL, **kwargs)
        return cls(client, settings.MONGO_DB_NAME, owns_client=True)

    @property
    def users(self):
        return self.db["users"]

    @property
    def menu(self):
        return self.db["menu"]

    @property
    def reviews(self):
        return self.db["reviews"]

    @property
    def carts(self):
        return self.db["carts"]

    @property
    def payments(self):
        return self.db["payments"]

    async def check_connection(self) -> bool:
        try:
            await self.users.find_one({})
            logger.info("✅ MongoDB connected successfully.")
            return True
        except Exception as e:
            logger.error("❌ MongoDB connection failed: %s", e)
            return False

    def close(self) -> None:
        if self.owns_client:
            self.client.close()
            logger.info("MongoDB client closed")


def get_db(request: Request) -> MongoDB:
    return request.app.state.mongo
