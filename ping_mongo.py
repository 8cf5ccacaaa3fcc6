import asyncio
import os

import certifi
from motor.motor_asyncio import AsyncIOMotorClient


async def ping():
    mongo_url = os.getenv("MONGO_URL", "mongodb://localhost:27017")
    kwargs = {"tlsCAFile": certifi.where()} if mongo_url.startswith("mongodb+srv://") else {}
    client = AsyncIOMotorClient(mongo_url, **kwargs)
    try:
        result = await client.admin.command("ping")
        print("✅ MongoDB connected:", result)
    except Exception as e:
        print("❌ MongoDB connection failed:", e)
    finally:
        client.close()

if __name__ == "__main__":
    asyncio.run(ping())
