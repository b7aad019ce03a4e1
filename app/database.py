# app/database.py
import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from app.config import Settings
from app.repositories.employee import EmployeeRepository

logger = logging.getLogger(__name__)


class Database:
    """Owns the single MongoDB client shared by every request."""

    def __init__(self, client: AsyncIOMotorClient, settings: Settings):
        self.client = client
        self.db = client[settings.DB_NAME]
        self.collection: AsyncIOMotorCollection = self.db[settings.COLLECTION_NAME]

    def close(self):
        self.client.close()
        logger.info("Closed MongoDB connection")


async def connect_to_mongo(settings: Settings) -> Database:
    client = AsyncIOMotorClient(settings.MONGO_URI)
    try:
        await client.admin.command("ping")
    except Exception:
        client.close()
        raise
    logger.info("Connected to MongoDB: %s.%s", settings.DB_NAME, settings.COLLECTION_NAME)
    return Database(client, settings)


def get_employee_repository(request: Request) -> EmployeeRepository:
    return request.app.state.employee_repository
