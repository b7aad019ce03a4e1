# app/main.py
import logging
import sys

from fastapi import FastAPI
from contextlib import asynccontextmanager
from pydantic import ValidationError
from app.routes import employee_router, health_router
from app.database import connect_to_mongo
from app.repositories.employee import EmployeeRepository
from app.config import get_settings
from app.exceptions import register_exception_handlers
from app.utils.logger import setup_logging

logger = logging.getLogger(__name__)

def load_settings():
    try:
        return get_settings()
    except ValidationError as e:
        setup_logging()
        logger.critical("Configuration load failed: %s", e)
        sys.exit(1)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings = load_settings()
    setup_logging(settings.LOG_LEVEL)
    try:
        database = await connect_to_mongo(settings)
    except Exception as e:
        logger.critical("MongoDB connection failed: %s", e)
        sys.exit(1)
    app.state.database = database
    app.state.employee_repository = EmployeeRepository(database.collection)
    yield
    # Shutdown
    database.close()

app = FastAPI(title="Employee Service", lifespan=lifespan)

register_exception_handlers(app)

app.include_router(health_router, tags=["health"])
app.include_router(employee_router, tags=["employees"])

if __name__ == "__main__":
    import uvicorn
    settings = load_settings()
    setup_logging(settings.LOG_LEVEL)
    logger.info("server is running on :%d", settings.PORT)
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
