# app/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # MongoDB settings
    MONGO_URI: str
    DB_NAME: str
    COLLECTION_NAME: str

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 4444
    RELOAD: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
