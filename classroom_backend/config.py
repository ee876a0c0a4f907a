"""
Configuration for the classroom backend.
Values come from environment variables; a local .env file is loaded first.
"""
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self):
        # MongoDB
        self.MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.DB_NAME: str = os.getenv("DB_NAME", "classroom")

        # Server
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        port = os.getenv("PORT", "")
        self.PORT: int = int(port) if port else 5000
        self.API_PREFIX: str = os.getenv("API_PREFIX", "/api")

        cors_origins = os.getenv("CORS_ORIGINS", "*")
        self.CORS_ORIGINS: list[str] = [o.strip() for o in cors_origins.split(",") if o.strip()]

        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def from_env(cls, overrides=None):
        config = cls()
        for key, value in (overrides or {}).items():
            setattr(config, key, value)
        return config

    def as_flask_config(self) -> dict:
        return {key: value for key, value in vars(self).items() if key.isupper()}
