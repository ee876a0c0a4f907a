import logging

from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

QUIZZES_COLLECTION = "quizzes"
ANNOUNCEMENTS_COLLECTION = "announcements"


def connect(config):
    """Return the configured database. MongoClient connects lazily."""
    client = MongoClient(config.MONGO_URI)
    return client[config.DB_NAME]


def ping(db):
    try:
        db.command("ping")
        logger.info("MongoDB connection successful.")
        return True
    except PyMongoError as e:
        logger.error("MongoDB connection failed: %s", e)
        return False
