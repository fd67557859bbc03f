"""
MongoDB Connection Utility

MongoDB stores one collection:
- students: one document per student, keyed by a hex string _id

The client is created once at startup and handed to the service layer;
pymongo pools connections internally and is safe to share across threads.
"""
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from student_api.core.config import (
    MONGODB_DATABASE,
    STUDENTS_COLLECTION,
    SERVER_SELECTION_TIMEOUT_MS,
    STORE_TIMEOUT_MS,
)
from student_api.core.log import get_logger

logger = get_logger(__name__)


def create_mongo_client(uri: str) -> MongoClient:
    """
    Create a MongoDB client and verify the server answers.
    Raises PyMongoError (or ConfigurationError for a bad URI) on failure.
    """
    client = MongoClient(
        uri,
        serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS,
        timeoutMS=STORE_TIMEOUT_MS,
    )
    try:
        client.admin.command("ping")
    except PyMongoError:
        client.close()
        raise
    return client


def get_students_collection(client: MongoClient) -> Collection:
    """Get the students collection from the fixed database."""
    return client[MONGODB_DATABASE][STUDENTS_COLLECTION]


def test_mongo_connection(client: MongoClient) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning("MongoDB ping failed: %s", e)
        return False
