"""
Database module - MongoDB connection.
"""
from student_api.db.mongodb import (
    create_mongo_client,
    get_students_collection,
    test_mongo_connection,
)

__all__ = [
    "create_mongo_client",
    "get_students_collection",
    "test_mongo_connection"
]
