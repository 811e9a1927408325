"""
Database module - MongoDB connection helpers.
"""
from app.db.mongodb import (
    COLLECTIONS,
    create_mongo_client,
    get_database,
    init_mongo_indexes,
    test_mongo_connection
)

__all__ = [
    "COLLECTIONS",
    "create_mongo_client",
    "get_database",
    "init_mongo_indexes",
    "test_mongo_connection"
]
