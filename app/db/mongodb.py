"""
MongoDB Connection Utility

MongoDB stores every record of the portal:
- Internship listings posted by government departments
- Student profiles (keyed by the auth provider's user id)
- Applications, saved internships, notifications

The client is created ONCE at application startup and handed to the
store services; nothing in this module holds a global connection.
"""
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database

from app.core.config import Settings
from app.core.log import get_logger

log = get_logger(__name__)


# Collection name constants (avoid typos)
COLLECTIONS = {
    "internships": "internships",
    "profiles": "profiles",
    "applications": "applications",
    "saved_internships": "saved_internships",
    "notifications": "notifications"
}


def create_mongo_client(settings: Settings) -> MongoClient:
    """Build a client. pymongo connects lazily, so this never blocks."""
    return MongoClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        tz_aware=True
    )


def get_database(client: MongoClient, settings: Settings) -> Database:
    """Get the portal database"""
    return client[settings.mongodb_db]


def test_mongo_connection(client: MongoClient) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        # ping command checks connection
        client.admin.command('ping')
        return True
    except Exception as e:
        log.warning("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(db: Database) -> None:
    """
    Create indexes for the queries the store services run.
    Call this once during app startup.
    """
    # Default listing query: active listings, newest first
    db[COLLECTIONS["internships"]].create_index([
        ("is_active", ASCENDING),
        ("created_at", DESCENDING)
    ])
    db[COLLECTIONS["internships"]].create_index([
        ("is_active", ASCENDING),
        ("state", ASCENDING),
        ("type", ASCENDING)
    ])

    db[COLLECTIONS["applications"]].create_index([
        ("user_id", ASCENDING),
        ("applied_at", DESCENDING)
    ])

    # One saved entry per (user, internship)
    db[COLLECTIONS["saved_internships"]].create_index([
        ("user_id", ASCENDING),
        ("internship_id", ASCENDING)
    ], unique=True)

    db[COLLECTIONS["notifications"]].create_index([
        ("user_id", ASCENDING),
        ("created_at", DESCENDING)
    ])

    log.info("MongoDB indexes created successfully")
