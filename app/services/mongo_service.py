"""
MongoDB Service - CRUD operations for document collections.

Collections in this database:
1. internships        - Listings posted by government departments
2. profiles           - Student profiles, _id = auth provider user id
3. applications       - Applications submitted by students
4. saved_internships  - Bookmarked listings
5. notifications      - Per-user notification feed

READ PATHS degrade: a failed query is logged and replaced by the
built-in placeholder data (see placeholder_data.py) so the UI stays
populated. WRITE PATHS validate first and raise RecordValidationError
with a message for the user; store errors on writes propagate.
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional, List, Dict, Any, Type, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel, ValidationError
from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.errors import (
    RecordNotFoundError, RecordValidationError, StoreUnavailableError
)
from app.core.log import get_logger
from app.core.result import Result, with_fallback
from app.db.mongodb import COLLECTIONS
from app.schemas.schemas import (
    Application, ApplicationCreate, ApplicationStatus, FilterCriteria,
    Internship, InternshipCreate, InternshipUpdate, Notification,
    NotificationCreate, Profile, ProfileUpdate, SavedInternship,
    SavedInternshipCreate
)
from app.services.filter_service import apply_filters
from app.services.placeholder_data import (
    placeholder_applications, placeholder_internships,
    placeholder_notifications, placeholder_saved_internships
)

log = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


# ============================================================
# HELPERS
# ============================================================

def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Copy a MongoDB document, exposing _id as a string 'id'."""
    if doc is None:
        return None
    doc = dict(doc)
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    return doc


def to_object_id(record_id: str) -> Optional[ObjectId]:
    """Parse an id from a URL; None if it cannot be a Mongo ObjectId."""
    try:
        return ObjectId(record_id)
    except (InvalidId, TypeError):
        return None


def to_storable(values: Dict[str, Any]) -> Dict[str, Any]:
    """BSON has no date or enum type: dates become midnight UTC, enums their value."""
    stored = {}
    for key, value in values.items():
        if isinstance(value, date) and not isinstance(value, datetime):
            value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
        elif isinstance(value, Enum):
            value = value.value
        stored[key] = value
    return stored


def clean_list(values: Optional[List[str]]) -> List[str]:
    """Drop blank entries left over from form inputs."""
    return [v.strip() for v in values or [] if v and v.strip()]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def find_many(
    collection: Collection,
    query: dict,
    model: Type[M],
    sort_field: str
) -> Result[List[M]]:
    """Run a query newest-first and load each document into `model`."""
    try:
        cursor = collection.find(query).sort(sort_field, DESCENDING)
        return Result.ok([model(**serialize_doc(doc)) for doc in cursor])
    except PyMongoError as e:
        return Result.err(StoreUnavailableError(f"{collection.name}: {e}"))
    except ValidationError as e:
        return Result.err(StoreUnavailableError(f"{collection.name}: malformed document ({e.error_count()} errors)"))


# ============================================================
# INTERNSHIPS COLLECTION
# ============================================================

REQUIRED_INTERNSHIP_FIELDS = [
    "title", "company", "location", "duration",
    "stipend", "type", "category", "description"
]

CATEGORIES = [
    "Information Technology",
    "Marketing & Sales",
    "Data Science",
    "Media & Communications",
    "Finance & Banking",
    "Human Resources",
    "Operations",
    "Design & Creative",
    "Research & Development",
    "Customer Service"
]

SKILL_SUGGESTIONS = [
    "JavaScript", "Python", "React", "HTML/CSS", "Java", "SQL",
    "Content Writing", "Social Media Marketing", "SEO", "Digital Marketing",
    "Excel", "Data Analysis", "Statistics", "Power BI", "Tableau",
    "Photoshop", "Canva", "UI/UX Design", "Video Editing",
    "Communication", "Teamwork", "Leadership", "Problem Solving",
    "Research", "Project Management", "Time Management"
]


def validate_internship(values: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    """
    Check a listing write before it reaches the store.

    With partial=True only the fields present in `values` are checked
    (an update may touch a subset of fields, but may not blank them).

    Returns:
        Cleaned copy of values (blank list entries dropped)

    Raises:
        RecordValidationError: naming every missing field
    """
    to_check = [f for f in REQUIRED_INTERNSHIP_FIELDS if f in values] if partial else REQUIRED_INTERNSHIP_FIELDS
    missing = [f for f in to_check if not str(values.get(f) or "").strip()]
    if missing:
        raise RecordValidationError(f"Please fill in: {', '.join(missing)}")

    cleaned = dict(values)
    for field in ("skills", "requirements", "benefits", "language_requirement"):
        if field in cleaned or not partial:
            cleaned[field] = clean_list(cleaned.get(field))

    if "skills" in cleaned and not cleaned["skills"]:
        raise RecordValidationError("Please add at least one skill requirement")
    if "requirements" in cleaned and not cleaned["requirements"]:
        raise RecordValidationError("Please add at least one requirement")

    return cleaned


class InternshipService:
    """
    Listing store.
    Default queries only ever return listings with is_active=True.
    """

    def __init__(self, db: Database):
        self.collection: Collection = db[COLLECTIONS["internships"]]

    def fetch_active(self) -> Result[List[Internship]]:
        """Active listings, newest first."""
        return find_many(self.collection, {"is_active": True}, Internship, "created_at")

    def fetch_filtered(self, criteria: FilterCriteria) -> Result[List[Internship]]:
        """Active listings matching every set criterion, by exact equality."""
        query: Dict[str, Any] = {"is_active": True}
        query.update({k: v for k, v in criteria.model_dump().items() if v is not None})
        return find_many(self.collection, query, Internship, "created_at")

    def get_all_internships(self) -> List[Internship]:
        return with_fallback(self.fetch_active, placeholder_internships, label="internships query")

    def get_filtered_internships(self, criteria: FilterCriteria) -> List[Internship]:
        """Store results and placeholders both pass through the same filter layer."""
        internships = with_fallback(
            lambda: self.fetch_filtered(criteria),
            placeholder_internships,
            label="filtered internships query"
        )
        return apply_filters(internships, "", criteria)

    def get_internship(self, internship_id: str) -> Optional[Internship]:
        """Fetch one listing by id. None when missing or the store is down."""
        oid = to_object_id(internship_id)
        if oid is None:
            return None
        try:
            doc = self.collection.find_one({"_id": oid})
            return Internship(**serialize_doc(doc)) if doc else None
        except PyMongoError as e:
            log.warning("Failed to fetch internship %s: %s", internship_id, e)
        except ValidationError as e:
            log.warning("Malformed internship %s (%d errors)", internship_id, e.error_count())
        return None

    def create_internship(self, data: InternshipCreate) -> str:
        """
        Insert a new listing.

        Returns:
            MongoDB ObjectId as string
        """
        doc = validate_internship(data.model_dump())
        doc["is_active"] = True
        doc["created_at"] = utcnow()
        result = self.collection.insert_one(to_storable(doc))
        log.info("Created internship %s (%s)", result.inserted_id, doc["title"])
        return str(result.inserted_id)

    def update_internship(self, internship_id: str, data: InternshipUpdate) -> None:
        changes = validate_internship(data.model_dump(exclude_unset=True), partial=True)
        oid = to_object_id(internship_id)
        if oid is None:
            raise RecordNotFoundError("internships", internship_id)
        if not changes:
            raise RecordValidationError("No fields to update")

        result = self.collection.update_one({"_id": oid}, {"$set": to_storable(changes)})
        if result.matched_count == 0:
            raise RecordNotFoundError("internships", internship_id)

    def delete_internship(self, internship_id: str) -> None:
        oid = to_object_id(internship_id)
        if oid is None:
            raise RecordNotFoundError("internships", internship_id)
        result = self.collection.delete_one({"_id": oid})
        if result.deleted_count == 0:
            raise RecordNotFoundError("internships", internship_id)

    @staticmethod
    def get_categories() -> List[str]:
        return list(CATEGORIES)

    @staticmethod
    def get_skill_suggestions() -> List[str]:
        return list(SKILL_SUGGESTIONS)


# ============================================================
# PROFILES COLLECTION
# ============================================================

class ProfileService:
    """
    Student profiles. The document _id is the auth provider's user id,
    so there is exactly one profile per user.
    """

    def __init__(self, db: Database):
        self.collection: Collection = db[COLLECTIONS["profiles"]]

    def fetch_profile(self, user_id: str) -> Result[Optional[Profile]]:
        try:
            doc = self.collection.find_one({"_id": user_id})
            return Result.ok(Profile(**serialize_doc(doc)) if doc else None)
        except PyMongoError as e:
            return Result.err(StoreUnavailableError(f"profiles: {e}"))
        except ValidationError as e:
            return Result.err(StoreUnavailableError(f"profiles: malformed document ({e.error_count()} errors)"))

    def get_profile(self, user_id: str) -> Optional[Profile]:
        return with_fallback(lambda: self.fetch_profile(user_id), lambda: None, label="profile query")

    def upsert_profile(self, user_id: str, data: ProfileUpdate) -> Profile:
        """Create or replace the editable profile fields."""
        missing = [f for f in ("name", "state") if not getattr(data, f).strip()]
        if missing:
            raise RecordValidationError(f"Please fill in: {', '.join(missing)}")

        values = data.model_dump()
        values["skills"] = clean_list(data.skills)
        values["interests"] = clean_list(data.interests)

        now = utcnow()
        self.collection.update_one(
            {"_id": user_id},
            {
                "$set": {**values, "updated_at": now},
                "$setOnInsert": {"created_at": now}
            },
            upsert=True
        )
        return Profile(id=user_id, **values)


# ============================================================
# APPLICATIONS COLLECTION
# ============================================================

class ApplicationService:
    """Applications submitted by students against listings."""

    def __init__(self, db: Database):
        self.collection: Collection = db[COLLECTIONS["applications"]]

    def submit_application(self, user_id: str, data: ApplicationCreate) -> str:
        now = utcnow()
        doc = {
            **data.model_dump(),
            "user_id": user_id,
            "status": ApplicationStatus.pending.value,
            "applied_at": now,
            "updated_at": now
        }
        result = self.collection.insert_one(doc)
        log.info("User %s applied to internship %s", user_id, data.internship_id)
        return str(result.inserted_id)

    def fetch_user_applications(self, user_id: str) -> Result[List[Application]]:
        return find_many(self.collection, {"user_id": user_id}, Application, "applied_at")

    def get_user_applications(self, user_id: str) -> List[Application]:
        return with_fallback(
            lambda: self.fetch_user_applications(user_id),
            lambda: placeholder_applications(user_id),
            label="applications query"
        )

    def update_application_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        notes: Optional[str] = None,
        user_id: Optional[str] = None
    ) -> None:
        """
        Move an application to a new status.
        With user_id set, only that user's application can match.
        """
        oid = to_object_id(application_id)
        if oid is None:
            raise RecordNotFoundError("applications", application_id)

        query: Dict[str, Any] = {"_id": oid}
        if user_id is not None:
            query["user_id"] = user_id

        changes: Dict[str, Any] = {"status": status.value, "updated_at": utcnow()}
        if notes is not None:
            changes["notes"] = notes

        result = self.collection.update_one(query, {"$set": changes})
        if result.matched_count == 0:
            raise RecordNotFoundError("applications", application_id)


# ============================================================
# SAVED INTERNSHIPS COLLECTION
# ============================================================

class SavedInternshipService:
    """Bookmarks. (user_id, internship_id) is unique."""

    def __init__(self, db: Database):
        self.collection: Collection = db[COLLECTIONS["saved_internships"]]

    def save_internship(self, user_id: str, data: SavedInternshipCreate) -> str:
        doc = {**data.model_dump(), "user_id": user_id, "saved_at": utcnow()}
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise RecordValidationError("Internship is already saved")
        return str(result.inserted_id)

    def fetch_user_saved_internships(self, user_id: str) -> Result[List[SavedInternship]]:
        return find_many(self.collection, {"user_id": user_id}, SavedInternship, "saved_at")

    def get_user_saved_internships(self, user_id: str) -> List[SavedInternship]:
        return with_fallback(
            lambda: self.fetch_user_saved_internships(user_id),
            lambda: placeholder_saved_internships(user_id),
            label="saved internships query"
        )

    def remove_saved_internship(self, user_id: str, saved_id: str) -> None:
        oid = to_object_id(saved_id)
        if oid is None:
            raise RecordNotFoundError("saved_internships", saved_id)
        result = self.collection.delete_one({"_id": oid, "user_id": user_id})
        if result.deleted_count == 0:
            raise RecordNotFoundError("saved_internships", saved_id)

    def fetch_is_saved(self, user_id: str, internship_id: str) -> Result[bool]:
        try:
            doc = self.collection.find_one({"user_id": user_id, "internship_id": internship_id})
            return Result.ok(doc is not None)
        except PyMongoError as e:
            return Result.err(StoreUnavailableError(f"saved_internships: {e}"))

    def is_internship_saved(self, user_id: str, internship_id: str) -> bool:
        return with_fallback(
            lambda: self.fetch_is_saved(user_id, internship_id),
            lambda: False,
            label="saved check"
        )


# ============================================================
# NOTIFICATIONS COLLECTION
# ============================================================

class NotificationService:
    """Per-user notification feed."""

    def __init__(self, db: Database):
        self.collection: Collection = db[COLLECTIONS["notifications"]]

    def create_notification(self, data: NotificationCreate) -> str:
        doc = to_storable({**data.model_dump(), "created_at": utcnow()})
        result = self.collection.insert_one(doc)
        return str(result.inserted_id)

    def fetch_user_notifications(self, user_id: str) -> Result[List[Notification]]:
        return find_many(self.collection, {"user_id": user_id}, Notification, "created_at")

    def get_user_notifications(self, user_id: str) -> List[Notification]:
        return with_fallback(
            lambda: self.fetch_user_notifications(user_id),
            lambda: placeholder_notifications(user_id),
            label="notifications query"
        )

    def mark_as_read(self, user_id: str, notification_id: str) -> None:
        oid = to_object_id(notification_id)
        if oid is None:
            raise RecordNotFoundError("notifications", notification_id)
        result = self.collection.update_one(
            {"_id": oid, "user_id": user_id},
            {"$set": {"read": True}}
        )
        if result.matched_count == 0:
            raise RecordNotFoundError("notifications", notification_id)

    def delete_notification(self, user_id: str, notification_id: str) -> None:
        oid = to_object_id(notification_id)
        if oid is None:
            raise RecordNotFoundError("notifications", notification_id)
        result = self.collection.delete_one({"_id": oid, "user_id": user_id})
        if result.deleted_count == 0:
            raise RecordNotFoundError("notifications", notification_id)

    def get_unread_count(self, user_id: str) -> int:
        return sum(1 for n in self.get_user_notifications(user_id) if not n.read)


# ============================================================
# CONVENIENCE FUNCTION: Build all services
# ============================================================

def get_mongo_services(db: Database) -> dict:
    """
    Build one instance of every store service over `db`.

    Usage:
        services = get_mongo_services(db)
        services['internships'].get_all_internships()
    """
    return {
        "internships": InternshipService(db),
        "profiles": ProfileService(db),
        "applications": ApplicationService(db),
        "saved_internships": SavedInternshipService(db),
        "notifications": NotificationService(db)
    }
