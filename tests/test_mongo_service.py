"""Store service tests over a mocked pymongo Database."""
from datetime import date, datetime, timezone
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.errors import RecordNotFoundError, RecordValidationError
from app.schemas.schemas import (
    ApplicationCreate, ApplicationStatus, FilterCriteria, InternshipCreate, InternshipUpdate,
    ProfileUpdate, SavedInternshipCreate
)
from app.services.filter_service import apply_filters
from app.services.mongo_service import (
    ApplicationService, InternshipService, NotificationService,
    ProfileService, SavedInternshipService
)
from app.services.placeholder_data import placeholder_internships


def _service(cls):
    service = cls(MagicMock())
    return service, service.collection


def _valid_listing(**overrides) -> InternshipCreate:
    values = {
        "title": "Data Analysis Trainee",
        "company": "Analytics Pro",
        "location": "Delhi NCR",
        "state": "Delhi",
        "duration": "6 months",
        "stipend": "₹18,000/month",
        "skills": ["Excel", "SQL"],
        "type": "Analytics",
        "category": "Data Science",
        "description": "Work with real data.",
        "requirements": ["Basic statistics"],
    }
    values.update(overrides)
    return InternshipCreate(**values)


# ============================================================
# INTERNSHIP READS
# ============================================================

def test_active_listings_are_loaded_from_documents():
    service, collection = _service(InternshipService)
    oid = ObjectId()
    collection.find.return_value.sort.return_value = [
        {"_id": oid, "title": "Intern", "company": "Acme", "is_active": True}
    ]

    result = service.get_all_internships()

    assert [i.id for i in result] == [str(oid)]
    collection.find.assert_called_once_with({"is_active": True})


def test_store_failure_falls_back_to_placeholders():
    service, collection = _service(InternshipService)
    collection.find.side_effect = PyMongoError("connection refused")

    assert service.get_all_internships() == placeholder_internships()


def test_malformed_document_falls_back_to_placeholders():
    service, collection = _service(InternshipService)
    collection.find.return_value.sort.return_value = [{"_id": ObjectId(), "company": "No title"}]

    assert service.get_all_internships() == placeholder_internships()


def test_filtered_query_sends_every_set_criterion():
    service, collection = _service(InternshipService)
    collection.find.return_value.sort.return_value = []
    criteria = FilterCriteria(state="Delhi", remote=False, duration="6 months", category="Data Science")

    service.get_filtered_internships(criteria)

    collection.find.assert_called_once_with({
        "is_active": True, "state": "Delhi", "remote": False,
        "duration": "6 months", "category": "Data Science"
    })


def test_filtered_query_narrows_store_results():
    service, collection = _service(InternshipService)
    collection.find.return_value.sort.return_value = [
        {"_id": ObjectId(), "title": "A", "company": "Acme", "duration": "3 months"},
        {"_id": ObjectId(), "title": "B", "company": "Acme", "duration": "6 months"},
    ]

    result = service.get_filtered_internships(FilterCriteria(duration="6 months"))
    assert [i.title for i in result] == ["B"]

    assert service.get_filtered_internships(FilterCriteria(duration="6 months", category="Nope")) == []


def test_filtered_query_failure_filters_placeholders():
    service, collection = _service(InternshipService)
    collection.find.side_effect = PyMongoError("timeout")
    criteria = FilterCriteria(remote=True)

    result = service.get_filtered_internships(criteria)

    assert result == apply_filters(placeholder_internships(), "", criteria)
    assert result and all(i.remote for i in result)


def test_get_internship_with_malformed_id_is_none():
    service, collection = _service(InternshipService)

    assert service.get_internship("not-an-object-id") is None
    collection.find_one.assert_not_called()


def test_get_internship_store_failure_is_none():
    service, collection = _service(InternshipService)
    collection.find_one.side_effect = PyMongoError("down")

    assert service.get_internship(str(ObjectId())) is None


def test_get_internship_malformed_document_is_none():
    service, collection = _service(InternshipService)
    collection.find_one.return_value = {"_id": ObjectId(), "company": "No title"}

    assert service.get_internship(str(ObjectId())) is None


# ============================================================
# INTERNSHIP WRITES
# ============================================================

def test_create_names_every_missing_field():
    service, collection = _service(InternshipService)

    with pytest.raises(RecordValidationError) as exc:
        service.create_internship(InternshipCreate(title="Intern", company="Acme"))

    assert exc.value.reason.startswith("Please fill in: location, duration, stipend")
    collection.insert_one.assert_not_called()


def test_create_requires_a_skill_and_a_requirement():
    service, _ = _service(InternshipService)

    with pytest.raises(RecordValidationError, match="at least one skill"):
        service.create_internship(_valid_listing(skills=["", "  "]))
    with pytest.raises(RecordValidationError, match="at least one requirement"):
        service.create_internship(_valid_listing(requirements=[]))


def test_create_stores_an_active_listing():
    service, collection = _service(InternshipService)
    oid = ObjectId()
    collection.insert_one.return_value.inserted_id = oid

    new_id = service.create_internship(_valid_listing(
        skills=["Excel", " ", "SQL "], application_deadline=date(2025, 3, 1)
    ))

    stored = collection.insert_one.call_args[0][0]
    assert new_id == str(oid)
    assert stored["is_active"] is True
    assert isinstance(stored["created_at"], datetime)
    assert stored["skills"] == ["Excel", "SQL"]
    assert stored["application_deadline"] == datetime(2025, 3, 1, tzinfo=timezone.utc)


def test_update_without_fields_is_rejected():
    service, _ = _service(InternshipService)

    with pytest.raises(RecordValidationError, match="No fields to update"):
        service.update_internship(str(ObjectId()), InternshipUpdate())


def test_update_cannot_blank_a_required_field():
    service, _ = _service(InternshipService)

    with pytest.raises(RecordValidationError, match="Please fill in: title"):
        service.update_internship(str(ObjectId()), InternshipUpdate(title="  "))


def test_update_of_missing_listing_is_not_found():
    service, collection = _service(InternshipService)
    collection.update_one.return_value.matched_count = 0

    with pytest.raises(RecordNotFoundError):
        service.update_internship(str(ObjectId()), InternshipUpdate(is_active=False))


def test_update_sets_only_given_fields():
    service, collection = _service(InternshipService)
    collection.update_one.return_value.matched_count = 1

    service.update_internship(str(ObjectId()), InternshipUpdate(stipend="₹20,000/month"))

    assert collection.update_one.call_args[0][1] == {"$set": {"stipend": "₹20,000/month"}}


def test_delete_with_malformed_id_is_not_found():
    service, collection = _service(InternshipService)

    with pytest.raises(RecordNotFoundError):
        service.delete_internship("42")
    collection.delete_one.assert_not_called()


def test_reference_lists_are_copies():
    categories = InternshipService.get_categories()
    categories.append("Other")

    assert "Other" not in InternshipService.get_categories()
    assert "Python" in InternshipService.get_skill_suggestions()


# ============================================================
# PROFILES
# ============================================================

def test_profile_needs_name_and_state():
    service, collection = _service(ProfileService)

    with pytest.raises(RecordValidationError, match="Please fill in: name, state"):
        service.upsert_profile("user-1", ProfileUpdate())
    collection.update_one.assert_not_called()


def test_profile_upsert_keys_on_user_id():
    service, collection = _service(ProfileService)

    profile = service.upsert_profile("user-1", ProfileUpdate(name="Asha", state="Kerala", skills=["Python", ""]))

    query, update = collection.update_one.call_args[0]
    assert query == {"_id": "user-1"}
    assert update["$set"]["skills"] == ["Python"]
    assert "created_at" in update["$setOnInsert"]
    assert collection.update_one.call_args[1] == {"upsert": True}
    assert profile.id == "user-1"


def test_profile_store_failure_reads_as_missing():
    service, collection = _service(ProfileService)
    collection.find_one.side_effect = PyMongoError("down")

    assert service.get_profile("user-1") is None


# ============================================================
# APPLICATIONS, SAVED, NOTIFICATIONS
# ============================================================

def test_new_application_is_pending():
    service, collection = _service(ApplicationService)
    collection.insert_one.return_value.inserted_id = ObjectId()

    service.submit_application("user-1", ApplicationCreate(internship_id="3"))

    stored = collection.insert_one.call_args[0][0]
    assert stored["status"] == "pending"
    assert stored["user_id"] == "user-1"


def test_withdraw_is_scoped_to_the_owner():
    service, collection = _service(ApplicationService)
    collection.update_one.return_value.matched_count = 0
    app_id = str(ObjectId())

    with pytest.raises(RecordNotFoundError):
        service.update_application_status(app_id, ApplicationStatus.withdrawn, user_id="someone-else")

    assert collection.update_one.call_args[0][0] == {"_id": ObjectId(app_id), "user_id": "someone-else"}


def test_saving_twice_is_rejected():
    service, collection = _service(SavedInternshipService)
    collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")

    with pytest.raises(RecordValidationError, match="already saved"):
        service.save_internship("user-1", SavedInternshipCreate(internship_id="1"))


def test_saved_check_store_failure_is_false():
    service, collection = _service(SavedInternshipService)
    collection.find_one.side_effect = PyMongoError("down")

    assert service.is_internship_saved("user-1", "1") is False


def test_unread_count():
    service, collection = _service(NotificationService)
    now = datetime.now(timezone.utc)
    collection.find.return_value.sort.return_value = [
        {"_id": ObjectId(), "user_id": "user-1", "title": "A", "message": "a", "read": False, "created_at": now},
        {"_id": ObjectId(), "user_id": "user-1", "title": "B", "message": "b", "read": True, "created_at": now},
    ]

    assert service.get_unread_count("user-1") == 1


def test_mark_as_read_of_missing_notification():
    service, collection = _service(NotificationService)
    collection.update_one.return_value.matched_count = 0

    with pytest.raises(RecordNotFoundError):
        service.mark_as_read("user-1", str(ObjectId()))
