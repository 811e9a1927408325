"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Stored documents use the same snake_case field names.
"""

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from typing import Annotated, Optional, List
from datetime import date, datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    government = "government"


class ApplicationStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"
    withdrawn = "withdrawn"


class NotificationType(str, Enum):
    application_update = "application_update"
    new_internship = "new_internship"
    deadline_reminder = "deadline_reminder"
    system = "system"


def _date_only(value):
    """Mongo hands dates back as datetimes."""
    if isinstance(value, datetime):
        return value.date()
    return value


StoredDate = Annotated[Optional[date], BeforeValidator(_date_only)]


# ============================================================
# INTERNSHIP (LISTING) SCHEMAS
# ============================================================

class Internship(BaseModel):
    id: str
    title: str
    company: str
    location: str = ""
    state: str = ""
    duration: str = ""
    stipend: str = ""
    skills: List[str] = []
    type: str = ""
    category: str = ""
    remote: bool = False
    description: str = ""
    requirements: List[str] = []
    benefits: List[str] = []
    application_deadline: StoredDate = None
    start_date: StoredDate = None
    is_active: bool = True
    suitable_for_first_timers: bool = True
    language_requirement: List[str] = []
    created_at: Optional[datetime] = None

    model_config = ConfigDict(frozen=True)


class InternshipCreate(BaseModel):
    # Required-field checks happen in InternshipService so the caller
    # gets one message naming every missing field.
    title: str = ""
    company: str = ""
    location: str = ""
    state: str = ""
    duration: str = ""
    stipend: str = ""
    skills: List[str] = []
    type: str = ""
    category: str = ""
    remote: bool = False
    description: str = ""
    requirements: List[str] = []
    benefits: List[str] = []
    application_deadline: Optional[date] = None
    start_date: Optional[date] = None
    suitable_for_first_timers: bool = True
    language_requirement: List[str] = ["English"]


class InternshipUpdate(BaseModel):
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    state: Optional[str] = None
    duration: Optional[str] = None
    stipend: Optional[str] = None
    skills: Optional[List[str]] = None
    type: Optional[str] = None
    category: Optional[str] = None
    remote: Optional[bool] = None
    description: Optional[str] = None
    requirements: Optional[List[str]] = None
    benefits: Optional[List[str]] = None
    application_deadline: Optional[date] = None
    start_date: Optional[date] = None
    is_active: Optional[bool] = None
    suitable_for_first_timers: Optional[bool] = None
    language_requirement: Optional[List[str]] = None


class InternshipListResponse(BaseModel):
    internships: List[Internship]
    total: int


class FilterCriteria(BaseModel):
    """Each criterion, when set, narrows by exact equality. None means unset."""
    state: Optional[str] = None
    type: Optional[str] = None
    duration: Optional[str] = None
    remote: Optional[bool] = None
    category: Optional[str] = None

    def is_empty(self) -> bool:
        return all(v is None for v in self.model_dump().values())


# ============================================================
# PROFILE SCHEMAS
# ============================================================

class Profile(BaseModel):
    id: str
    name: str
    education_level: str = ""
    field_of_study: str = ""
    skills: List[str] = []
    interests: List[str] = []
    state: str = ""
    district: Optional[str] = None
    duration: str = ""
    # Kept as free text; anything other than "remote" earns no remote bonus
    work_type: str = ""
    language: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ProfileUpdate(BaseModel):
    name: str = ""
    education_level: str = ""
    field_of_study: str = ""
    skills: List[str] = []
    interests: List[str] = []
    state: str = ""
    district: Optional[str] = None
    duration: str = ""
    work_type: str = ""
    language: Optional[str] = None


# ============================================================
# MATCHING SCHEMAS
# ============================================================

class MatchResult(BaseModel):
    internship: Internship
    match_score: float = Field(..., ge=0, le=100)
    reasoning: str

    model_config = ConfigDict(frozen=True)


class RecommendationListResponse(BaseModel):
    recommendations: List[MatchResult]
    total: int


class AIRecommendation(BaseModel):
    """One entry of the ranking service's JSON answer. id is 1-based."""
    id: int
    match_score: float = Field(..., alias="matchScore", ge=0, le=100)
    reasoning: str = ""

    model_config = ConfigDict(populate_by_name=True)


class AIRecommendationPayload(BaseModel):
    recommendations: List[AIRecommendation]


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(BaseModel):
    internship_id: str = Field(..., min_length=1)
    internship_title: str = ""
    company_name: str = ""
    location: str = ""
    duration: str = ""
    notes: Optional[str] = None
    resume: Optional[str] = None
    cover_letter: Optional[str] = None


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus
    notes: Optional[str] = None


class Application(BaseModel):
    id: str
    user_id: str
    internship_id: str
    internship_title: str = ""
    company_name: str = ""
    location: str = ""
    duration: str = ""
    status: ApplicationStatus = ApplicationStatus.pending
    applied_at: datetime
    updated_at: datetime
    notes: Optional[str] = None
    resume: Optional[str] = None
    cover_letter: Optional[str] = None


# ============================================================
# SAVED INTERNSHIP SCHEMAS
# ============================================================

class SavedInternshipCreate(BaseModel):
    internship_id: str = Field(..., min_length=1)
    internship_title: str = ""
    company_name: str = ""
    location: str = ""
    duration: str = ""
    stipend: str = ""
    skills: List[str] = []
    remote: bool = False


class SavedInternship(SavedInternshipCreate):
    id: str
    user_id: str
    saved_at: datetime


# ============================================================
# NOTIFICATION SCHEMAS
# ============================================================

class NotificationCreate(BaseModel):
    user_id: str = Field(..., min_length=1)
    type: NotificationType = NotificationType.system
    title: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    read: bool = False
    action_url: Optional[str] = None


class Notification(NotificationCreate):
    id: str
    created_at: datetime


class UnreadCountResponse(BaseModel):
    unread: int


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True


class CreatedResponse(BaseModel):
    id: str
    message: str = "Created"