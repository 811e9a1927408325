"""
Dependency providers.

Collaborators are built once in build_services() at startup and kept
on app.state; routes get them through these providers, and tests swap
them with app.dependency_overrides.
"""

from typing import Optional

from fastapi import Query, Request
from pymongo.database import Database

from app.core.config import Settings
from app.schemas.schemas import FilterCriteria
from app.services.ai_client import RankingClient
from app.services.matching_service import MatchScorer
from app.services.mongo_service import (
    ApplicationService, InternshipService, NotificationService,
    ProfileService, SavedInternshipService, get_mongo_services
)


def build_services(settings: Settings, db: Database) -> dict:
    """Construct every collaborator the routes need."""
    services = get_mongo_services(db)
    ranking_client = RankingClient(settings) if settings.ai_enabled else None
    services["ranking_client"] = ranking_client
    services["scorer"] = MatchScorer(ranking_client, top_n=settings.ai_top_n)
    return services


def get_internship_service(request: Request) -> InternshipService:
    return request.app.state.services["internships"]


def get_profile_service(request: Request) -> ProfileService:
    return request.app.state.services["profiles"]


def get_application_service(request: Request) -> ApplicationService:
    return request.app.state.services["applications"]


def get_saved_internship_service(request: Request) -> SavedInternshipService:
    return request.app.state.services["saved_internships"]


def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.services["notifications"]


def get_match_scorer(request: Request) -> MatchScorer:
    return request.app.state.services["scorer"]


def get_ranking_client(request: Request) -> Optional[RankingClient]:
    return request.app.state.services["ranking_client"]


def get_filter_criteria(
    state: Optional[str] = Query(None, description="Region, e.g. Karnataka"),
    type_: Optional[str] = Query(None, alias="type"),
    duration: Optional[str] = Query(None, description="e.g. '3 months'"),
    remote: Optional[bool] = Query(None, description="Omit to include both"),
    category: Optional[str] = Query(None)
) -> FilterCriteria:
    """Query-string filters. An omitted parameter stays unset."""
    return FilterCriteria(
        state=state or None,
        type=type_ or None,
        duration=duration or None,
        remote=remote,
        category=category or None
    )
