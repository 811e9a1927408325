"""
Recommendation Routes

GET /recommendations - Ranked internships for the current student

Ranking uses the AI service when configured and falls back to
heuristic matching otherwise; either way the caller gets a list.
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional

from app.api.dependencies import (
    get_filter_criteria, get_internship_service, get_match_scorer,
    get_profile_service
)
from app.core.auth import get_current_student
from app.schemas.schemas import FilterCriteria, RecommendationListResponse
from app.services.filter_service import apply_filters
from app.services.matching_service import MatchScorer
from app.services.mongo_service import InternshipService, ProfileService

router = APIRouter(prefix="/recommendations", tags=["Recommendations"])


@router.get("", response_model=RecommendationListResponse)
def get_recommendations(
    search: Optional[str] = Query(None, description="Search within the ranked internships"),
    criteria: FilterCriteria = Depends(get_filter_criteria),
    student: dict = Depends(get_current_student),
    profiles: ProfileService = Depends(get_profile_service),
    internships: InternshipService = Depends(get_internship_service),
    scorer: MatchScorer = Depends(get_match_scorer)
):
    """
    Score active internships against the student's profile.

    Search and filters narrow the ranked list afterwards, so the
    order (and scores) stay those of the full ranking.
    """
    profile = profiles.get_profile(student["user_id"])
    if profile is None:
        raise HTTPException(status_code=404, detail="Complete your profile to get recommendations")

    ranked = scorer.score(profile, internships.get_all_internships())
    results = apply_filters(ranked, search or "", criteria, key=lambda r: r.internship)

    return RecommendationListResponse(recommendations=results, total=len(results))
