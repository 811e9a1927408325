"""
Internship Routes

GET /internships - List active internships with search and filters
GET /internships/categories - Category reference list
GET /internships/skills - Skill suggestions for forms
GET /internships/{internship_id} - Get internship details
GET /internships/{internship_id}/enhanced - AI-enhanced description
POST /internships - Create internship (government only)
PUT /internships/{internship_id} - Update internship (government only)
DELETE /internships/{internship_id} - Delete internship (government only)
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from app.api.dependencies import (
    get_filter_criteria, get_internship_service, get_ranking_client
)
from app.core.auth import get_current_government
from app.schemas.schemas import (
    CreatedResponse, FilterCriteria, Internship, InternshipCreate,
    InternshipListResponse, InternshipUpdate, MessageResponse
)
from app.services.ai_client import RankingClient
from app.services.filter_service import apply_filters
from app.services.mongo_service import InternshipService

router = APIRouter(prefix="/internships", tags=["Internships"])


@router.get("", response_model=InternshipListResponse)
def list_internships(
    search: Optional[str] = Query(None, description="Search title, company, location, category, skills"),
    criteria: FilterCriteria = Depends(get_filter_criteria),
    service: InternshipService = Depends(get_internship_service)
):
    """List active internships, newest first, narrowed by search and filters."""
    internships = apply_filters(service.get_filtered_internships(criteria), search or "")
    return InternshipListResponse(internships=internships, total=len(internships))


@router.get("/categories", response_model=List[str])
def list_categories(service: InternshipService = Depends(get_internship_service)):
    return service.get_categories()


@router.get("/skills", response_model=List[str])
def list_skill_suggestions(service: InternshipService = Depends(get_internship_service)):
    return service.get_skill_suggestions()


@router.get("/{internship_id}", response_model=Internship)
def get_internship(internship_id: str, service: InternshipService = Depends(get_internship_service)):
    internship = service.get_internship(internship_id)
    if not internship:
        raise HTTPException(status_code=404, detail="Internship not found")
    return internship


@router.get("/{internship_id}/enhanced", response_model=MessageResponse)
def get_enhanced_description(
    internship_id: str,
    service: InternshipService = Depends(get_internship_service),
    ranking_client: Optional[RankingClient] = Depends(get_ranking_client)
):
    """
    Friendlier description written by the text-generation service.
    Returns the stored description when the service is unavailable.
    """
    internship = service.get_internship(internship_id)
    if not internship:
        raise HTTPException(status_code=404, detail="Internship not found")

    if ranking_client is None:
        return MessageResponse(message=internship.description)
    return MessageResponse(message=ranking_client.enhance_description(internship))


@router.post("", response_model=CreatedResponse, status_code=201)
def create_internship(
    data: InternshipCreate,
    user: dict = Depends(get_current_government),
    service: InternshipService = Depends(get_internship_service)
):
    """Create a new internship posting. Only government accounts can post."""
    internship_id = service.create_internship(data)
    return CreatedResponse(id=internship_id, message="Internship created successfully")


@router.put("/{internship_id}", response_model=MessageResponse)
def update_internship(
    internship_id: str,
    data: InternshipUpdate,
    user: dict = Depends(get_current_government),
    service: InternshipService = Depends(get_internship_service)
):
    service.update_internship(internship_id, data)
    return MessageResponse(message="Internship updated successfully")


@router.delete("/{internship_id}", response_model=MessageResponse)
def delete_internship(
    internship_id: str,
    user: dict = Depends(get_current_government),
    service: InternshipService = Depends(get_internship_service)
):
    service.delete_internship(internship_id)
    return MessageResponse(message="Internship deleted successfully")
