"""
Saved Internship Routes

POST /saved - Save an internship
GET /saved - Get my saved internships
GET /saved/check/{internship_id} - Is this internship saved?
DELETE /saved/{saved_id} - Remove a saved internship
"""

from fastapi import APIRouter, Depends
from typing import List

from app.api.dependencies import get_saved_internship_service
from app.core.auth import get_current_student
from app.schemas.schemas import (
    CreatedResponse, MessageResponse, SavedInternship, SavedInternshipCreate
)
from app.services.mongo_service import SavedInternshipService

router = APIRouter(prefix="/saved", tags=["Saved Internships"])


@router.post("", response_model=CreatedResponse, status_code=201)
def save_internship(
    data: SavedInternshipCreate,
    student: dict = Depends(get_current_student),
    service: SavedInternshipService = Depends(get_saved_internship_service)
):
    saved_id = service.save_internship(student["user_id"], data)
    return CreatedResponse(id=saved_id, message="Internship saved")


@router.get("", response_model=List[SavedInternship])
def get_saved_internships(
    student: dict = Depends(get_current_student),
    service: SavedInternshipService = Depends(get_saved_internship_service)
):
    return service.get_user_saved_internships(student["user_id"])


@router.get("/check/{internship_id}")
def check_saved(
    internship_id: str,
    student: dict = Depends(get_current_student),
    service: SavedInternshipService = Depends(get_saved_internship_service)
):
    return {"saved": service.is_internship_saved(student["user_id"], internship_id)}


@router.delete("/{saved_id}", response_model=MessageResponse)
def remove_saved_internship(
    saved_id: str,
    student: dict = Depends(get_current_student),
    service: SavedInternshipService = Depends(get_saved_internship_service)
):
    service.remove_saved_internship(student["user_id"], saved_id)
    return MessageResponse(message="Removed from saved internships")
