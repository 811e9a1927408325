"""
Application Routes

POST /applications - Apply to an internship (student only)
GET /applications - Get my applications
POST /applications/{application_id}/withdraw - Withdraw own application
PUT /applications/{application_id}/status - Update status (government only)
"""

from fastapi import APIRouter, Depends
from typing import List

from app.api.dependencies import get_application_service
from app.core.auth import get_current_government, get_current_student
from app.schemas.schemas import (
    Application, ApplicationCreate, ApplicationStatus,
    ApplicationStatusUpdate, CreatedResponse, MessageResponse
)
from app.services.mongo_service import ApplicationService

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.post("", response_model=CreatedResponse, status_code=201)
def submit_application(
    data: ApplicationCreate,
    student: dict = Depends(get_current_student),
    service: ApplicationService = Depends(get_application_service)
):
    application_id = service.submit_application(student["user_id"], data)
    return CreatedResponse(id=application_id, message="Application submitted successfully")


@router.get("", response_model=List[Application])
def get_my_applications(
    student: dict = Depends(get_current_student),
    service: ApplicationService = Depends(get_application_service)
):
    return service.get_user_applications(student["user_id"])


@router.post("/{application_id}/withdraw", response_model=MessageResponse)
def withdraw_application(
    application_id: str,
    student: dict = Depends(get_current_student),
    service: ApplicationService = Depends(get_application_service)
):
    service.update_application_status(
        application_id, ApplicationStatus.withdrawn, user_id=student["user_id"]
    )
    return MessageResponse(message="Application withdrawn")


@router.put("/{application_id}/status", response_model=MessageResponse)
def update_application_status(
    application_id: str,
    data: ApplicationStatusUpdate,
    user: dict = Depends(get_current_government),
    service: ApplicationService = Depends(get_application_service)
):
    service.update_application_status(application_id, data.status, data.notes)
    return MessageResponse(message=f"Application status updated to {data.status.value}")
