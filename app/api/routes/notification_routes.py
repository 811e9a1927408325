"""
Notification Routes

GET /notifications - Get my notifications
GET /notifications/unread-count - Number of unread notifications
PUT /notifications/{notification_id}/read - Mark as read
DELETE /notifications/{notification_id} - Delete notification
POST /notifications - Send a notification to a user (government only)
"""

from fastapi import APIRouter, Depends
from typing import List

from app.api.dependencies import get_notification_service
from app.core.auth import get_current_government, get_current_user
from app.schemas.schemas import (
    CreatedResponse, MessageResponse, Notification, NotificationCreate,
    UnreadCountResponse
)
from app.services.mongo_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=List[Notification])
def get_notifications(
    user: dict = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service)
):
    return service.get_user_notifications(user["user_id"])


@router.get("/unread-count", response_model=UnreadCountResponse)
def get_unread_count(
    user: dict = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service)
):
    return UnreadCountResponse(unread=service.get_unread_count(user["user_id"]))


@router.put("/{notification_id}/read", response_model=MessageResponse)
def mark_as_read(
    notification_id: str,
    user: dict = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service)
):
    service.mark_as_read(user["user_id"], notification_id)
    return MessageResponse(message="Marked as read")


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_notification(
    notification_id: str,
    user: dict = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service)
):
    service.delete_notification(user["user_id"], notification_id)
    return MessageResponse(message="Notification deleted")


@router.post("", response_model=CreatedResponse, status_code=201)
def create_notification(
    data: NotificationCreate,
    user: dict = Depends(get_current_government),
    service: NotificationService = Depends(get_notification_service)
):
    notification_id = service.create_notification(data)
    return CreatedResponse(id=notification_id, message="Notification sent")
