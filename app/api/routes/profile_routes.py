"""
Profile Routes

GET /profiles/me - Get own profile
PUT /profiles/me - Create or update own profile
"""

from fastapi import APIRouter, HTTPException, Depends

from app.api.dependencies import get_profile_service
from app.core.auth import get_current_user
from app.schemas.schemas import Profile, ProfileUpdate
from app.services.mongo_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["Profiles"])


@router.get("/me", response_model=Profile)
def get_my_profile(
    user: dict = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    profile = service.get_profile(user["user_id"])
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found. Create profile first.")
    return profile


@router.put("/me", response_model=Profile)
def upsert_my_profile(
    data: ProfileUpdate,
    user: dict = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    """Skills and interests feed the recommendation ranking."""
    return service.upsert_profile(user["user_id"], data)
