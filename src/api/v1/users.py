"""
API v1 user routes - the authenticated caller's profile and locations.
"""

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import (
    get_current_user_id,
    get_location_service,
    get_profile_service,
)
from src.api.models import (
    CreatedResponse,
    LocationRequest,
    LocationResponse,
    ProfileResponse,
    ProfileUpdateRequest,
)
from src.domain.models import UserLocation, UserProfile
from src.domain.profiles import LocationService, ProfileService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=ProfileResponse, summary="Get own profile")
def get_profile(
    user_id: str = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    return ProfileResponse.model_validate(service.get_profile(user_id))


@router.put(
    "/me",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update own profile",
)
def update_profile(
    request_data: ProfileUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
) -> Response:
    service.update_profile(user_id, UserProfile(id=user_id, **request_data.model_dump()))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/me/locations",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a delivery location",
)
def add_location(
    request_data: LocationRequest,
    user_id: str = Depends(get_current_user_id),
    service: LocationService = Depends(get_location_service),
) -> CreatedResponse:
    location = UserLocation(id="", user_id=user_id, **request_data.model_dump())
    return CreatedResponse(id=service.add_location(user_id, location))


@router.get(
    "/me/locations",
    response_model=list[LocationResponse],
    summary="List own delivery locations",
)
def list_locations(
    user_id: str = Depends(get_current_user_id),
    service: LocationService = Depends(get_location_service),
) -> list[LocationResponse]:
    return [LocationResponse.model_validate(loc) for loc in service.list_locations(user_id)]
