"""
User profile and location services.

Thin pass-throughs over the per-aggregate repositories: log the call,
assign identifiers on create, let domain errors propagate.
"""

import logging
import uuid
from dataclasses import dataclass, replace

from .models import UserLocation, UserProfile
from .ports import LocationRepository, ProfileRepository

logger = logging.getLogger(__name__)


@dataclass
class ProfileService:
    repository: ProfileRepository

    def get_profile(self, user_id: str) -> UserProfile:
        logger.info("GetUserProfile started: user_id=%s", user_id)
        return self.repository.get_profile(user_id)

    def update_profile(self, user_id: str, profile: UserProfile) -> None:
        """Apply the supplied fields to the caller's own profile."""
        logger.info("UpdateUserProfile started: user_id=%s", user_id)
        # Phone number is the registration identity and cannot be edited here.
        self.repository.update_profile(replace(profile, id=user_id, phone_number=None))
        logger.info("UpdateUserProfile finished: user_id=%s", user_id)


@dataclass
class LocationService:
    repository: LocationRepository

    def add_location(self, user_id: str, location: UserLocation) -> str:
        location = replace(location, id=str(uuid.uuid4()), user_id=user_id)
        logger.info(
            "AddLocation started: location_id=%s name=%s user_id=%s",
            location.id,
            location.name,
            user_id,
        )
        self.repository.insert_location(location)
        logger.info("AddLocation finished: location_id=%s", location.id)
        return location.id

    def list_locations(self, user_id: str) -> list[UserLocation]:
        logger.info("GetUserLocation started: user_id=%s", user_id)
        return self.repository.list_locations(user_id)
