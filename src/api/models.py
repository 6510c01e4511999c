"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Response models read domain dataclasses via from_attributes.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models import CODE_PATTERN, EntityState

PHONE_PATTERN = r"^\+?\d{7,15}$"


class SendCodeRequest(BaseModel):
    """Request model for issuing a verification code."""

    phone_number: str = Field(..., pattern=PHONE_PATTERN, description="Phone number, E.164 digits")


class SendCodeResponse(BaseModel):
    message: str
    expires_in_seconds: int


class RegisterRequest(BaseModel):
    """Request model for phone-number registration."""

    phone_number: str = Field(..., pattern=PHONE_PATTERN, description="Phone number, E.164 digits")
    code: str = Field(
        ...,
        min_length=4,
        max_length=6,
        pattern=CODE_PATTERN,
        description="Verification code received by SMS",
    )
    fcm_token: str = Field("", max_length=4096, description="Push-notification registration token")


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    id: str
    access_token: str
    refresh_token: str


class CreatedResponse(BaseModel):
    id: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str


# Users


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    phone_number: str | None = None
    fcm_token: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    image_url: str | None = None


class ProfileUpdateRequest(BaseModel):
    """Partial profile update; omitted fields are left unchanged."""

    fcm_token: str | None = None
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    image_url: str | None = None


class LocationRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    address: str | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)


class LocationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None


# Catalog


class XozmakRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    phone_number: str | None = Field(None, pattern=PHONE_PATTERN)
    address: str | None = None
    image_url: str | None = None
    category_id: str | None = None


class XozmakUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    phone_number: str | None = Field(None, pattern=PHONE_PATTERN)
    address: str | None = None
    image_url: str | None = None
    category_id: str | None = None


class XozmakResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None
    description: str | None = None
    phone_number: str | None = None
    address: str | None = None
    image_url: str | None = None
    category_id: str | None = None
    created_by: str | None = None
    state: EntityState


class CategoryRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    image_url: str | None = None


class CategoryUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    image_url: str | None = None


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None
    image_url: str | None = None
    state: EntityState


class SubCategoryRequest(BaseModel):
    category_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    image_url: str | None = None


class SubCategoryUpdateRequest(BaseModel):
    category_id: str | None = Field(None, min_length=1)
    name: str | None = Field(None, min_length=1, max_length=200)
    image_url: str | None = None


class SubCategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    category_id: str | None = None
    name: str | None = None
    image_url: str | None = None
    state: EntityState
