"""
API v1 auth routes.

- POST /v1/auth/send-code - Issue a verification code by SMS
- POST /v1/auth/register - Register with the code and receive tokens
"""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_registration_service
from src.api.models import (
    ErrorResponse,
    RegisterRequest,
    RegisterResponse,
    SendCodeRequest,
    SendCodeResponse,
)
from src.domain.registration import RegistrationService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/send-code",
    response_model=SendCodeResponse,
    status_code=status.HTTP_202_ACCEPTED,
    responses={
        503: {"model": ErrorResponse, "description": "Verification cache unavailable"},
        422: {"description": "Validation error"},
    },
    summary="Send a verification code",
    description="Generate a verification code for the phone number and deliver it by SMS. "
    "A new request replaces any code still pending.",
)
def send_code(
    request_data: SendCodeRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> SendCodeResponse:
    expires_in = service.send_code(request_data.phone_number)
    return SendCodeResponse(message="Verification code sent", expires_in_seconds=expires_in)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Code invalid or expired"},
        409: {"model": ErrorResponse, "description": "Account already exists"},
        422: {"description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal error"},
        503: {"model": ErrorResponse, "description": "Verification cache unavailable"},
    },
    summary="Register a new user",
    description="Submit the phone number with the verification code it received. "
    "Creates the account and returns an access/refresh token pair.",
)
def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse:
    """
    Register a new account.

    - **phone_number**: Number the code was sent to
    - **code**: Verification code
    - **fcm_token**: Push-notification token for the device
    """
    result = service.register(
        request_data.phone_number,
        request_data.code,
        request_data.fcm_token,
    )
    return RegisterResponse(
        id=result.id,
        access_token=result.tokens.access_token,
        refresh_token=result.tokens.refresh_token,
    )
