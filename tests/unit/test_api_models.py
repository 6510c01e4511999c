"""
Unit tests for API request/response models.

Tests Pydantic model validation for auth, user and catalog endpoints.
"""

import pytest
from pydantic import ValidationError

from src.api.models import (
    CategoryResponse,
    LocationRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    SendCodeRequest,
    XozmakRequest,
)
from src.domain.models import Category, EntityState


class TestRegisterRequest:
    def test_valid_request(self) -> None:
        request = RegisterRequest(phone_number="+19998887777", code="4521", fcm_token="tok1")
        assert request.phone_number == "+19998887777"
        assert request.code == "4521"
        assert request.fcm_token == "tok1"

    def test_six_digit_code_accepted(self) -> None:
        assert RegisterRequest(phone_number="+19998887777", code="020202").code == "020202"

    def test_fcm_token_defaults_to_empty(self) -> None:
        assert RegisterRequest(phone_number="+19998887777", code="4521").fcm_token == ""

    @pytest.mark.parametrize("code", ["123", "1234567", "12a4", ""])
    def test_bad_code_rejected(self, code: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            RegisterRequest(phone_number="+19998887777", code=code)
        assert "code" in str(exc_info.value)

    @pytest.mark.parametrize("phone", ["", "abc", "+1-999-888", "12345"])
    def test_bad_phone_rejected(self, phone: str) -> None:
        with pytest.raises(ValidationError):
            RegisterRequest(phone_number=phone, code="4521")

    def test_missing_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RegisterRequest(code="4521")  # type: ignore[call-arg]


class TestSendCodeRequest:
    def test_phone_without_plus_accepted(self) -> None:
        assert SendCodeRequest(phone_number="998901234567").phone_number == "998901234567"


class TestUserModels:
    def test_profile_update_all_optional(self) -> None:
        assert ProfileUpdateRequest().model_dump() == {
            "fcm_token": None,
            "first_name": None,
            "last_name": None,
            "image_url": None,
        }

    @pytest.mark.parametrize("latitude", [-90.1, 90.1])
    def test_location_latitude_bounds(self, latitude: float) -> None:
        with pytest.raises(ValidationError):
            LocationRequest(name="Home", latitude=latitude)

    def test_location_requires_name(self) -> None:
        with pytest.raises(ValidationError):
            LocationRequest(name="")


class TestCatalogModels:
    def test_xozmak_requires_name(self) -> None:
        with pytest.raises(ValidationError):
            XozmakRequest()  # type: ignore[call-arg]

    def test_response_reads_dataclass(self) -> None:
        response = CategoryResponse.model_validate(Category(id="c1", name="Food"))
        assert response.model_dump(mode="json") == {
            "id": "c1",
            "name": "Food",
            "image_url": None,
            "state": "active",
        }

    def test_response_keeps_inactive_state(self) -> None:
        category = Category(id="c1", name="Food", state=EntityState.INACTIVE)
        assert CategoryResponse.model_validate(category).state is EntityState.INACTIVE
