"""Current user and account registration."""

from typing import Any

from shipit_client.endpoints.base import ModelBodyRequest, Request
from shipit_client.errors import DecodingError
from shipit_client.models import RegistrationResponse, UserResponse


class GetCurrentUserRequest(Request):
    method = "GET"
    response_model = UserResponse

    def endpoint(self) -> str:
        return "/v1/users/me"

    def decode(self, payload: Any) -> UserResponse:
        # The user object is wrapped in a "data" envelope.
        if not isinstance(payload, dict) or "data" not in payload:
            raise DecodingError("UserResponse", "data", "response envelope is missing")
        return UserResponse.from_dict(payload["data"])


class RegisterRequest(ModelBodyRequest):
    method = "PUT"
    response_model = RegistrationResponse

    def endpoint(self) -> str:
        return "/v1/register"
