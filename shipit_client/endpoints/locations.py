"""Saved sender and receiver locations."""

from typing import Any

from shipit_client.endpoints.base import CollectionRequest, RawBodyRequest, Request, segment
from shipit_client.models import LocationResponse


class GetLocationsRequest(CollectionRequest):
    method = "GET"
    response_model = LocationResponse

    def endpoint(self) -> str:
        return "/v1/locations"


class GetLocationRequest(Request):
    method = "GET"
    response_model = LocationResponse

    def __init__(self, location_id: str):
        self.location_id = location_id

    def endpoint(self) -> str:
        return "/v1/locations/" + segment(self.location_id)


class CreateLocationRequest(RawBodyRequest):
    method = "POST"
    response_model = LocationResponse

    def endpoint(self) -> str:
        return "/v1/locations"


class UpdateLocationRequest(RawBodyRequest):
    method = "PUT"
    response_model = LocationResponse

    def __init__(self, location_id: str, data: dict[str, Any]):
        super().__init__(data)
        self.location_id = location_id

    def endpoint(self) -> str:
        return "/v1/locations/" + segment(self.location_id)


class DeleteLocationRequest(GetLocationRequest):
    method = "DELETE"
