"""Saved parcel dimension presets."""

from typing import Any

from shipit_client.endpoints.base import CollectionRequest, RawBodyRequest, Request, drop_none, segment
from shipit_client.models import DimensionResponse


class GetDimensionsRequest(CollectionRequest):
    method = "GET"
    response_model = DimensionResponse

    def __init__(self, type: str | None = None, service: str | None = None):
        self.type = type
        self.service = service

    def endpoint(self) -> str:
        return "/v1/dimensions"

    def query(self) -> dict[str, Any]:
        return drop_none({"type": self.type, "service": self.service})


class CreateDimensionRequest(RawBodyRequest):
    """Answered with no content."""

    method = "POST"

    def endpoint(self) -> str:
        return "/v1/dimensions"


class UpdateDimensionRequest(RawBodyRequest):
    """Answered with no content."""

    method = "PUT"

    def __init__(self, dimension_id: str, data: dict[str, Any]):
        super().__init__(data)
        self.dimension_id = dimension_id

    def endpoint(self) -> str:
        return "/v1/dimensions/" + segment(self.dimension_id)


class DeleteDimensionRequest(Request):
    method = "DELETE"

    def __init__(self, dimension_id: str):
        self.dimension_id = dimension_id

    def endpoint(self) -> str:
        return "/v1/dimensions/" + segment(self.dimension_id)
