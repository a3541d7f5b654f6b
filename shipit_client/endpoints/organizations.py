"""Organizations the authenticated user belongs to."""

from typing import Any

from shipit_client.endpoints.base import CollectionRequest, RawBodyRequest, Request, segment
from shipit_client.models import OrganizationResponse


class GetOrganizationsRequest(CollectionRequest):
    method = "GET"
    response_model = OrganizationResponse

    def endpoint(self) -> str:
        return "/v1/organizations"


class GetOrganizationRequest(Request):
    method = "GET"
    response_model = OrganizationResponse

    def __init__(self, organization_id: str):
        self.organization_id = organization_id

    def endpoint(self) -> str:
        return "/v1/organizations/" + segment(self.organization_id)


class CreateOrganizationRequest(RawBodyRequest):
    method = "POST"
    response_model = OrganizationResponse

    def endpoint(self) -> str:
        return "/v1/organizations"


class UpdateOrganizationRequest(RawBodyRequest):
    method = "PUT"
    response_model = OrganizationResponse

    def __init__(self, organization_id: str, data: dict[str, Any]):
        super().__init__(data)
        self.organization_id = organization_id

    def endpoint(self) -> str:
        return "/v1/organizations/" + segment(self.organization_id)


class DeleteOrganizationRequest(GetOrganizationRequest):
    method = "DELETE"
