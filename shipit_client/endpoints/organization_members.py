"""Members of an organization. Member payloads have no fixed schema."""

from typing import Any

from shipit_client.endpoints.base import RawBodyRequest, Request, segment
from shipit_client.models import OrganizationMemberResponse


def _members_path(organization_id: str) -> str:
    return "/v1/organizations/" + segment(organization_id) + "/members"


class GetOrganizationMembersRequest(Request):
    method = "GET"
    response_model = OrganizationMemberResponse

    def __init__(self, organization_id: str):
        self.organization_id = organization_id

    def endpoint(self) -> str:
        return _members_path(self.organization_id)


class GetOrganizationMemberRequest(Request):
    method = "GET"
    response_model = OrganizationMemberResponse

    def __init__(self, organization_id: str, member_id: str):
        self.organization_id = organization_id
        self.member_id = member_id

    def endpoint(self) -> str:
        return _members_path(self.organization_id) + "/" + segment(self.member_id)


class CreateOrganizationMemberRequest(RawBodyRequest):
    method = "POST"
    response_model = OrganizationMemberResponse

    def __init__(self, organization_id: str, data: dict[str, Any]):
        super().__init__(data)
        self.organization_id = organization_id

    def endpoint(self) -> str:
        return _members_path(self.organization_id)


class UpdateOrganizationMemberRequest(RawBodyRequest):
    method = "PUT"
    response_model = OrganizationMemberResponse

    def __init__(self, organization_id: str, member_id: str, data: dict[str, Any]):
        super().__init__(data)
        self.organization_id = organization_id
        self.member_id = member_id

    def endpoint(self) -> str:
        return _members_path(self.organization_id) + "/" + segment(self.member_id)


class DeleteOrganizationMemberRequest(GetOrganizationMemberRequest):
    method = "DELETE"
