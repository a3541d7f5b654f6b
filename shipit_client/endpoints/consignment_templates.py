"""Reusable consignment templates. Payloads have no fixed schema."""

from typing import Any

from shipit_client.endpoints.base import RawBodyRequest, Request, segment
from shipit_client.models import ConsignmentTemplateResponse


class GetConsignmentTemplatesRequest(Request):
    method = "GET"
    response_model = ConsignmentTemplateResponse

    def endpoint(self) -> str:
        return "/v1/consignment-templates"


class GetConsignmentTemplateRequest(Request):
    method = "GET"
    response_model = ConsignmentTemplateResponse

    def __init__(self, template_id: str):
        self.template_id = template_id

    def endpoint(self) -> str:
        return "/v1/consignment-templates/" + segment(self.template_id)


class CreateConsignmentTemplateRequest(RawBodyRequest):
    method = "POST"
    response_model = ConsignmentTemplateResponse

    def endpoint(self) -> str:
        return "/v1/consignment-templates"


class UpdateConsignmentTemplateRequest(RawBodyRequest):
    method = "PUT"
    response_model = ConsignmentTemplateResponse

    def __init__(self, template_id: str, data: dict[str, Any]):
        super().__init__(data)
        self.template_id = template_id

    def endpoint(self) -> str:
        return "/v1/consignment-templates/" + segment(self.template_id)


class DeleteConsignmentTemplateRequest(GetConsignmentTemplateRequest):
    method = "DELETE"
