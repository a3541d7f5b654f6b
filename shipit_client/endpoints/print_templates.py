"""Label print templates."""

from collections.abc import Mapping
from typing import Any

from shipit_client.endpoints.base import CollectionRequest, RawBodyRequest, Request, drop_none, segment
from shipit_client.models import PrintTemplateResponse


class GetPrintTemplatesRequest(CollectionRequest):
    method = "GET"
    response_model = PrintTemplateResponse

    def __init__(self, carrier_id: str | None = None):
        self.carrier_id = carrier_id

    def endpoint(self) -> str:
        return "/v1/print-templates"

    def query(self) -> dict[str, Any]:
        return drop_none({"carrier_id": self.carrier_id})


class GetPrintTemplateOptionsRequest(Request):
    """Layouts available per carrier and service, unwrapped from ``data``."""

    method = "GET"

    def __init__(self, carrier: str | None = None, service: str | None = None):
        self.carrier = carrier
        self.service = service

    def endpoint(self) -> str:
        return "/v1/print-templates/options"

    def query(self) -> dict[str, Any]:
        return drop_none({"carrier": self.carrier, "service": self.service})

    def decode(self, payload: Any) -> Any:
        if isinstance(payload, Mapping) and "data" in payload:
            return payload["data"]
        return payload


class CreatePrintTemplateRequest(RawBodyRequest):
    """Answered with no content."""

    method = "POST"

    def endpoint(self) -> str:
        return "/v1/print-templates"


class DeletePrintTemplateRequest(Request):
    """Answered with no content."""

    method = "DELETE"

    def __init__(self, template_id: str):
        self.template_id = template_id

    def endpoint(self) -> str:
        return "/v1/print-templates/" + segment(self.template_id)
