"""Shipment booking, validation, consolidation and pick-ups."""

from shipit_client.endpoints.base import ModelBodyRequest
from shipit_client.models import (
    BookPickUpResponse,
    ConsolidateShipmentResponse,
    ShipmentResponse,
    ValidateShipmentResponse,
)


class CreateShipmentRequest(ModelBodyRequest):
    """Book a shipment and generate its label."""

    method = "PUT"
    response_model = ShipmentResponse

    def endpoint(self) -> str:
        return "/v1/shipment"


class CreatePendingShipmentRequest(ModelBodyRequest):
    """Store a shipment without generating a label."""

    method = "PUT"
    response_model = ShipmentResponse

    def endpoint(self) -> str:
        return "/v1/pending-shipment"


class BookCustomerReturnRequest(ModelBodyRequest):
    method = "PUT"
    response_model = ShipmentResponse

    def endpoint(self) -> str:
        return "/v1/customer-return"


class ValidateShipmentRequest(ModelBodyRequest):
    """Check a shipment without booking it.

    An invalid shipment still answers 200 with ``valid`` set to False.
    """

    method = "PUT"
    response_model = ValidateShipmentResponse

    def endpoint(self) -> str:
        return "/v1/validate-shipment"


class ConsolidateShipmentRequest(ModelBodyRequest):
    method = "POST"
    response_model = ConsolidateShipmentResponse

    def endpoint(self) -> str:
        return "/v1/consolidate-shipment"


class BookPickUpRequest(ModelBodyRequest):
    method = "POST"
    response_model = BookPickUpResponse

    def endpoint(self) -> str:
        return "/v1/pick-ups"
