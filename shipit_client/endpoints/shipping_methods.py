"""Shipping method quotes, listings and details."""

from typing import Any

from shipit_client.endpoints.base import ModelBodyRequest, RawBodyRequest, Request, segment
from shipit_client.models import (
    QuickShippingMethodsResponse,
    ShippingMethodDetailsResponse,
    ShippingMethodListResponse,
    ShippingMethodsResponse,
)


class GetShippingMethodsRequest(ModelBodyRequest):
    """Price every service that can carry the given parcels."""

    method = "POST"
    response_model = ShippingMethodsResponse

    def endpoint(self) -> str:
        return "/v1/shipping-methods"


class GetShippingMethodListRequest(Request):
    method = "GET"
    response_model = ShippingMethodListResponse

    def endpoint(self) -> str:
        return "/v1/list-methods"

    def decode(self, payload: Any) -> ShippingMethodListResponse:
        # The endpoint answers with a bare array.
        return ShippingMethodListResponse.from_dict({"data": payload})


class GetQuickShippingMethodsRequest(RawBodyRequest):
    method = "POST"
    response_model = QuickShippingMethodsResponse

    def endpoint(self) -> str:
        return "/v1/shipping-methods/quick"


class GetShippingMethodDetailsRequest(Request):
    method = "GET"
    response_model = ShippingMethodDetailsResponse

    def __init__(self, service_id: str):
        self.service_id = service_id

    def endpoint(self) -> str:
        return "/v1/shipping-method-details/" + segment(self.service_id)
