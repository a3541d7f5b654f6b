"""Postal code matching, suggestions and country metadata."""

from typing import Any

from shipit_client.endpoints.base import ModelBodyRequest, Request, drop_none
from shipit_client.models import (
    CountryInfoResponse,
    PostalCodeResponse,
    PostalCodeSuggestionsResponse,
)


class GetCountryInfoRequest(Request):
    method = "GET"
    response_model = CountryInfoResponse

    def endpoint(self) -> str:
        return "/postalcode/country-info"


class GetMatchingPostalCodesRequest(ModelBodyRequest):
    method = "POST"
    response_model = PostalCodeResponse

    def endpoint(self) -> str:
        return "/v1/postal-codes"


class GetPostalCodeSuggestionsRequest(Request):
    method = "GET"
    response_model = PostalCodeSuggestionsResponse

    def __init__(self, params: dict[str, Any] | None = None):
        self.params = params or {}

    def endpoint(self) -> str:
        return "/postalcode/suggestions"

    def query(self) -> dict[str, Any]:
        return drop_none(self.params)
