"""Connector for the Shipit REST API."""

import logging
from collections.abc import Mapping
from typing import Any

import requests

from shipit_client import resources
from shipit_client.endpoints.base import Request
from shipit_client.errors import DecodingError, HTTPError, TransportError
from shipit_client.models import ErrorResponse

logger = logging.getLogger(__name__)

# Carrier API hosts. The production default and the explicit live host use
# different top-level domains.
PRODUCTION_URL = "https://api.shipit.fi"
LIVE_URL = "https://api.shipit.ax"
TEST_URL = "https://apitest.shipit.ax"


class ShipitConnector:
    """Entry point for every Shipit API call.

    Holds the base URL, the API token and the default headers. Nothing is
    changed after construction, so one connector can serve any number of
    independent calls.
    """

    def __init__(
        self,
        api_token: str,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        if not api_token:
            raise ValueError("An API token is required to talk to the Shipit API.")
        if not base_url:
            raise ValueError("A base URL is required to talk to the Shipit API.")

        self.api_token = api_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(self.default_headers())
        self.session.headers["Authorization"] = f"Bearer {api_token}"

    @classmethod
    def new(cls, api_token: str, production: bool = False, **kwargs) -> "ShipitConnector":
        """Pick the production or test host from an explicit flag."""
        if production:
            return cls.for_production(api_token, **kwargs)
        return cls.for_testing(api_token, **kwargs)

    @classmethod
    def for_production(cls, api_token: str, **kwargs) -> "ShipitConnector":
        return cls(api_token, PRODUCTION_URL, **kwargs)

    @classmethod
    def for_testing(cls, api_token: str, **kwargs) -> "ShipitConnector":
        return cls(api_token, TEST_URL, **kwargs)

    @classmethod
    def live(cls, api_token: str, **kwargs) -> "ShipitConnector":
        return cls(api_token, LIVE_URL, **kwargs)

    @classmethod
    def test(cls, api_token: str, **kwargs) -> "ShipitConnector":
        return cls(api_token, TEST_URL, **kwargs)

    @classmethod
    def custom(cls, api_token: str, base_url: str, **kwargs) -> "ShipitConnector":
        return cls(api_token, base_url, **kwargs)

    @staticmethod
    def default_headers() -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    @staticmethod
    def has_request_failed(response: requests.Response) -> bool:
        return response.status_code >= 400

    def send(self, request: Request) -> Any:
        """Issue one request and return its decoded result.

        Raises:
            TransportError: The request never produced a response.
            HTTPError: The response status is 400 or above.
            DecodingError: The body is not the expected shape.
        """
        url = self.base_url + request.endpoint()
        try:
            resp = self.session.request(
                request.method,
                url,
                params=request.query() or None,
                json=request.body(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", request.method, url, exc)
            raise TransportError(request.method, url, exc) from exc

        logger.debug("%s %s -> %s", request.method, url, resp.status_code)

        if self.has_request_failed(resp):
            error = _http_error(resp)
            logger.warning("%s %s returned %s: %s", request.method, url, resp.status_code, error.message)
            raise error

        return request.decode(_json_body(resp, type(request).__name__))

    @property
    def shipments(self) -> "resources.ShipmentsResource":
        return resources.ShipmentsResource(self)

    @property
    def shipping_methods(self) -> "resources.ShippingMethodsResource":
        return resources.ShippingMethodsResource(self)

    @property
    def agents(self) -> "resources.AgentsResource":
        return resources.AgentsResource(self)

    @property
    def locations(self) -> "resources.LocationsResource":
        return resources.LocationsResource(self)

    @property
    def organizations(self) -> "resources.OrganizationsResource":
        return resources.OrganizationsResource(self)

    @property
    def organization_members(self) -> "resources.OrganizationMembersResource":
        return resources.OrganizationMembersResource(self)

    @property
    def postal_codes(self) -> "resources.PostalCodesResource":
        return resources.PostalCodesResource(self)

    @property
    def tracking(self) -> "resources.TrackingResource":
        return resources.TrackingResource(self)

    @property
    def carrier_contracts(self) -> "resources.CarrierContractsResource":
        return resources.CarrierContractsResource(self)

    @property
    def consignment_templates(self) -> "resources.ConsignmentTemplatesResource":
        return resources.ConsignmentTemplatesResource(self)

    @property
    def balance(self) -> "resources.BalanceResource":
        return resources.BalanceResource(self)

    @property
    def user(self) -> "resources.UserResource":
        return resources.UserResource(self)

    @property
    def dimensions(self) -> "resources.DimensionsResource":
        return resources.DimensionsResource(self)

    @property
    def print_templates(self) -> "resources.PrintTemplatesResource":
        return resources.PrintTemplatesResource(self)

    def __repr__(self) -> str:
        return f"ShipitConnector(base_url={self.base_url!r})"


def _json_body(resp: requests.Response, request_name: str) -> Any:
    """Parse a response body. An empty body yields None."""
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError as exc:
        raise DecodingError(request_name, None, f"response is not valid JSON: {exc}") from exc


def _http_error(resp: requests.Response) -> HTTPError:
    """Build an HTTPError from a failed response and its error envelope."""
    try:
        body = resp.json()
    except ValueError:
        return HTTPError(resp.status_code, resp.reason or "Request failed")

    try:
        error = ErrorResponse.from_dict(body)
    except DecodingError:
        # Bare {"message": ...} bodies, e.g. an auth failure
        message = body.get("message") if isinstance(body, Mapping) else None
        if isinstance(message, str) and message:
            return HTTPError(resp.status_code, message)
        return HTTPError(resp.status_code, resp.reason or "Request failed")

    return HTTPError(
        resp.status_code,
        error.message,
        code=error.code,
        errordata=error.errordata or None,
        messages=error.messages or None,
        error=error,
    )
