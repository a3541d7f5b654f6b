"""Typed client for the Shipit parcel-shipping API."""

from shipit_client.connector import LIVE_URL, PRODUCTION_URL, TEST_URL, ShipitConnector
from shipit_client.errors import DecodingError, HTTPError, ShipitError, TransportError
from shipit_client.models import UNSET

__version__ = "0.1.0"

__all__ = [
    "LIVE_URL",
    "PRODUCTION_URL",
    "TEST_URL",
    "UNSET",
    "DecodingError",
    "HTTPError",
    "ShipitConnector",
    "ShipitError",
    "TransportError",
]
