"""Pytest fixtures for shipit_client tests."""

import json

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from shipit_client import ShipitConnector
from shipit_client.models import Parcel, Party


def make_response(status_code=200, body=None, reason="OK"):
    """Build a real requests.Response carrying a JSON (or raw) body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.encoding = "utf-8"
    resp.headers["Content-Type"] = "application/json"
    if body is None:
        resp._content = b""
    elif isinstance(body, bytes):
        resp._content = body
    else:
        resp._content = json.dumps(body).encode("utf-8")
    return resp


class FakeSession:
    """Stands in for requests.Session: records calls and replays queued responses."""

    def __init__(self):
        self.headers = CaseInsensitiveDict()
        self.calls = []
        self.responses = []

    def queue(self, status_code=200, body=None, reason="OK"):
        self.responses.append(make_response(status_code, body, reason))

    def fail_with(self, exc):
        self.responses.append(exc)

    def request(self, method, url, params=None, json=None, timeout=None):
        self.calls.append(
            {"method": method, "url": url, "params": params, "json": json, "timeout": timeout}
        )
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def connector(session):
    """A test-mode connector whose HTTP calls go to the fake session."""
    return ShipitConnector.test("secret-token", session=session)


@pytest.fixture
def sender():
    return Party(
        name="Test Sender",
        email="sender@test.com",
        phone="+358401234567",
        address="Test Street 1",
        city="Helsinki",
        postcode="00100",
        country="FI",
    )


@pytest.fixture
def receiver():
    return Party(
        name="Test Receiver",
        email="receiver@test.com",
        phone="+46701234567",
        address="Test Gatan 1",
        city="Stockholm",
        postcode="112 22",
        country="SE",
    )


@pytest.fixture
def parcel():
    return Parcel(length=15, width=15, height=15, weight=1)
