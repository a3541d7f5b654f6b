"""Abstract base class for Shipit API request definitions."""

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote

from shipit_client.models.base import Model, decode_many


def segment(value: str | int) -> str:
    """Quote a caller-supplied identifier for use as a single path segment."""
    return quote(str(value), safe="")


def drop_none(params: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


class Request(ABC):
    """Base class that every API operation must implement.

    A request fixes its HTTP ``method`` and the ``response_model`` its body
    decodes into. ``response_model = None`` means the server answers with
    no content and :meth:`decode` returns None.
    """

    method: str = "GET"
    response_model: type[Model] | None = None

    @abstractmethod
    def endpoint(self) -> str:
        """Return the path below the connector's base URL."""

    def body(self) -> Any:
        """Return the JSON body, or None for requests without one."""
        return None

    def query(self) -> dict[str, Any] | None:
        """Return query parameters. Keys whose value is None are not sent."""
        return None

    def decode(self, payload: Any) -> Any:
        """Turn the decoded JSON body into the typed result."""
        if self.response_model is None:
            return None
        return self.response_model.from_dict(payload)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.method} {self.endpoint()}>"


class ModelBodyRequest(Request):
    """A request whose body is an encoded model instance."""

    def __init__(self, data: Model):
        self.data = data

    def body(self) -> dict[str, Any]:
        return self.data.to_dict()


class RawBodyRequest(Request):
    """A request whose body is a caller-supplied mapping, sent unchanged."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def body(self) -> dict[str, Any]:
        return dict(self.data)


class CollectionRequest(Request):
    """A GET that returns a list of ``response_model`` items."""

    def decode(self, payload: Any) -> list:
        return decode_many(self.response_model, payload)
