"""Request definitions: one class per Shipit API operation."""

from shipit_client.endpoints.base import (
    CollectionRequest,
    ModelBodyRequest,
    RawBodyRequest,
    Request,
    segment,
)

__all__ = [
    "CollectionRequest",
    "ModelBodyRequest",
    "RawBodyRequest",
    "Request",
    "segment",
]
