"""Tracking links and tracking event queries."""

from shipit_client.endpoints.base import RawBodyRequest, Request, segment
from shipit_client.models import TrackingEventResponse, TrackingLinkResponse


class QueryTrackingEventsRequest(RawBodyRequest):
    method = "POST"
    response_model = TrackingEventResponse

    def endpoint(self) -> str:
        return "/v1/query-tracking-events"


class GetTrackingLinkRequest(Request):
    method = "GET"
    response_model = TrackingLinkResponse

    def __init__(self, tracking_number: str):
        self.tracking_number = tracking_number

    def endpoint(self) -> str:
        return "/v1/tracking-link/" + segment(self.tracking_number)
