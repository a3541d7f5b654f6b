"""Service point (agent) lookups."""

from shipit_client.endpoints.base import RawBodyRequest, Request, segment
from shipit_client.models import AgentResponse, AgentsResponse


class GetAgentsRequest(RawBodyRequest):
    """Search service points near a postcode, optionally for given services."""

    method = "POST"
    response_model = AgentsResponse

    def endpoint(self) -> str:
        return "/v1/agents"


class GetAgentByIdRequest(Request):
    method = "GET"
    response_model = AgentResponse

    def __init__(self, agent_id: str):
        self.agent_id = agent_id

    def endpoint(self) -> str:
        return "/v1/agents/" + segment(self.agent_id)
