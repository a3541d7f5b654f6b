"""Carrier contracts attached to the account. Payloads have no fixed schema."""

from typing import Any

from shipit_client.endpoints.base import RawBodyRequest, Request, segment
from shipit_client.models import CarrierContractResponse


class GetCarrierContractsRequest(Request):
    method = "GET"
    response_model = CarrierContractResponse

    def endpoint(self) -> str:
        return "/v1/carrier-contracts"


class GetCarrierContractRequest(Request):
    method = "GET"
    response_model = CarrierContractResponse

    def __init__(self, contract_id: str):
        self.contract_id = contract_id

    def endpoint(self) -> str:
        return "/v1/carrier-contracts/" + segment(self.contract_id)


class CreateCarrierContractRequest(RawBodyRequest):
    method = "POST"
    response_model = CarrierContractResponse

    def endpoint(self) -> str:
        return "/v1/carrier-contracts"


class UpdateCarrierContractRequest(RawBodyRequest):
    method = "PUT"
    response_model = CarrierContractResponse

    def __init__(self, contract_id: str, data: dict[str, Any]):
        super().__init__(data)
        self.contract_id = contract_id

    def endpoint(self) -> str:
        return "/v1/carrier-contracts/" + segment(self.contract_id)


class DeleteCarrierContractRequest(GetCarrierContractRequest):
    method = "DELETE"
