"""Request and response payload shapes for the Shipit API."""

from shipit_client.models.base import UNSET, JsonArray, Model, OpaqueModel, Unset
from shipit_client.models.responses import (
    AgentResponse,
    AgentsResponse,
    BalanceResponse,
    BookPickUpResponse,
    CarrierContractResponse,
    ConsignmentTemplateResponse,
    ConsolidateShipmentResponse,
    CountryInfoResponse,
    DimensionResponse,
    ErrorResponse,
    LocationResponse,
    OrganizationMemberResponse,
    OrganizationResponse,
    PostalCodeResponse,
    PostalCodeSuggestionsResponse,
    PrintTemplateResponse,
    QuickShippingMethodsResponse,
    RegistrationResponse,
    ServicePointLocation,
    ShipmentResponse,
    ShippingMethodDetailsResponse,
    ShippingMethodListResponse,
    ShippingMethodResponse,
    ShippingMethodsResponse,
    TrackingEventResponse,
    TrackingLinkResponse,
    UserResponse,
    ValidateShipmentResponse,
)
from shipit_client.models.shipments import (
    AdditionalServices,
    BookPickUpRequest,
    Cod,
    ConsolidateShipmentRequest,
    DangerousGoods,
    DateInformation,
    Item,
    Parcel,
    Party,
    PostalCodeRequest,
    Proforma,
    RegistrationRequest,
    ShipmentRequest,
    ShippingMethodsRequest,
)

__all__ = [
    "UNSET",
    "AdditionalServices",
    "AgentResponse",
    "AgentsResponse",
    "BalanceResponse",
    "BookPickUpRequest",
    "BookPickUpResponse",
    "CarrierContractResponse",
    "Cod",
    "ConsignmentTemplateResponse",
    "ConsolidateShipmentRequest",
    "ConsolidateShipmentResponse",
    "CountryInfoResponse",
    "DangerousGoods",
    "DateInformation",
    "DimensionResponse",
    "ErrorResponse",
    "Item",
    "JsonArray",
    "LocationResponse",
    "Model",
    "OpaqueModel",
    "OrganizationMemberResponse",
    "OrganizationResponse",
    "Parcel",
    "Party",
    "PostalCodeRequest",
    "PostalCodeResponse",
    "PostalCodeSuggestionsResponse",
    "PrintTemplateResponse",
    "Proforma",
    "QuickShippingMethodsResponse",
    "RegistrationRequest",
    "RegistrationResponse",
    "ServicePointLocation",
    "ShipmentRequest",
    "ShipmentResponse",
    "ShippingMethodDetailsResponse",
    "ShippingMethodListResponse",
    "ShippingMethodResponse",
    "ShippingMethodsRequest",
    "ShippingMethodsResponse",
    "TrackingEventResponse",
    "TrackingLinkResponse",
    "Unset",
    "UserResponse",
    "ValidateShipmentResponse",
]
