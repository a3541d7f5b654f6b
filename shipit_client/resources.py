"""Resource facades grouping the Shipit API operations by domain area.

Each method builds one request definition and hands it to the connector,
which either returns the typed result or raises.
"""

from typing import TYPE_CHECKING, Any

from shipit_client.endpoints import (
    agents,
    balance,
    carrier_contracts,
    consignment_templates,
    dimensions,
    locations,
    organization_members,
    organizations,
    postal_codes,
    print_templates,
    shipments,
    shipping_methods,
    tracking,
    user,
)
from shipit_client.models import (
    AgentResponse,
    AgentsResponse,
    BalanceResponse,
    BookPickUpRequest,
    BookPickUpResponse,
    CarrierContractResponse,
    ConsignmentTemplateResponse,
    ConsolidateShipmentRequest,
    ConsolidateShipmentResponse,
    CountryInfoResponse,
    DimensionResponse,
    LocationResponse,
    OrganizationMemberResponse,
    OrganizationResponse,
    PostalCodeRequest,
    PostalCodeResponse,
    PostalCodeSuggestionsResponse,
    PrintTemplateResponse,
    QuickShippingMethodsResponse,
    RegistrationRequest,
    RegistrationResponse,
    ShipmentRequest,
    ShipmentResponse,
    ShippingMethodDetailsResponse,
    ShippingMethodListResponse,
    ShippingMethodsRequest,
    ShippingMethodsResponse,
    TrackingEventResponse,
    TrackingLinkResponse,
    UserResponse,
    ValidateShipmentResponse,
)

if TYPE_CHECKING:
    from shipit_client.connector import ShipitConnector


class Resource:
    """Base class for a group of related operations."""

    def __init__(self, connector: "ShipitConnector"):
        self.connector = connector


class ShipmentsResource(Resource):
    def create(self, data: ShipmentRequest) -> ShipmentResponse:
        return self.connector.send(shipments.CreateShipmentRequest(data))

    def create_pending(self, data: ShipmentRequest) -> ShipmentResponse:
        return self.connector.send(shipments.CreatePendingShipmentRequest(data))

    def book_return(self, data: ShipmentRequest) -> ShipmentResponse:
        return self.connector.send(shipments.BookCustomerReturnRequest(data))

    def validate(self, data: ShipmentRequest) -> ValidateShipmentResponse:
        """Validate without booking. An invalid shipment is returned, not raised."""
        return self.connector.send(shipments.ValidateShipmentRequest(data))

    def consolidate(self, data: ConsolidateShipmentRequest) -> ConsolidateShipmentResponse:
        return self.connector.send(shipments.ConsolidateShipmentRequest(data))

    def book_pickup(self, data: BookPickUpRequest) -> BookPickUpResponse:
        return self.connector.send(shipments.BookPickUpRequest(data))


class ShippingMethodsResource(Resource):
    def get(self, data: ShippingMethodsRequest) -> ShippingMethodsResponse:
        return self.connector.send(shipping_methods.GetShippingMethodsRequest(data))

    def list(self) -> ShippingMethodListResponse:
        return self.connector.send(shipping_methods.GetShippingMethodListRequest())

    def details(self, service_id: str) -> ShippingMethodDetailsResponse:
        return self.connector.send(shipping_methods.GetShippingMethodDetailsRequest(service_id))

    def quick(self, data: dict[str, Any]) -> QuickShippingMethodsResponse:
        return self.connector.send(shipping_methods.GetQuickShippingMethodsRequest(data))


class AgentsResource(Resource):
    def get(self, data: dict[str, Any]) -> AgentsResponse:
        """Search service points, e.g. ``{"postcode": "00100", "country": "FI"}``."""
        return self.connector.send(agents.GetAgentsRequest(data))

    def get_by_id(self, agent_id: str) -> AgentResponse:
        return self.connector.send(agents.GetAgentByIdRequest(agent_id))


class LocationsResource(Resource):
    def index(self) -> list[LocationResponse]:
        return self.connector.send(locations.GetLocationsRequest())

    def show(self, location_id: str) -> LocationResponse:
        return self.connector.send(locations.GetLocationRequest(location_id))

    def store(self, data: dict[str, Any]) -> LocationResponse:
        return self.connector.send(locations.CreateLocationRequest(data))

    def update(self, location_id: str, data: dict[str, Any]) -> LocationResponse:
        return self.connector.send(locations.UpdateLocationRequest(location_id, data))

    def destroy(self, location_id: str) -> LocationResponse:
        return self.connector.send(locations.DeleteLocationRequest(location_id))


class OrganizationsResource(Resource):
    def index(self) -> list[OrganizationResponse]:
        return self.connector.send(organizations.GetOrganizationsRequest())

    def show(self, organization_id: str) -> OrganizationResponse:
        return self.connector.send(organizations.GetOrganizationRequest(organization_id))

    def store(self, data: dict[str, Any]) -> OrganizationResponse:
        return self.connector.send(organizations.CreateOrganizationRequest(data))

    def update(self, organization_id: str, data: dict[str, Any]) -> OrganizationResponse:
        return self.connector.send(organizations.UpdateOrganizationRequest(organization_id, data))

    def destroy(self, organization_id: str) -> OrganizationResponse:
        return self.connector.send(organizations.DeleteOrganizationRequest(organization_id))


class OrganizationMembersResource(Resource):
    def index(self, organization_id: str) -> OrganizationMemberResponse:
        return self.connector.send(
            organization_members.GetOrganizationMembersRequest(organization_id)
        )

    def show(self, organization_id: str, member_id: str) -> OrganizationMemberResponse:
        return self.connector.send(
            organization_members.GetOrganizationMemberRequest(organization_id, member_id)
        )

    def store(self, organization_id: str, data: dict[str, Any]) -> OrganizationMemberResponse:
        return self.connector.send(
            organization_members.CreateOrganizationMemberRequest(organization_id, data)
        )

    def update(
        self,
        organization_id: str,
        member_id: str,
        data: dict[str, Any],
    ) -> OrganizationMemberResponse:
        return self.connector.send(
            organization_members.UpdateOrganizationMemberRequest(organization_id, member_id, data)
        )

    def destroy(self, organization_id: str, member_id: str) -> OrganizationMemberResponse:
        return self.connector.send(
            organization_members.DeleteOrganizationMemberRequest(organization_id, member_id)
        )


class PostalCodesResource(Resource):
    def match(self, data: PostalCodeRequest) -> PostalCodeResponse:
        return self.connector.send(postal_codes.GetMatchingPostalCodesRequest(data))

    def suggestions(self, query: dict[str, Any] | None = None) -> PostalCodeSuggestionsResponse:
        return self.connector.send(postal_codes.GetPostalCodeSuggestionsRequest(query))

    def country_info(self) -> CountryInfoResponse:
        return self.connector.send(postal_codes.GetCountryInfoRequest())


class TrackingResource(Resource):
    def query(self, data: dict[str, Any]) -> TrackingEventResponse:
        return self.connector.send(tracking.QueryTrackingEventsRequest(data))

    def link(self, tracking_number: str) -> TrackingLinkResponse:
        return self.connector.send(tracking.GetTrackingLinkRequest(tracking_number))


class CarrierContractsResource(Resource):
    def index(self) -> CarrierContractResponse:
        return self.connector.send(carrier_contracts.GetCarrierContractsRequest())

    def show(self, contract_id: str) -> CarrierContractResponse:
        return self.connector.send(carrier_contracts.GetCarrierContractRequest(contract_id))

    def store(self, data: dict[str, Any]) -> CarrierContractResponse:
        return self.connector.send(carrier_contracts.CreateCarrierContractRequest(data))

    def update(self, contract_id: str, data: dict[str, Any]) -> CarrierContractResponse:
        return self.connector.send(carrier_contracts.UpdateCarrierContractRequest(contract_id, data))

    def destroy(self, contract_id: str) -> CarrierContractResponse:
        return self.connector.send(carrier_contracts.DeleteCarrierContractRequest(contract_id))


class ConsignmentTemplatesResource(Resource):
    def index(self) -> ConsignmentTemplateResponse:
        return self.connector.send(consignment_templates.GetConsignmentTemplatesRequest())

    def show(self, template_id: str) -> ConsignmentTemplateResponse:
        return self.connector.send(consignment_templates.GetConsignmentTemplateRequest(template_id))

    def store(self, data: dict[str, Any]) -> ConsignmentTemplateResponse:
        return self.connector.send(consignment_templates.CreateConsignmentTemplateRequest(data))

    def update(self, template_id: str, data: dict[str, Any]) -> ConsignmentTemplateResponse:
        return self.connector.send(
            consignment_templates.UpdateConsignmentTemplateRequest(template_id, data)
        )

    def destroy(self, template_id: str) -> ConsignmentTemplateResponse:
        return self.connector.send(
            consignment_templates.DeleteConsignmentTemplateRequest(template_id)
        )


class BalanceResource(Resource):
    def carrier_reports(self) -> BalanceResponse:
        return self.connector.send(balance.GetCarrierReportsRequest())

    def carriers(self) -> BalanceResponse:
        return self.connector.send(balance.GetBalanceCarriersRequest())

    def get(self, balance_id: str) -> BalanceResponse:
        return self.connector.send(balance.GetBalanceRequest(balance_id))

    def invoice_payrows(self, balance_id: str, invoice: str) -> BalanceResponse:
        return self.connector.send(balance.GetInvoicePayrowsRequest(balance_id, invoice))

    def invoices(self, data: dict[str, Any]) -> BalanceResponse:
        return self.connector.send(balance.QueryInvoicesRequest(data))

    def invoice(self, invoice: str) -> BalanceResponse:
        return self.connector.send(balance.GetInvoiceRequest(invoice))

    def all_payrows(self, invoice: str) -> BalanceResponse:
        return self.connector.send(balance.GetAllPayrowsRequest(invoice))

    def invoice_booking_data(self, invoice: str, data: dict[str, Any]) -> BalanceResponse:
        return self.connector.send(balance.InvoiceBookingDataRequest(invoice, data))

    def payrows(self, data: dict[str, Any]) -> BalanceResponse:
        return self.connector.send(balance.QueryPayrowsRequest(data))

    def payrow(self, payrow: str) -> BalanceResponse:
        return self.connector.send(balance.GetPayrowRequest(payrow))

    def transactions(self, data: dict[str, Any]) -> BalanceResponse:
        return self.connector.send(balance.QueryTransactionsRequest(data))

    def transaction(self, transaction: str) -> BalanceResponse:
        return self.connector.send(balance.GetTransactionRequest(transaction))

    def user(self, user_id: str) -> BalanceResponse:
        return self.connector.send(balance.GetBalanceUserRequest(user_id))

    def wallets(self, data: dict[str, Any]) -> BalanceResponse:
        return self.connector.send(balance.QueryWalletsRequest(data))

    def pending_invoices(self, business_entity_id: str) -> BalanceResponse:
        return self.connector.send(balance.GetPendingInvoicesRequest(business_entity_id))

    def shipments(self, data: dict[str, Any]) -> BalanceResponse:
        return self.connector.send(balance.QueryBalanceShipmentsRequest(data))


class UserResource(Resource):
    def current(self) -> UserResponse:
        return self.connector.send(user.GetCurrentUserRequest())

    def register(self, data: RegistrationRequest) -> RegistrationResponse:
        return self.connector.send(user.RegisterRequest(data))


class DimensionsResource(Resource):
    def index(self, type: str | None = None, service: str | None = None) -> list[DimensionResponse]:
        return self.connector.send(dimensions.GetDimensionsRequest(type=type, service=service))

    def store(self, data: dict[str, Any]) -> None:
        self.connector.send(dimensions.CreateDimensionRequest(data))

    def update(self, dimension_id: str, data: dict[str, Any]) -> None:
        self.connector.send(dimensions.UpdateDimensionRequest(dimension_id, data))

    def destroy(self, dimension_id: str) -> None:
        self.connector.send(dimensions.DeleteDimensionRequest(dimension_id))


class PrintTemplatesResource(Resource):
    def index(self, carrier_id: str | None = None) -> list[PrintTemplateResponse]:
        return self.connector.send(print_templates.GetPrintTemplatesRequest(carrier_id))

    def options(self, carrier: str | None = None, service: str | None = None) -> Any:
        return self.connector.send(
            print_templates.GetPrintTemplateOptionsRequest(carrier=carrier, service=service)
        )

    def store(self, data: dict[str, Any]) -> None:
        self.connector.send(print_templates.CreatePrintTemplateRequest(data))

    def destroy(self, template_id: str) -> None:
        self.connector.send(print_templates.DeletePrintTemplateRequest(template_id))
