"""Response payload shapes returned by the Shipit API."""

from dataclasses import dataclass
from typing import Any

from shipit_client.models.base import UNSET, JsonArray, Model, OpaqueModel, Unset, field


@dataclass(frozen=True, kw_only=True)
class ErrorResponse(Model):
    """Error envelope carried by every non-2xx response."""

    code: str | int
    message: str
    errordata: JsonArray | Unset = UNSET
    messages: JsonArray | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class AgentResponse(Model):
    """A carrier service point (pickup/drop-off location)."""

    id: str
    name: str
    address1: str
    city: str
    zipcode: str
    country_code: str
    service_id: str | Unset = UNSET
    carrier: str | Unset = UNSET
    carrier_logo: str | Unset = UNSET
    opening_hours: JsonArray | None | Unset = UNSET
    latitude: float | Unset = UNSET
    longitude: float | Unset = UNSET
    distance_in_kilometers: float | Unset = UNSET
    distance_in_meters: float | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class AgentsResponse(Model):
    """Service points in the order the server ranked them."""

    status: int
    locations: list[AgentResponse]


@dataclass(frozen=True, kw_only=True)
class ServicePointLocation(Model):
    """A pickup point offered alongside a shipping method quote."""

    id: str
    name: str
    address: str
    city: str | Unset = UNSET
    postcode: str | Unset = UNSET
    country: str | Unset = UNSET
    latitude: float | Unset = UNSET
    longitude: float | Unset = UNSET
    service_id: str | Unset = UNSET
    price: float | Unset = UNSET
    opening_hours: JsonArray | Unset = UNSET
    distance: str | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class ShippingMethodResponse(Model):
    """One priced carrier service."""

    service_id: str
    carrier: str
    service_name: str | Unset = UNSET
    price: float | Unset = UNSET
    price_vat0: float | Unset = UNSET
    currency: str | Unset = UNSET
    pickup: bool | Unset = UNSET
    delivery_time: str | Unset = UNSET
    is_pickup_location_method: bool | Unset = UNSET
    is_return_service: bool | Unset = UNSET
    requires_email_for_recipient: bool | Unset = UNSET
    requires_hs_tariff_code: bool | Unset = field(key="requiresHSTariffCode")
    supports_return_freight_doc: bool | Unset = UNSET
    logo: str | Unset = UNSET
    descriptions: JsonArray | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class ShippingMethodsResponse(Model):
    status: int
    methods: list[ShippingMethodResponse]
    locations: list[ServicePointLocation] | Unset = UNSET
    cart_id: str | Unset = UNSET
    cart_item_id: str | Unset = UNSET
    error: str | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class QuickShippingMethodsResponse(Model):
    status: int
    methods: list[ShippingMethodResponse]
    most_used: JsonArray


@dataclass(frozen=True, kw_only=True)
class ShippingMethodListResponse(Model):
    """Every service the account can book. The endpoint returns a bare array."""

    data: list[ShippingMethodResponse]


@dataclass(frozen=True, kw_only=True)
class ShippingMethodDetailsResponse(Model):
    """Localized descriptions of one service."""

    service_id: str
    strings_fi: JsonArray | Unset = field(key="strings_fi")
    strings_en: JsonArray | Unset = field(key="strings_en")
    strings_sv: JsonArray | Unset = field(key="strings_sv")
    strings_et: JsonArray | Unset = field(key="strings_et")


@dataclass(frozen=True, kw_only=True)
class ShipmentResponse(Model):
    """Result of booking a shipment, a pending shipment or a return."""

    status: int
    tracking_number: str | Unset = UNSET
    tracking_urls: JsonArray | Unset = UNSET
    order_id: str | Unset = UNSET
    shipit_number: str | Unset = UNSET
    freight_doc: JsonArray | Unset = UNSET
    receipt: str | Unset = UNSET
    labels: JsonArray | Unset = UNSET
    cart_id: str | Unset = UNSET
    cart_item_id: str | Unset = UNSET
    error: JsonArray | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class ValidateShipmentResponse(Model):
    """Validation outcome. ``valid=False`` is a successful call, not an error."""

    status: int
    valid: bool
    errors: JsonArray | Unset = UNSET
    warnings: JsonArray | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class ConsolidateShipmentResponse(Model):
    status: int
    consolidated_tracking_number: str | Unset = UNSET
    shipments: JsonArray | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class BookPickUpResponse(Model):
    status: int
    pickup_id: str | Unset = UNSET
    message: str | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class LocationResponse(Model):
    """A saved sender or receiver address."""

    id: str | int
    name: str
    address: str
    city: str
    postcode: str
    country: str
    address2: str | Unset = UNSET
    state: str | Unset = UNSET
    is_default: bool | Unset = field(key="is_default")
    created_at: str | Unset = field(key="created_at")
    updated_at: str | Unset = field(key="updated_at")


@dataclass(frozen=True, kw_only=True)
class OrganizationResponse(Model):
    id: str | int
    name: str
    description: str | Unset = UNSET
    settings: JsonArray | Unset = UNSET
    created_at: str | Unset = field(key="created_at")
    updated_at: str | Unset = field(key="updated_at")


@dataclass(frozen=True, kw_only=True)
class DimensionResponse(Model):
    """A saved parcel size preset."""

    id: str | int
    type: str
    length: float
    width: float
    height: float
    weight: float
    name: str | Unset = UNSET
    service: str | Unset = UNSET
    parcel_type: str | Unset = field(key="parcel_type")
    unit_of_length: str | Unset = field(key="unit_of_length")
    unit_of_mass: str | Unset = field(key="unit_of_mass")
    created_at: str | Unset = field(key="created_at")
    updated_at: str | Unset = field(key="updated_at")


@dataclass(frozen=True, kw_only=True)
class PrintTemplateResponse(Model):
    id: str | int
    carrier: str
    service: str
    layout: str
    metadata: JsonArray | Unset = UNSET
    created_at: str | Unset = field(key="created_at")
    updated_at: str | Unset = field(key="updated_at")


@dataclass(frozen=True, kw_only=True)
class PostalCodeResponse(Model):
    postal_code: str
    city: str
    country: str
    state: str | Unset = UNSET
    region: str | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class PostalCodeSuggestionsResponse(Model):
    suggestions: list[PostalCodeResponse]


@dataclass(frozen=True, kw_only=True)
class CountryInfoResponse(Model):
    countries: JsonArray


@dataclass(frozen=True, kw_only=True)
class TrackingEventResponse(Model):
    tracking_number: str
    events: list[Any]
    status: str | Unset = UNSET
    estimated_delivery: str | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class TrackingLinkResponse(Model):
    tracking_url: str
    tracking_number: str


@dataclass(frozen=True, kw_only=True)
class UserResponse(Model):
    """The authenticated account."""

    id: str
    name: str
    email: str
    phone: str | Unset = UNSET
    country: str | Unset = UNSET
    locale: str | Unset = UNSET
    is_billing_customer: bool | Unset = UNSET
    business_entity: JsonArray | Unset = UNSET
    wallet: JsonArray | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class RegistrationResponse(Model):
    status: int
    message: str | Unset = UNSET
    user: UserResponse | Unset = UNSET
    token: str | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class BalanceResponse(OpaqueModel):
    """Balance, invoice, payrow and wallet data. No fixed schema."""

    data: Any


@dataclass(frozen=True, kw_only=True)
class CarrierContractResponse(OpaqueModel):
    data: Any


@dataclass(frozen=True, kw_only=True)
class ConsignmentTemplateResponse(OpaqueModel):
    data: Any


@dataclass(frozen=True, kw_only=True)
class OrganizationMemberResponse(OpaqueModel):
    data: Any
