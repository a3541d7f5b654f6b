"""Request payload shapes: parties, parcels and the shipment aggregate."""

import math
from dataclasses import dataclass

from shipit_client.models.base import UNSET, JsonArray, Model, Unset, field


@dataclass(frozen=True, kw_only=True)
class Party(Model):
    """A shipment participant: sender, receiver, payer or pickup address.

    ``country`` is an ISO 3166-1 alpha-2 code. The tax identifiers accept an
    explicit ``None`` to clear a value carried over from a template.
    """

    name: str
    email: str
    phone: str
    address: str
    city: str
    postcode: str
    country: str
    address2: str | Unset = UNSET
    state: str | Unset = UNSET
    is_company: bool | Unset = UNSET
    contact_person: str | Unset = UNSET
    eori_number: str | None | Unset = UNSET
    hmrc_number: str | None | Unset = UNSET
    ioss_number: str | None | Unset = UNSET
    ioss_number_issuer: str | None | Unset = UNSET
    vat_number: str | None | Unset = UNSET
    voec_number: str | None | Unset = UNSET
    social_security_number: str | None | Unset = UNSET
    employer_identification_number: str | None | Unset = UNSET

    def __post_init__(self):
        if len(self.country) != 2 or not self.country.isalpha():
            raise ValueError(f"country must be a two-letter code, got {self.country!r}")


@dataclass(frozen=True, kw_only=True)
class DangerousGoods(Model):
    """ADR classification of hazardous contents in a parcel."""

    adr_class: str
    description: str
    hazard_code: str
    net_weight: float
    package_code: str
    package_type: str
    technical_descr: str
    un_code: str
    limited_quantities: bool | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class Parcel(Model):
    """A physical package. Dimensions in centimetres, weight in kilograms."""

    length: float
    width: float
    height: float
    weight: float
    copies: int | Unset = UNSET
    type: str | Unset = UNSET
    dangerous_goods: DangerousGoods | None | Unset = UNSET

    def __post_init__(self):
        for name in ("length", "width", "height", "weight"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive finite number, got {value!r}")


@dataclass(frozen=True, kw_only=True)
class Cod(Model):
    """Cash-on-delivery collection details."""

    amount: float
    currency_code: str
    account: str
    bank: str
    reference: str


@dataclass(frozen=True, kw_only=True)
class Proforma(Model):
    """Proforma invoice declaring customs value for international shipments."""

    invoice_sub_total: float
    other_charges: float
    insurance: float
    inco_terms: str
    shipper_name: str
    invoice_number: str
    total_weight: float
    freight_charges: float
    invoice_currency: str
    discount: float
    invoice_total: float
    shipping_date: str
    total_duties_and_taxes: float
    total_duties: float
    total_taxes: float


@dataclass(frozen=True, kw_only=True)
class Item(Model):
    """One customs line item."""

    quantity: int
    quantity_unit: str
    description: str
    unit_weight: float
    unit_value: float
    hs_tariff_code: str
    country_of_origin: str


@dataclass(frozen=True, kw_only=True)
class DateInformation(Model):
    """Requested collection and delivery windows."""

    collection_date: str | Unset = UNSET
    collection_time_earliest: str | Unset = UNSET
    collection_time_latest: str | Unset = UNSET
    delivery_date: str | Unset = UNSET
    delivery_time_earliest: str | Unset = UNSET
    delivery_time_latest: str | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class AdditionalServices(Model):
    """Carrier add-on services, mostly used for freight."""

    dangerous_goods: bool | Unset = UNSET
    call_advising: bool | Unset = UNSET
    email_advising: bool | Unset = UNSET
    receipt_in_terminal: bool | Unset = UNSET
    reception_in_terminal: bool | Unset = UNSET
    hiab_pick_up: bool | Unset = UNSET
    hiab_delivery: bool | Unset = UNSET
    tail_lift_loading: bool | Unset = UNSET
    tail_lift_unloading: bool | Unset = UNSET
    scheduled_pickups: bool | Unset = UNSET
    scheduled_deliveries: bool | Unset = UNSET
    carrying_goods: bool | Unset = UNSET
    edible_transport: bool | Unset = UNSET
    frozen_transport: bool | Unset = UNSET
    cold_transport: bool | Unset = UNSET
    warm_transport: bool | Unset = UNSET
    saturday_delivery: bool | Unset = UNSET
    pharmaceuticals: bool | Unset = UNSET
    express_delivery: bool | Unset = UNSET
    insurance: bool | Unset = UNSET
    additional_driver: bool | Unset = UNSET
    indoor_delivery: bool | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class ShipmentRequest(Model):
    """Everything needed to book, pend, return or validate a shipment.

    Only ``sender``, ``receiver``, ``parcels`` and ``service_id`` are
    required. Unset optionals are left to the server default; the nullable
    ones (``payer``, ``pickup_address``, ``proforma``, ``cod``,
    ``date_information``, ``additional_services``, ``pending_shipment_id``)
    may be set to ``None`` to clear a templated value.
    """

    sender: Party
    receiver: Party
    parcels: list[Parcel]
    service_id: str
    reference: str | Unset = UNSET
    payer: Party | None | Unset = UNSET
    pickup_address: Party | None | Unset = UNSET
    pickup_id: str | Unset = UNSET
    return_shipment: bool | Unset = UNSET
    return_freight_doc: bool | Unset = UNSET
    value_amount: float | Unset = UNSET
    free_text: str | Unset = UNSET
    free_text_pick_up: str | Unset = UNSET
    contents: str | Unset = UNSET
    proforma: Proforma | None | Unset = UNSET
    dangerous: bool | Unset = UNSET
    proof_of_delivery: bool | Unset = UNSET
    leave_at_door: bool | Unset = UNSET
    pre_notice_sms: bool | Unset = field(key="preNoticeSMS")
    pre_notice_email: bool | Unset = UNSET
    delivery_carry_in: bool | Unset = UNSET
    special: bool | Unset = UNSET
    call_before_delivery: bool | Unset = UNSET
    climate_compensation: bool | Unset = UNSET
    items: list[Item] | Unset = UNSET
    is_quick_shipment: bool | Unset = UNSET
    cod: Cod | None | Unset = UNSET
    personal_verification: bool | Unset = UNSET
    id_check: bool | Unset = UNSET
    signature_required: bool | Unset = UNSET
    fragile: bool | Unset = UNSET
    delivery: bool | Unset = UNSET
    delivery09: bool | Unset = UNSET
    currency: str | Unset = UNSET
    weight_unit: str | Unset = UNSET
    dimension_unit: str | Unset = UNSET
    date_information: DateInformation | None | Unset = UNSET
    additional_services: AdditionalServices | None | Unset = UNSET
    organization_id: int | Unset = UNSET
    organization_member_id: int | Unset = UNSET
    wolt: JsonArray | Unset = UNSET
    associated_shipments: JsonArray | Unset = UNSET
    carrier_contract: str | Unset = UNSET
    carrier_contract_id: int | Unset = UNSET
    consignment_template_id: int | Unset = UNSET
    sender_id: str | Unset = UNSET
    receiver_id: str | Unset = UNSET
    pending_shipment_id: str | None | Unset = UNSET
    type: str | Unset = UNSET
    selected_payment: str | Unset = UNSET
    cart_id: str | Unset = UNSET
    cart_item_id: str | Unset = UNSET
    reseller_id: int | Unset = UNSET
    print_type: str | Unset = UNSET
    send_order_confirmation_email: bool | Unset = UNSET
    widget_identifier: str | Unset = UNSET
    inventory: str | Unset = UNSET
    dropin_id: str | Unset = UNSET
    external_id: str | Unset = UNSET
    pickup_instructions: str | Unset = UNSET
    delivery_instructions: str | Unset = UNSET
    api_context: str | Unset = UNSET

    def __post_init__(self):
        if not self.parcels:
            raise ValueError("a shipment needs at least one parcel")


@dataclass(frozen=True, kw_only=True)
class ShippingMethodsRequest(Model):
    """Route and parcel description used to price available services."""

    sender: Party
    receiver: Party
    parcels: list[Parcel]
    fragile: bool | Unset = UNSET
    custom_pickup_postal_code: str | None | Unset = UNSET
    company_is_sending: bool | Unset = UNSET
    company_is_receiving: bool | Unset = UNSET
    pickup: bool | Unset = UNSET
    delivery: bool | Unset = UNSET
    dangerous: bool | Unset = UNSET
    limited_qtys: bool | Unset = UNSET
    delivery09: bool | Unset = UNSET
    cod: bool | Unset = UNSET
    include_descriptions: bool | Unset = UNSET
    user_session_id: str | Unset = UNSET

    def __post_init__(self):
        if not self.parcels:
            raise ValueError("a shipping methods query needs at least one parcel")


@dataclass(frozen=True, kw_only=True)
class ConsolidateShipmentRequest(Model):
    """Merge several booked shipments under one master tracking number."""

    tracking_numbers: list[str]
    service_id: str

    def __post_init__(self):
        if not self.tracking_numbers:
            raise ValueError("consolidation needs at least one tracking number")


@dataclass(frozen=True, kw_only=True)
class BookPickUpRequest(Model):
    """Ask the carrier to collect an already booked shipment."""

    tracking_number: str
    date: str
    ready_time: str
    close_time: str
    instructions: str | None | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class PostalCodeRequest(Model):
    country: str
    postal_code: str | Unset = UNSET
    city: str | Unset = UNSET


@dataclass(frozen=True, kw_only=True)
class RegistrationRequest(Model):
    email: str
    password: str
    name: str
    phone: str
    country: str

    def __repr__(self) -> str:
        return f"RegistrationRequest(email={self.email!r}, name={self.name!r}, password='***')"
