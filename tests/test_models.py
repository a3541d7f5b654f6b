"""Tests for payload models and the wire codec."""

import math

import pytest

from shipit_client.errors import DecodingError
from shipit_client.models import (
    UNSET,
    AdditionalServices,
    AgentResponse,
    AgentsResponse,
    BalanceResponse,
    BookPickUpRequest,
    Cod,
    DangerousGoods,
    DateInformation,
    Item,
    LocationResponse,
    Parcel,
    Party,
    RegistrationRequest,
    RegistrationResponse,
    ShipmentRequest,
    ShippingMethodResponse,
    ShippingMethodsRequest,
    ValidateShipmentResponse,
)
from shipit_client.models.base import camel_case


class TestUnset:
    def test_unset_is_falsy_singleton(self):
        assert not UNSET
        assert repr(UNSET) == "UNSET"
        assert type(UNSET)() is UNSET

    def test_camel_case(self):
        assert camel_case("service_id") == "serviceId"
        assert camel_case("employer_identification_number") == "employerIdentificationNumber"
        assert camel_case("delivery09") == "delivery09"
        assert camel_case("address2") == "address2"


class TestEncoding:
    def test_minimal_shipment_has_only_mandatory_keys(self, sender, receiver, parcel):
        request = ShipmentRequest(
            sender=sender,
            receiver=receiver,
            parcels=[parcel],
            service_id="posti.po2103",
        )

        body = request.to_dict()

        assert set(body) == {"sender", "receiver", "parcels", "serviceId"}
        assert body["serviceId"] == "posti.po2103"
        assert body["parcels"] == [{"length": 15, "width": 15, "height": 15, "weight": 1}]
        assert body["sender"] == {
            "name": "Test Sender",
            "email": "sender@test.com",
            "phone": "+358401234567",
            "address": "Test Street 1",
            "city": "Helsinki",
            "postcode": "00100",
            "country": "FI",
        }

    def test_explicit_null_is_sent_for_nullable_fields(self, sender, receiver, parcel):
        request = ShipmentRequest(
            sender=sender,
            receiver=receiver,
            parcels=[parcel],
            service_id="posti.po2103",
            payer=None,
            pending_shipment_id=None,
        )

        body = request.to_dict()

        assert "payer" in body and body["payer"] is None
        assert "pendingShipmentId" in body and body["pendingShipmentId"] is None
        assert "pickupAddress" not in body
        assert "cod" not in body

    def test_party_tax_identifiers_tri_state(self):
        party = Party(
            name="Oy Ab",
            email="info@oy.fi",
            phone="+358000",
            address="Katu 1",
            city="Turku",
            postcode="20100",
            country="FI",
            vat_number="FI12345678",
            eori_number=None,
        )

        body = party.to_dict()

        assert body["vatNumber"] == "FI12345678"
        assert body["eoriNumber"] is None
        assert "hmrcNumber" not in body
        assert "iossNumber" not in body

    def test_explicit_wire_keys(self, sender, receiver, parcel):
        request = ShipmentRequest(
            sender=sender,
            receiver=receiver,
            parcels=[parcel],
            service_id="posti.po2103",
            pre_notice_sms=True,
            delivery09=False,
        )

        body = request.to_dict()

        assert body["preNoticeSMS"] is True
        assert body["delivery09"] is False
        assert "preNoticeSms" not in body

    def test_nested_models_and_lists_are_encoded(self, sender, receiver):
        dangerous = DangerousGoods(
            adr_class="3",
            description="Paint",
            hazard_code="33",
            net_weight=2,
            package_code="4G",
            package_type="Box",
            technical_descr="Paint, flammable",
            un_code="1263",
        )
        request = ShippingMethodsRequest(
            sender=sender,
            receiver=receiver,
            parcels=[Parcel(length=30, width=20, height=10, weight=2.5, dangerous_goods=dangerous)],
            custom_pickup_postal_code=None,
        )

        body = request.to_dict()

        assert body["parcels"][0]["dangerousGoods"]["unCode"] == "1263"
        assert body["parcels"][0]["dangerousGoods"]["technicalDescr"] == "Paint, flammable"
        assert "limitedQuantities" not in body["parcels"][0]["dangerousGoods"]
        assert body["customPickupPostalCode"] is None

    def test_pickup_instructions_null(self):
        request = BookPickUpRequest(
            tracking_number="JJFI1",
            date="2026-10-20",
            ready_time="09:00",
            close_time="16:00",
            instructions=None,
        )

        assert request.to_dict() == {
            "trackingNumber": "JJFI1",
            "date": "2026-10-20",
            "readyTime": "09:00",
            "closeTime": "16:00",
            "instructions": None,
        }


class TestRoundTrip:
    def test_full_shipment_round_trip(self, sender, receiver, parcel):
        request = ShipmentRequest(
            sender=sender,
            receiver=receiver,
            parcels=[parcel, Parcel(length=40, width=30, height=20, weight=4.2, copies=2, type="PACKAGE")],
            service_id="posti.po2103",
            reference="ORDER-1001",
            payer=None,
            pickup_address=sender,
            value_amount=49.9,
            contents="Books",
            pre_notice_sms=True,
            items=[
                Item(
                    quantity=2,
                    quantity_unit="pcs",
                    description="Book",
                    unit_weight=0.4,
                    unit_value=19.95,
                    hs_tariff_code="490199",
                    country_of_origin="FI",
                )
            ],
            cod=Cod(amount=49.9, currency_code="EUR", account="FI00", bank="NDEAFIHH", reference="123"),
            date_information=DateInformation(delivery_date="2026-10-21"),
            additional_services=AdditionalServices(call_advising=True),
            organization_id=7,
            wolt={"dropoff": "front door"},
            pending_shipment_id=None,
        )

        decoded = ShipmentRequest.from_dict(request.to_dict())

        assert decoded == request
        assert decoded.payer is None
        assert decoded.proforma is UNSET
        assert decoded.dimension_unit is UNSET

    def test_absent_fields_stay_unset(self, sender, receiver, parcel):
        request = ShipmentRequest(
            sender=sender,
            receiver=receiver,
            parcels=[parcel],
            service_id="posti.po2103",
        )

        decoded = ShipmentRequest.from_dict(request.to_dict())

        assert decoded.payer is UNSET
        assert decoded.to_dict() == request.to_dict()

    def test_registration_request_round_trip(self):
        request = RegistrationRequest(
            email="a@b.fi", password="hunter2", name="A", phone="+358", country="FI"
        )

        assert RegistrationRequest.from_dict(request.to_dict()) == request
        assert "hunter2" not in repr(request)


class TestDecoding:
    def test_missing_required_field_raises(self):
        with pytest.raises(DecodingError) as exc_info:
            ValidateShipmentResponse.from_dict({"status": 200})

        assert exc_info.value.model == "ValidateShipmentResponse"
        assert exc_info.value.key == "valid"

    def test_wrong_primitive_type_raises(self):
        with pytest.raises(DecodingError) as exc_info:
            ValidateShipmentResponse.from_dict({"status": "200", "valid": True})

        assert exc_info.value.key == "status"

    def test_bool_is_not_a_number(self):
        with pytest.raises(DecodingError):
            ValidateShipmentResponse.from_dict({"status": True, "valid": True})

    def test_number_is_not_a_bool(self):
        with pytest.raises(DecodingError):
            ValidateShipmentResponse.from_dict({"status": 200, "valid": 1})

    def test_required_null_raises(self):
        with pytest.raises(DecodingError):
            ValidateShipmentResponse.from_dict({"status": 200, "valid": None})

    def test_non_object_raises(self):
        with pytest.raises(DecodingError):
            ValidateShipmentResponse.from_dict([1, 2, 3])

    def test_numbers_are_normalized(self):
        method = ShippingMethodResponse.from_dict(
            {"serviceId": "posti.po2103", "carrier": "Posti", "price": 5, "priceVat0": 4.03}
        )

        assert method.price == 5.0
        assert isinstance(method.price, float)
        assert isinstance(method.price_vat0, float)

    def test_integral_float_is_accepted_for_int(self):
        result = ValidateShipmentResponse.from_dict({"status": 200.0, "valid": True})

        assert result.status == 200
        assert isinstance(result.status, int)

    def test_fractional_float_is_rejected_for_int(self):
        with pytest.raises(DecodingError):
            ValidateShipmentResponse.from_dict({"status": 200.5, "valid": True})

    def test_explicit_wire_key_is_decoded(self):
        method = ShippingMethodResponse.from_dict(
            {"serviceId": "dhl.express", "carrier": "DHL", "requiresHSTariffCode": True}
        )

        assert method.requires_hs_tariff_code is True

    def test_validation_failure_is_data(self):
        result = ValidateShipmentResponse.from_dict(
            {"status": 200, "valid": False, "errors": [{"field": "receiver.postcode", "message": "invalid"}]}
        )

        assert result.valid is False
        assert len(result.errors) == 1
        assert result.errors[0]["field"] == "receiver.postcode"
        assert result.warnings is UNSET

    def test_validation_errors_may_be_keyed(self):
        result = ValidateShipmentResponse.from_dict(
            {"status": 200, "valid": False, "errors": {"receiver.postcode": "invalid"}, "warnings": []}
        )

        assert result.errors == {"receiver.postcode": "invalid"}
        assert result.warnings == []

    def test_collection_order_is_preserved(self):
        def agent(agent_id):
            return {
                "id": agent_id,
                "name": f"Point {agent_id}",
                "address1": "Street 1",
                "city": "Helsinki",
                "zipcode": "00100",
                "countryCode": "FI",
            }

        response = AgentsResponse.from_dict(
            {"status": 200, "locations": [agent("c"), agent("a"), agent("b")]}
        )

        assert [a.id for a in response.locations] == ["c", "a", "b"]

    def test_nested_error_names_the_element(self):
        with pytest.raises(DecodingError) as exc_info:
            AgentsResponse.from_dict({"status": 200, "locations": [{"id": "x"}]})

        assert exc_info.value.model == "AgentResponse"

    def test_null_on_optional_non_nullable_is_absent(self):
        agent = AgentResponse.from_dict(
            {
                "id": "1",
                "name": "Kiosk",
                "address1": "Street 1",
                "city": "Espoo",
                "zipcode": "02100",
                "countryCode": "FI",
                "carrierLogo": None,
                "openingHours": None,
            }
        )

        assert agent.carrier_logo is UNSET
        assert agent.opening_hours is None

    def test_string_or_int_identifiers(self):
        numeric = LocationResponse.from_dict(
            {"id": 12, "name": "HQ", "address": "Katu 1", "city": "Oulu",
             "postcode": "90100", "country": "FI", "is_default": True}
        )
        textual = LocationResponse.from_dict(
            {"id": "loc-1", "name": "HQ", "address": "Katu 1", "city": "Oulu",
             "postcode": "90100", "country": "FI"}
        )

        assert numeric.id == 12
        assert numeric.is_default is True
        assert textual.id == "loc-1"
        assert textual.is_default is UNSET

    def test_nested_model_is_decoded(self):
        response = RegistrationResponse.from_dict(
            {"status": 200, "user": {"id": "u1", "name": "A", "email": "a@b.fi"}, "token": "t"}
        )

        assert response.user.email == "a@b.fi"
        assert response.message is UNSET

    def test_invariant_violation_becomes_decoding_error(self):
        with pytest.raises(DecodingError):
            Parcel.from_dict({"length": 10, "width": 10, "height": 10, "weight": -1})


class TestOpaqueModels:
    def test_data_envelope_is_unwrapped(self):
        assert BalanceResponse.from_dict({"data": [{"id": 1}]}).data == [{"id": 1}]

    def test_bare_body_is_kept(self):
        assert BalanceResponse.from_dict([1, 2]).data == [1, 2]
        assert BalanceResponse.from_dict({"total": 3}).data == {"total": 3}

    def test_encode(self):
        assert BalanceResponse(data={"total": 3}).to_dict() == {"data": {"total": 3}}


class TestInvariants:
    def test_country_must_be_two_letters(self):
        with pytest.raises(ValueError):
            Party(
                name="X", email="x@y.z", phone="1", address="a",
                city="c", postcode="p", country="FIN",
            )

    @pytest.mark.parametrize("bad", [0, -1.5, math.inf, math.nan])
    def test_parcel_dimensions_must_be_positive_finite(self, bad):
        with pytest.raises(ValueError):
            Parcel(length=10, width=10, height=bad, weight=1)

    def test_parcels_must_not_be_empty(self, sender, receiver):
        with pytest.raises(ValueError):
            ShipmentRequest(sender=sender, receiver=receiver, parcels=[], service_id="posti.po2103")

    def test_models_are_immutable(self, parcel):
        with pytest.raises(AttributeError):
            parcel.weight = 2
