"""
Service-layer behaviour: payloads become model objects, agency outcomes
become (ok, message[, payload]) tuples.
"""

import pytest

from rental_agency.exceptions import CustomerNotFoundError, InvalidArgumentError, VehicleNotFoundError
from rental_agency.models.vehicle import Car, Motorcycle, Truck
from rental_agency.services.common import customer_from_dict, to_number, vehicle_from_dict
from rental_agency.services.customer_service import CustomerService
from rental_agency.services.rental_service import RentalService
from rental_agency.services.vehicle_service import VehicleService
from rental_agency.utils.constants import MSG_NOT_AVAILABLE, MSG_NOT_RENTED


def test_vehicle_from_dict_builds_each_category():
    car = vehicle_from_dict({"type": "Car", "vehicle_id": "C001", "model": "Camry",
                             "base_rate": "50", "seating_capacity": "5", "has_gps": "yes"})
    bike = vehicle_from_dict({"type": "motorcycle", "id": "M001", "model": "R15", "rate": 20})
    truck = vehicle_from_dict({"type": "truck", "vehicle_id": "T001", "model": "FH",
                               "base_rate": 100, "load_capacity": 10})
    assert isinstance(car, Car) and car.has_gps and car.seating_capacity == 5
    assert isinstance(bike, Motorcycle) and bike.has_carrier is False
    assert isinstance(truck, Truck) and truck.calculate_rental_cost(1) == 120


@pytest.mark.parametrize("payload", [
    None,
    {"type": "boat", "vehicle_id": "B1", "model": "Dinghy", "base_rate": 10},
    {"type": "car", "vehicle_id": "C1", "model": "Camry", "base_rate": 50, "seating_capacity": "two"},
    {"type": "truck", "vehicle_id": "T1", "model": "FH", "base_rate": 100},
])
def test_vehicle_from_dict_rejects_bad_payloads(payload):
    with pytest.raises(InvalidArgumentError):
        vehicle_from_dict(payload)


def test_to_number_keeps_integral_strings_int():
    assert to_number("5") == 5 and isinstance(to_number("5"), int)
    assert to_number("2.5") == 2.5
    assert to_number("x") is None
    assert to_number(True) is None


def test_admin_create_vehicle_and_duplicate(agency):
    payload = {"type": "car", "vehicle_id": "C001", "model": "Camry", "base_rate": 50, "seating_capacity": 5}
    ok, msg = VehicleService.admin_create_vehicle(payload)
    assert ok, msg
    assert agency.get_vehicle("C001") is not None

    ok, msg = VehicleService.admin_create_vehicle(payload)
    assert not ok
    assert "already exists" in msg


def test_list_vehicles_filters(agency, fleet, john):
    agency.rent_vehicle("C001", john, 1)
    assert [v["vehicle_id"] for v in VehicleService.list_vehicles()] == ["C001", "M001", "T001"]
    assert [v["vehicle_id"] for v in VehicleService.list_vehicles(vtype=" TRUCK ")] == ["T001"]
    assert [v["vehicle_id"] for v in VehicleService.list_vehicles(available_only=True)] == ["M001", "T001"]


def test_get_vehicle_unknown_raises(agency):
    with pytest.raises(VehicleNotFoundError):
        VehicleService.get_vehicle("NOPE")


def test_customer_register_and_lookup(agency):
    ok, msg = CustomerService.register({"customer_id": "CU001", "name": "John Doe"})
    assert ok, msg
    assert CustomerService.get_customer("CU001").name == "John Doe"
    assert [c.customer_id for c in agency.customers()] == ["CU001"]

    ok, msg = CustomerService.register({"customer_id": "CU001", "name": "Someone Else"})
    assert not ok
    ok, msg = CustomerService.register({"customer_id": "CU002"})
    assert not ok

    with pytest.raises(CustomerNotFoundError):
        CustomerService.get_customer("CU404")


def test_rent_success_returns_transaction(fleet, john):
    ok, msg, txn = RentalService.rent("C001", "CU001", 3)
    assert ok, msg
    assert txn.cost == 180
    assert txn.customer is john


def test_rent_accepts_days_as_string(fleet, john):
    ok, msg, txn = RentalService.rent("T001", "CU001", "2")
    assert ok, msg
    assert txn.days == 2


def test_rent_failures(fleet, john):
    assert RentalService.rent("C001", "CU404", 3) == (False, "Unknown customer", None)
    assert RentalService.rent("C001", "CU001", "three")[0] is False
    assert RentalService.rent("C001", "CU001", 2.5)[0] is False

    ok, msg, txn = RentalService.rent("C001", "CU001", 0)
    assert not ok and txn is None
    assert "days" in msg

    assert RentalService.rent("NOPE", "CU001", 3) == (False, "Vehicle not available", None)


def test_rent_twice_then_return(fleet, john, jane):
    assert RentalService.rent("M001", "CU001", 5)[0]
    assert RentalService.rent("M001", "CU002", 5) == (False, "Vehicle not available", None)
    assert RentalService.return_vehicle("M001") == (True, "Vehicle returned")
    assert RentalService.return_vehicle("M001") == (False, "Vehicle is not currently rented")


def test_transactions_and_summary(fleet, john, jane):
    RentalService.rent("C001", "CU001", 3)
    RentalService.rent("M001", "CU002", 5)
    assert [t.vehicle.vehicle_id for t in RentalService.transactions()] == ["C001", "M001"]
    assert [t.vehicle.vehicle_id for t in RentalService.transactions(customer_id="CU002")] == ["M001"]
    assert RentalService.summary() == {"count": 2, "revenue": 255.0}


@pytest.mark.parametrize("payload", [[1], ["car"], "car", 42])
def test_mappers_reject_non_object_payloads(payload):
    with pytest.raises(InvalidArgumentError):
        vehicle_from_dict(payload)
    with pytest.raises(InvalidArgumentError):
        customer_from_dict(payload)


def test_infinite_rate_string_rejected(agency):
    ok, msg = VehicleService.admin_create_vehicle(
        {"type": "motorcycle", "vehicle_id": "M009", "model": "R15", "base_rate": "inf"})
    assert not ok
    assert agency.get_vehicle("M009") is None


def test_unavailable_reason_is_shared_constant(fleet, john):
    RentalService.rent("C001", "CU001", 1)
    assert RentalService.rent("C001", "CU001", 1)[1] == MSG_NOT_AVAILABLE
    RentalService.return_vehicle("C001")
    assert RentalService.return_vehicle("C001")[1] == MSG_NOT_RENTED
