import sys, os, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
os.environ.setdefault("APP_ENV", "test")

import pytest

from rental_agency.models.agency import RentalAgency
from rental_agency.models.customer import Customer
from rental_agency.models.vehicle import Car, Motorcycle, Truck


@pytest.fixture(autouse=True)
def unified_agency(monkeypatch):
    """
    Provide a single fresh agency per test and patch _agency() in common and in
    each service module to return the SAME object (the services import the
    accessor by name, so each alias needs patching).
    """
    from rental_agency.services import common as common_mod
    from rental_agency.services import customer_service as cs
    from rental_agency.services import rental_service as rs
    from rental_agency.services import vehicle_service as vs

    agency = RentalAgency()
    for mod in (common_mod, cs, rs, vs):
        monkeypatch.setattr(mod, "_agency", lambda: agency, raising=True)

    yield agency
    RentalAgency.reset_instance()


@pytest.fixture
def agency(unified_agency):
    return unified_agency


@pytest.fixture
def fleet(agency):
    """Demo fleet: C001 (50, GPS, 5 seats), M001 (20, no carrier), T001 (100, 10 t)."""
    car = Car("C001", "Toyota Camry", 50, seating_capacity=5, has_gps=True)
    bike = Motorcycle("M001", "Yamaha R15", 20, has_carrier=False)
    truck = Truck("T001", "Volvo FH", 100, load_capacity=10)
    for v in (car, bike, truck):
        agency.add_vehicle(v)
    return car, bike, truck


@pytest.fixture
def john(agency):
    c = Customer("CU001", "John Doe")
    agency.add_customer(c)
    return c


@pytest.fixture
def jane(agency):
    c = Customer("CU002", "Jane Smith")
    agency.add_customer(c)
    return c


@pytest.fixture
def client():
    from rental_agency import create_app
    app = create_app({"TESTING": True, "SECRET_KEY": "test"})
    with app.test_client() as c:
        yield c
