"""Shared service helpers and factories."""

from typing import Optional

from rental_agency.exceptions import InvalidArgumentError
from rental_agency.models.agency import RentalAgency
from rental_agency.models.customer import Customer
from rental_agency.models.vehicle import VEHICLE_TYPES, Vehicle
from rental_agency.utils.constants import ALLOWED_TYPES


def _agency() -> RentalAgency:
    """Get the singleton agency instance (tests monkeypatch this)."""
    return RentalAgency.instance()


# -------- normalizers --------
def norm_type(value: Optional[str]) -> str:
    """Normalize vehicle type to lowercase string; return '' for None."""
    return (value or "").strip().lower()


def norm_text(value) -> str:
    """Strip strings; anything else becomes ''."""
    return value.strip() if isinstance(value, str) else ""


def to_bool(value) -> bool:
    """Read a JSON/form flag: true/false, 1/0, yes/no, on/off."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def to_number(value) -> Optional[float | int]:
    """
    Parse ints/floats from JSON or form strings; return None if invalid.
    Integral strings stay int so seating capacity and days validate cleanly.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        s = value.strip()
        try:
            return int(s)
        except ValueError:
            pass
        try:
            return float(s)
        except ValueError:
            return None
    return None


# -------- dict -> rich model mappers --------
def vehicle_from_dict(d: Optional[dict]) -> Vehicle:
    """
    Map a request payload to a Car, Motorcycle or Truck.
    Raises InvalidArgumentError for unknown types or out-of-contract fields.
    """
    if not isinstance(d, dict) or not d:
        raise InvalidArgumentError("Invalid vehicle details: expected a JSON object")
    vtype = norm_type(d.get("type"))
    if vtype not in ALLOWED_TYPES:
        raise InvalidArgumentError(f"Invalid vehicle type: {d.get('type')!r}")
    base = dict(
        vehicle_id=norm_text(d.get("vehicle_id") or d.get("id")),
        model=norm_text(d.get("model")),
        base_rate=to_number(d.get("base_rate", d.get("rate"))),
    )
    if vtype == "car":
        return VEHICLE_TYPES["car"](
            **base,
            seating_capacity=to_number(d.get("seating_capacity")),
            has_gps=to_bool(d.get("has_gps", False)),
        )
    if vtype == "motorcycle":
        return VEHICLE_TYPES["motorcycle"](**base, has_carrier=to_bool(d.get("has_carrier", False)))
    return VEHICLE_TYPES["truck"](**base, load_capacity=to_number(d.get("load_capacity")))


def customer_from_dict(d: Optional[dict]) -> Customer:
    """Map a request payload to a Customer."""
    if d is None:
        d = {}
    if not isinstance(d, dict):
        raise InvalidArgumentError("Invalid customer details: expected a JSON object")
    return Customer(
        customer_id=norm_text(d.get("customer_id") or d.get("id")),
        name=norm_text(d.get("name")),
    )
