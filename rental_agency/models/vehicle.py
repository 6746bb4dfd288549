from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from rental_agency.utils.constants import (
    GPS_DAILY_SURCHARGE,
    LOAD_DAILY_FACTOR,
    NO_CARRIER_DAILY_DISCOUNT,
    VehicleStatus,
)
from rental_agency.utils.validators import (
    require_positive_int,
    require_positive_number,
    require_text,
    yes_no,
)


@dataclass(eq=False)
class Vehicle(ABC):
    """
    Base vehicle model. `base_rate` is the listed price per rental day.
    Subclasses supply the category-specific cost formula and extra fields.

    Identity is the vehicle ID alone: two vehicles with the same ID are equal
    whatever their category. Availability starts True and is flipped only by
    RentalAgency through `_mark_rented` / `_mark_available`.
    """
    vehicle_id: str
    model: str
    base_rate: float

    category: ClassVar[str] = "Vehicle"
    type_tag: ClassVar[str] = ""

    def __post_init__(self):
        require_text(self.vehicle_id, "Invalid vehicle details: vehicle_id must be a non-empty string")
        self.base_rate = require_positive_number(
            self.base_rate, "Invalid vehicle details: base_rate must be positive")
        self._check_fields()
        self._available = True
        self._sealed = True

    def _check_fields(self) -> None:
        """Category-specific validation; runs before the fields are sealed."""

    def __setattr__(self, name, value):
        # Dataclass fields are fixed once construction finishes.
        if name in self.__dataclass_fields__ and self.__dict__.get("_sealed"):
            raise AttributeError(f"{name} is immutable")
        super().__setattr__(name, value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vehicle):
            return NotImplemented
        return self.vehicle_id == other.vehicle_id

    def __hash__(self) -> int:
        return hash(self.vehicle_id)

    # ---------- Availability ----------
    @property
    def available(self) -> bool:
        return self._available

    @property
    def status(self) -> str:
        return VehicleStatus.AVAILABLE if self._available else VehicleStatus.RENTED

    def _mark_rented(self) -> None:
        self._available = False

    def _mark_available(self) -> None:
        self._available = True

    # ---------- Pricing ----------
    def calculate_rental_cost(self, days: int) -> float:
        """Cost of renting this vehicle for `days` (a positive integer)."""
        require_positive_int(days, "Invalid rental length: days must be a positive integer")
        return self._cost_for_days(days)

    @abstractmethod
    def _cost_for_days(self, days: int) -> float:
        ...

    # ---------- Rendering ----------
    def _extra_fields(self) -> str:
        return ""

    def to_dict(self) -> dict:
        return {
            "vehicle_id": self.vehicle_id,
            "type": self.type_tag,
            "model": self.model,
            "base_rate": self.base_rate,
            "available": self._available,
            "status": self.status,
        }

    def __str__(self) -> str:
        text = f"{self.category} ID: {self.vehicle_id}, Model: {self.model}, Base Rate: {self.base_rate}"
        extra = self._extra_fields()
        return f"{text}, {extra}" if extra else text


@dataclass(eq=False)
class Car(Vehicle):
    """Cars pay a flat daily surcharge when fitted with GPS."""
    seating_capacity: int
    has_gps: bool = False

    category: ClassVar[str] = "Car"
    type_tag: ClassVar[str] = "car"

    def _check_fields(self) -> None:
        require_positive_int(self.seating_capacity, "Invalid seating capacity")

    def _cost_for_days(self, days: int) -> float:
        cost = self.base_rate * days
        if self.has_gps:
            cost += GPS_DAILY_SURCHARGE * days
        return cost

    def _extra_fields(self) -> str:
        return f"Seating Capacity: {self.seating_capacity}, GPS: {yes_no(self.has_gps)}"

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update(seating_capacity=self.seating_capacity, has_gps=self.has_gps)
        return d


@dataclass(eq=False)
class Motorcycle(Vehicle):
    """
    Motorcycles without a carrier get a flat daily discount.
    The result is not clamped, so a small base rate over many days can go negative.
    """
    has_carrier: bool = False

    category: ClassVar[str] = "Motorcycle"
    type_tag: ClassVar[str] = "motorcycle"

    def _cost_for_days(self, days: int) -> float:
        cost = self.base_rate * days
        if not self.has_carrier:
            cost -= NO_CARRIER_DAILY_DISCOUNT * days
        return cost

    def _extra_fields(self) -> str:
        return f"Carrier: {yes_no(self.has_carrier)}"

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["has_carrier"] = self.has_carrier
        return d


@dataclass(eq=False)
class Truck(Vehicle):
    """Trucks add a daily charge proportional to load capacity (tons)."""
    load_capacity: float

    category: ClassVar[str] = "Truck"
    type_tag: ClassVar[str] = "truck"

    def _check_fields(self) -> None:
        self.load_capacity = require_positive_number(self.load_capacity, "Invalid load capacity")

    def _cost_for_days(self, days: int) -> float:
        return self.base_rate * days + self.load_capacity * LOAD_DAILY_FACTOR * days

    def _extra_fields(self) -> str:
        return f"Load Capacity: {self.load_capacity} tons"

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["load_capacity"] = self.load_capacity
        return d


# Closed set of vehicle categories, keyed by type tag.
VEHICLE_TYPES = {cls.type_tag: cls for cls in (Car, Motorcycle, Truck)}
