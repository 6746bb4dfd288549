from dataclasses import dataclass, field

from rental_agency.exceptions import InvalidArgumentError
from rental_agency.utils.validators import require_positive_int
from .customer import Customer
from .vehicle import Vehicle


@dataclass(frozen=True, eq=False)
class RentalTransaction:
    """
    Snapshot of one completed rental.

    The cost is computed once, here, from the vehicle's pricing rule and is
    never recomputed on access. Equality is identity: two rentals with the
    same fields are still two separate log entries.
    """
    vehicle: Vehicle
    customer: Customer
    days: int
    cost: float = field(init=False)

    def __post_init__(self):
        if not isinstance(self.vehicle, Vehicle):
            raise InvalidArgumentError("Invalid transaction details: vehicle is required")
        if not isinstance(self.customer, Customer):
            raise InvalidArgumentError("Invalid transaction details: customer is required")
        require_positive_int(self.days, "Invalid transaction details: days must be a positive integer")
        object.__setattr__(self, "cost", self.vehicle.calculate_rental_cost(self.days))

    def to_dict(self) -> dict:
        return {
            "vehicle": {k: v for k, v in self.vehicle.to_dict().items() if k not in ("available", "status")},
            "customer": self.customer.to_dict(),
            "days": self.days,
            "cost": self.cost,
        }

    def __str__(self) -> str:
        return (f"Transaction: [Vehicle: {self.vehicle}, Customer: {self.customer}, "
                f"Days: {self.days}, Cost: {self.cost}]")
