from dataclasses import dataclass

from rental_agency.utils.validators import require_text


@dataclass(frozen=True)
class Customer:
    """
    Customer record: an ID and a display name, both required.
    Frozen after construction; pricing does not depend on the customer.
    """
    customer_id: str
    name: str

    def __post_init__(self):
        require_text(self.customer_id, "Invalid customer details: customer_id is required")
        require_text(self.name, "Invalid customer details: name is required")

    def to_dict(self) -> dict:
        return {"customer_id": self.customer_id, "name": self.name}

    def __str__(self) -> str:
        return f"Customer ID: {self.customer_id}, Name: {self.name}"
