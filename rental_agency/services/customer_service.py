from typing import Tuple

from rental_agency.exceptions import CustomerNotFoundError, InvalidArgumentError
from rental_agency.models.customer import Customer
from rental_agency.services.common import _agency, customer_from_dict


class CustomerService:
    """Customer registry: register and look up."""

    @staticmethod
    def register(payload: dict) -> Tuple[bool, str]:
        try:
            customer = customer_from_dict(payload)
            _agency().add_customer(customer)
        except InvalidArgumentError as e:
            return False, e.message
        return True, f"Customer {customer.customer_id} registered"

    @staticmethod
    def get_customer(customer_id: str) -> Customer:
        c = _agency().get_customer(customer_id)
        if c is None:
            raise CustomerNotFoundError(f"Customer {customer_id} not found")
        return c
