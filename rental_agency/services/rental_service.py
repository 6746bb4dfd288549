"""Rental-related service layer utilities."""

from typing import Optional

from rental_agency.exceptions import InvalidArgumentError
from rental_agency.models.transaction import RentalTransaction
from rental_agency.services.common import _agency, norm_text, to_number
from rental_agency.utils.constants import MSG_NOT_AVAILABLE, MSG_NOT_RENTED


class RentalService:
    """
    Rent, return and ledger queries.
    Pricing comes from the vehicle (Vehicle.calculate_rental_cost) and is
    frozen in the RentalTransaction the agency records.
    """

    @staticmethod
    def rent(vehicle_id: str, customer_id: str, days):
        """
        Rent `vehicle_id` to a registered customer for `days`.

        Returns:
            (ok: bool, message: str, transaction: Optional[RentalTransaction])
        """
        agency = _agency()
        vid = norm_text(vehicle_id)

        customer = agency.get_customer(norm_text(customer_id))
        if customer is None:
            return False, "Unknown customer", None

        n = to_number(days)
        if not isinstance(n, int):
            return False, "Days must be a whole number", None

        try:
            txn = agency.rent(vid, customer, n)
        except InvalidArgumentError as e:
            return False, e.message, None
        if txn is None:
            return False, MSG_NOT_AVAILABLE, None

        print(f"[RentalService] Rented {vid} to {customer.customer_id} for {n} day(s), cost {txn.cost}")
        return True, "OK", txn

    @staticmethod
    def return_vehicle(vehicle_id: str):
        """Close the open rental on `vehicle_id`. Returns (ok, message)."""
        vid = norm_text(vehicle_id)
        if not _agency().return_vehicle(vid):
            return False, MSG_NOT_RENTED
        print(f"[RentalService] Returned {vid}")
        return True, "Vehicle returned"

    @staticmethod
    def transactions(vehicle_id: Optional[str] = None,
                     customer_id: Optional[str] = None) -> list[RentalTransaction]:
        return _agency().transactions_for(vehicle_id=vehicle_id or None,
                                          customer_id=customer_id or None)

    @staticmethod
    def summary() -> dict:
        agency = _agency()
        return {
            "count": len(agency.get_transactions()),
            "revenue": round(agency.total_revenue(), 2),
        }
