import os
import threading
from typing import Optional

from rental_agency.exceptions import (
    DuplicateCustomerError,
    DuplicateVehicleError,
    InvalidArgumentError,
)
from .customer import Customer
from .transaction import RentalTransaction
from .vehicle import Vehicle


class RentalAgency:
    """
    Owns the vehicle catalog, the customer registry and the transaction log.

    The agency is the only component that flips a vehicle between Available
    and Rented. Catalog and registry keep insertion order; the log is
    append-only. All mutations run under one re-entrant lock, so the
    find-and-flip in rent/return is atomic across threads.
    """

    _inst = None
    _inst_lock = threading.Lock()

    def __init__(self):
        self._vehicles: list[Vehicle] = []
        self._customers: dict[str, Customer] = {}
        self._transactions: list[RentalTransaction] = []
        self._rw = threading.RLock()

    # ---------- Singleton ----------
    @classmethod
    def instance(cls) -> "RentalAgency":
        """Return the process-wide agency used by the web app."""
        with cls._inst_lock:
            if cls._inst is None:
                cls._inst = RentalAgency()
                if os.getenv("APP_ENV") != "test":
                    print("[Agency] Created in-memory agency")
        return cls._inst

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide agency; the next instance() call builds a fresh one."""
        with cls._inst_lock:
            cls._inst = None

    # ---------- Vehicles ----------
    def add_vehicle(self, vehicle: Vehicle) -> None:
        """Append a vehicle to the catalog; duplicate IDs are rejected."""
        if not isinstance(vehicle, Vehicle):
            raise InvalidArgumentError("Invalid vehicle: expected a Car, Motorcycle or Truck")
        with self._rw:
            if any(v.vehicle_id == vehicle.vehicle_id for v in self._vehicles):
                print(f"[Agency] Rejected duplicate vehicle id {vehicle.vehicle_id!r}")
                raise DuplicateVehicleError(f"Vehicle {vehicle.vehicle_id} already exists")
            self._vehicles.append(vehicle)

    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        with self._rw:
            for v in self._vehicles:
                if v.vehicle_id == vehicle_id:
                    return v
        return None

    def vehicles(self, available_only: bool = False) -> list[Vehicle]:
        """Catalog snapshot in insertion order."""
        with self._rw:
            if available_only:
                return [v for v in self._vehicles if v.available]
            return list(self._vehicles)

    # ---------- Customers ----------
    def add_customer(self, customer: Customer) -> None:
        if not isinstance(customer, Customer):
            raise InvalidArgumentError("Invalid customer")
        with self._rw:
            if customer.customer_id in self._customers:
                print(f"[Agency] Rejected duplicate customer id {customer.customer_id!r}")
                raise DuplicateCustomerError(f"Customer {customer.customer_id} already exists")
            self._customers[customer.customer_id] = customer

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        with self._rw:
            return self._customers.get(customer_id)

    def customers(self) -> list[Customer]:
        with self._rw:
            return list(self._customers.values())

    # ---------- Rent / return ----------
    def rent_vehicle(self, vehicle_id: str, customer: Customer, days: int) -> bool:
        """
        Rent the first Available vehicle whose ID matches.

        Returns False when there is no such vehicle (unknown ID or already
        rented). Raises InvalidArgumentError for a bad customer or day count;
        in that case the vehicle stays Available.
        """
        return self.rent(vehicle_id, customer, days) is not None

    def rent(self, vehicle_id: str, customer: Customer, days: int) -> Optional[RentalTransaction]:
        """Same as rent_vehicle, but hands back the recorded transaction (or None)."""
        with self._rw:
            for vehicle in self._vehicles:
                if vehicle.vehicle_id == vehicle_id and vehicle.available:
                    # Build first: a rejected transaction must not leave the vehicle rented.
                    txn = RentalTransaction(vehicle, customer, days)
                    vehicle._mark_rented()
                    self._transactions.append(txn)
                    return txn
            return None

    def return_vehicle(self, vehicle_id: str) -> bool:
        """Return the first Rented vehicle whose ID matches; False if none."""
        with self._rw:
            for vehicle in self._vehicles:
                if vehicle.vehicle_id == vehicle_id and not vehicle.available:
                    vehicle._mark_available()
                    return True
            return False

    # ---------- Transactions ----------
    def get_transactions(self) -> tuple[RentalTransaction, ...]:
        """Chronological log as an immutable snapshot."""
        with self._rw:
            return tuple(self._transactions)

    def transactions_for(self, vehicle_id: Optional[str] = None,
                         customer_id: Optional[str] = None) -> list[RentalTransaction]:
        """Log entries filtered by vehicle and/or customer ID, in chronological order."""
        res = self.get_transactions()
        if vehicle_id is not None:
            res = [t for t in res if t.vehicle.vehicle_id == vehicle_id]
        if customer_id is not None:
            res = [t for t in res if t.customer.customer_id == customer_id]
        return list(res)

    def total_revenue(self) -> float:
        return sum((t.cost for t in self.get_transactions()), 0.0)
