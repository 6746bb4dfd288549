"""
demo.py
-------
Console walkthrough of the rental ledger.

Builds an agency with one car, one motorcycle and one truck, registers two
customers, rents and returns vehicles, then prints the transaction log.

Usage:
    $ python demo.py
"""

from rental_agency.models.agency import RentalAgency
from rental_agency.models.customer import Customer
from rental_agency.models.vehicle import Car, Motorcycle, Truck


def build_agency() -> RentalAgency:
    """Return a fresh agency stocked with the demo fleet and customers."""
    agency = RentalAgency()

    # ---- Demo vehicles ----
    agency.add_vehicle(Car("C001", "Toyota Camry", 50, seating_capacity=5, has_gps=True))
    agency.add_vehicle(Motorcycle("M001", "Yamaha R15", 20, has_carrier=True))
    agency.add_vehicle(Truck("T001", "Volvo FH", 100, load_capacity=10))

    # ---- Demo customers ----
    agency.add_customer(Customer("CU001", "John Doe"))
    agency.add_customer(Customer("CU002", "Jane Smith"))
    return agency


def main():
    agency = build_agency()
    john = agency.get_customer("CU001")
    jane = agency.get_customer("CU002")

    print(f"Renting Car: {agency.rent_vehicle('C001', john, 3)}")
    print(f"Renting Bike: {agency.rent_vehicle('M001', jane, 5)}")

    print(f"Returning Car: {agency.return_vehicle('C001')}")

    for transaction in agency.get_transactions():
        print(transaction)


if __name__ == "__main__":
    main()
