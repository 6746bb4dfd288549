from __future__ import annotations

from typing import List, Tuple

from rental_agency.exceptions import InvalidArgumentError, VehicleNotFoundError
from rental_agency.models.vehicle import Vehicle
from rental_agency.services.common import _agency, norm_type, vehicle_from_dict


class VehicleService:
    """Vehicle catalogue: filter, look up, create."""

    @staticmethod
    def list_vehicles(vtype=None, available_only: bool = False) -> List[dict]:
        """
        Vehicles in catalog order, as dicts.
        - `vtype` filters by type tag (case-insensitive); empty means all.
        - `available_only` hides rented vehicles.
        """
        res = _agency().vehicles(available_only=available_only)
        if vtype:
            vt = norm_type(vtype)
            res = [v for v in res if v.type_tag == vt]
        return [v.to_dict() for v in res]

    @staticmethod
    def get_vehicle(vehicle_id: str) -> Vehicle:
        v = _agency().get_vehicle(vehicle_id)
        if v is None:
            raise VehicleNotFoundError(f"Vehicle {vehicle_id} not found")
        return v

    @staticmethod
    def admin_create_vehicle(payload: dict) -> Tuple[bool, str]:
        """Build a vehicle from `payload` and add it to the catalog."""
        try:
            vehicle = vehicle_from_dict(payload)
            _agency().add_vehicle(vehicle)
        except InvalidArgumentError as e:
            return False, e.message
        return True, f"Vehicle {vehicle.vehicle_id} created"
