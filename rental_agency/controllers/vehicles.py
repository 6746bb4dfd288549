from flask import Blueprint, jsonify, request

from ..exceptions import VehicleNotFoundError
from ..services.common import to_bool
from ..services.vehicle_service import VehicleService

bp = Blueprint("vehicles", __name__, url_prefix="/vehicles")


@bp.errorhandler(VehicleNotFoundError)
def vehicle_not_found(e):
    return jsonify(error=e.message), 404


@bp.get("")
def list_vehicles():
    """Vehicles list with optional ?type= and ?available= filters."""
    q = {k: (v or "").strip() for k, v in request.args.items()}
    vehicles = VehicleService.list_vehicles(
        vtype=q.get("type"),
        available_only=to_bool(q.get("available", "")),
    )
    return jsonify(vehicles=vehicles)


@bp.get("/<vid>")
def vehicle_detail(vid):
    v = VehicleService.get_vehicle(vid)
    return jsonify(vehicle=v.to_dict(), description=str(v))


@bp.post("")
def add_vehicle():
    """Add a vehicle from a JSON body: type, vehicle_id, model, base_rate plus category fields."""
    data = request.get_json(silent=True) or {}
    ok, msg = VehicleService.admin_create_vehicle(data)
    if not ok:
        return jsonify(error=msg), 400
    vehicle = VehicleService.get_vehicle(str(data.get("vehicle_id") or data.get("id")).strip())
    return jsonify(message=msg, vehicle=vehicle.to_dict()), 201
