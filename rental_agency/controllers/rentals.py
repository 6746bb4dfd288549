from flask import Blueprint, jsonify, request

from ..services.rental_service import RentalService
from ..utils.constants import MSG_NOT_AVAILABLE

bp = Blueprint("rentals", __name__)


@bp.post("/rentals")
def rent():
    """
    Rent a vehicle. JSON body: vehicle_id, customer_id, days.
    - 201 with the recorded transaction
    - 409 when no matching vehicle is available
    - 400 for unknown customers or bad day counts
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify(error="Expected a JSON object"), 400
    ok, msg, txn = RentalService.rent(
        vehicle_id=data.get("vehicle_id"),
        customer_id=data.get("customer_id"),
        days=data.get("days"),
    )
    if not ok:
        status = 409 if msg == MSG_NOT_AVAILABLE else 400
        return jsonify(error=msg), status
    return jsonify(message=msg, transaction=txn.to_dict(), receipt=str(txn)), 201


@bp.post("/rentals/<vid>/return")
def return_vehicle(vid):
    ok, msg = RentalService.return_vehicle(vid)
    if not ok:
        return jsonify(error=msg), 409
    return jsonify(message=msg)


@bp.get("/transactions")
def transactions():
    """Chronological ledger, optionally filtered by ?vehicle_id= and/or ?customer_id=."""
    txns = RentalService.transactions(
        vehicle_id=(request.args.get("vehicle_id") or "").strip(),
        customer_id=(request.args.get("customer_id") or "").strip(),
    )
    return jsonify(transactions=[t.to_dict() for t in txns])


@bp.get("/transactions/summary")
def transactions_summary():
    return jsonify(RentalService.summary())
