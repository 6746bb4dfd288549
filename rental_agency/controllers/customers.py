from flask import Blueprint, jsonify, request

from ..exceptions import CustomerNotFoundError
from ..services.customer_service import CustomerService

bp = Blueprint("customers", __name__, url_prefix="/customers")


@bp.errorhandler(CustomerNotFoundError)
def customer_not_found(e):
    return jsonify(error=e.message), 404


@bp.post("")
def register_customer():
    data = request.get_json(silent=True) or {}
    ok, msg = CustomerService.register(data)
    if not ok:
        return jsonify(error=msg), 400
    customer = CustomerService.get_customer(str(data.get("customer_id") or data.get("id")).strip())
    return jsonify(message=msg, customer=customer.to_dict()), 201


@bp.get("/<cid>")
def customer_detail(cid):
    c = CustomerService.get_customer(cid)
    return jsonify(customer=c.to_dict())
