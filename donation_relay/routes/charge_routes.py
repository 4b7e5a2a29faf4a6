from flask import Blueprint, Response, jsonify, request

from donation_relay.extensions import get_config
from donation_relay.models.charge import DonationRequest
from donation_relay.services.charge_service import handle_charge

charges_bp = Blueprint("charges", __name__)


def _submitted_fields():
    if request.form:
        return request.form
    data = request.get_json(force=True, silent=True)
    return data if isinstance(data, dict) else {}


@charges_bp.route("/charge", methods=["POST", "OPTIONS"])
def charge():
    config = get_config()

    if request.method == "OPTIONS":
        resp = Response(status=204)
        resp.headers["Access-Control-Allow-Methods"] = "POST, OPTIONS"
        resp.headers["Access-Control-Allow-Headers"] = "Content-Type"
    else:
        donation = DonationRequest.from_fields(_submitted_fields())
        status, body = handle_charge(donation, config)
        resp = jsonify(body) if body else Response()
        resp.status_code = status

    resp.headers["Access-Control-Allow-Origin"] = config.cors_origin
    return resp
