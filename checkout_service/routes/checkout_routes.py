from flask import Blueprint, current_app, jsonify, request

from checkout_service.errors import (
    GATEWAY_ERROR_MESSAGE,
    INVALID_AMOUNT_MESSAGE,
    GatewayError,
    InvalidAmount,
)
from checkout_service.services.session_service import start_checkout

checkout_bp = Blueprint("checkout", __name__)


@checkout_bp.post("/create-checkout-session")
def create_checkout_session():
    body = request.get_json(force=True, silent=True)
    amount = body.get("amount") if isinstance(body, dict) else None

    try:
        resp = start_checkout(
            gateway=current_app.extensions["checkout_gateway"], amount=amount
        )
    except InvalidAmount:
        current_app.logger.warning("Invalid donation amount: %r", amount)
        return jsonify({"error": INVALID_AMOUNT_MESSAGE}), 400
    except GatewayError as e:
        current_app.logger.error("Stripe error: %s", e.details, exc_info=True)
        return jsonify({"error": GATEWAY_ERROR_MESSAGE, "details": e.details}), 500

    return jsonify(resp), 200
