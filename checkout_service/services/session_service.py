import logging
from typing import Any, Dict

from checkout_service.gateway import CURRENCY, StripeGateway
from checkout_service.utils.amounts import amount_to_minor_units

logger = logging.getLogger(__name__)


def start_checkout(*, gateway: StripeGateway, amount) -> Dict[str, Any]:
    """
    Validate `amount`, convert to kobo and open a Stripe Checkout session.

    Raises InvalidAmount before any network call, GatewayError if Stripe fails.
    """
    amount_minor = amount_to_minor_units(amount)
    logger.info("Received donation amount: %s %s", CURRENCY.upper(), amount)

    session_id = gateway.create_checkout_session(amount_minor)
    logger.info("Stripe Checkout Session Created: %s", session_id)
    return {"id": session_id}
