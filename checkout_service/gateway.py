from typing import Any, Dict

import stripe

from checkout_service.config import Config
from checkout_service.errors import GatewayError

CURRENCY = "ngn"
PRODUCT_NAME = "Donation"
PRODUCT_DESCRIPTION = "Support our mission"


class StripeGateway:
    """
    Thin wrapper over Stripe Checkout. One instance per process, built from
    Config at startup; the key travels with each request instead of being
    set on the global `stripe.api_key`.
    """

    def __init__(self, *, secret_key: str, api_version: str, success_url: str, cancel_url: str):
        self._secret_key = secret_key
        self.api_version = api_version
        self.success_url = success_url
        self.cancel_url = cancel_url

    @classmethod
    def from_config(cls, config: Config) -> "StripeGateway":
        return cls(
            secret_key=config.secret_key,
            api_version=config.api_version,
            success_url=config.success_url,
            cancel_url=config.cancel_url,
        )

    def session_params(self, amount_minor: int) -> Dict[str, Any]:
        return {
            "payment_method_types": ["card"],
            "line_items": [
                {
                    "price_data": {
                        "currency": CURRENCY,
                        "product_data": {
                            "name": PRODUCT_NAME,
                            "description": PRODUCT_DESCRIPTION,
                        },
                        "unit_amount": amount_minor,
                    },
                    "quantity": 1,
                }
            ],
            "mode": "payment",
            "success_url": self.success_url,
            "cancel_url": self.cancel_url,
        }

    def create_checkout_session(self, amount_minor: int) -> str:
        """Create a one-time payment session and return its id. Raises GatewayError."""
        try:
            session = stripe.checkout.Session.create(
                api_key=self._secret_key,
                stripe_version=self.api_version,
                **self.session_params(amount_minor),
            )
        except stripe.StripeError as e:
            raise GatewayError(e.user_message or str(e)) from e
        except Exception as e:
            raise GatewayError(str(e) or type(e).__name__) from e

        session_id = getattr(session, "id", None)
        if not session_id:
            raise GatewayError("Stripe returned a checkout session without an id")
        return session_id
