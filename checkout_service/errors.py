INVALID_AMOUNT_MESSAGE = "Invalid donation amount"
GATEWAY_ERROR_MESSAGE = "An error occurred while processing payment"


class StartupConfigError(RuntimeError):
    """Required configuration is missing or malformed; the server must not start."""


class InvalidAmount(ValueError):
    def __init__(self, amount=None):
        super().__init__(INVALID_AMOUNT_MESSAGE)
        self.amount = amount


class GatewayError(Exception):
    """
    Any failure talking to Stripe (network, auth, rejected params).

    `details` is the underlying library message, passed back to the caller
    for diagnostics.
    """

    def __init__(self, details: str):
        super().__init__(details)
        self.details = details
