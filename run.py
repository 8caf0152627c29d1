import logging
import sys

from checkout_service import create_app
from checkout_service.config import load_config
from checkout_service.errors import StartupConfigError
from checkout_service.gateway import StripeGateway
from checkout_service.utils.log import configure_logging, log_startup_config


def main():
    configure_logging()
    try:
        config = load_config()
    except StartupConfigError as e:
        logging.getLogger("checkout_service").critical("ERROR: %s", e)
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)
    log_startup_config(config)

    app = create_app(config, StripeGateway.from_config(config))
    app.logger.info("Server running on port %s", config.port)
    app.run(host="0.0.0.0", port=config.port, debug=False, use_reloader=False)


if __name__ == "__main__":
    main()

# Local run:
# STRIPE_SECRET_KEY=sk_test_... PORT=5000 poetry run python run.py
#
# .env (optional)
# STRIPE_SECRET_KEY=sk_test_...
# CLIENT_URL=https://r2a.netlify.app
