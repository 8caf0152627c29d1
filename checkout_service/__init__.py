# checkout_service/__init__.py
from flask import Flask
from flask_cors import CORS

from checkout_service.config import Config
from checkout_service.gateway import StripeGateway
from checkout_service.routes import core, checkout_bp
from checkout_service.utils.security_headers import init_security_headers


def create_app(config: Config, gateway: StripeGateway | None = None):
    """
    Build the Flask app around an already-validated Config.

    The Stripe gateway is built here from `config` unless one is passed in,
    and handed to views through `app.extensions["checkout_gateway"]`.
    """
    app = Flask(__name__)
    app.url_map.strict_slashes = False
    app.config["CHECKOUT_CONFIG"] = config
    app.extensions["checkout_gateway"] = gateway or StripeGateway.from_config(config)

    CORS(
        app,
        origins=config.allowed_origins,
        methods=["POST"],
        allow_headers=["Content-Type"],
    )
    init_security_headers(app)

    app.register_blueprint(core)
    app.register_blueprint(checkout_bp)

    app.logger.debug("URL map: %s", [str(rule) for rule in app.url_map.iter_rules()])
    return app
