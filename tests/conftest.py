"""
Shared fixtures: a validated Config, the real StripeGateway built from it,
and a Flask test client. Stripe itself is never contacted; tests patch
`stripe.checkout.Session.create`.
"""
from unittest.mock import MagicMock, patch

import pytest

from checkout_service import create_app
from checkout_service.config import Config
from checkout_service.gateway import StripeGateway


@pytest.fixture
def config():
    return Config(
        secret_key="sk_test_dummy",
        client_url="https://donate.example.org",
        port=5000,
    )


@pytest.fixture
def gateway(config):
    return StripeGateway.from_config(config)


@pytest.fixture
def app(config, gateway):
    app = create_app(config, gateway)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def mock_session_create():
    session = MagicMock()
    session.id = "cs_test_123"
    with patch("stripe.checkout.Session.create", return_value=session) as mock_create:
        yield mock_create
