import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from checkout_service.config import Config
from checkout_service.utils.log import configure_logging, log_startup_config


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_configure_logging_emits_json(restore_root_logger, capsys):
    configure_logging("DEBUG")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert root.level == logging.DEBUG

    log_startup_config(Config(secret_key="sk_live_supersecret", port=6060))

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "startup_config"
    assert record["levelname"] == "INFO"
    assert record["config"]["PORT"] == 6060
    assert record["config"]["STRIPE_SECRET_KEY"] == "loaded"
    assert "sk_live_supersecret" not in line
