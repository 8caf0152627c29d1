"""Startup wiring: config is validated before the server listens."""
from unittest.mock import patch

import pytest

import run


def test_missing_secret_key_exits_before_listening(tmp_path, monkeypatch):
    monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)
    monkeypatch.chdir(tmp_path)

    with patch.object(run, "configure_logging"), patch.object(run, "create_app") as mock_create_app:
        with pytest.raises(SystemExit) as exc:
            run.main()

    assert exc.value.code == 1
    mock_create_app.assert_not_called()


def test_starts_on_configured_port(tmp_path, monkeypatch):
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_abc")
    monkeypatch.setenv("PORT", "6060")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)

    with patch.object(run, "configure_logging"), patch.object(run, "create_app") as mock_create_app:
        run.main()

    config, gateway = mock_create_app.call_args.args
    assert config.port == 6060
    assert gateway.api_version == "2023-10-16"
    mock_create_app.return_value.run.assert_called_once_with(
        host="0.0.0.0", port=6060, debug=False, use_reloader=False
    )
