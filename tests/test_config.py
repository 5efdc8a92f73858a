import pytest
from pydantic import ValidationError

from hello_app.cli import build_parser
from hello_app.config import Settings


def test_defaults_bind_localhost_8080(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_NAME", "HOST", "PORT", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)

    config = Settings(_env_file=None)  # type: ignore[call-arg]

    assert config.app_name == "hello-fastapi"
    assert config.host == "127.0.0.1"
    assert config.port == 8080
    assert config.log_format == "json"


def test_env_vars_override_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_NAME", "from-env")
    monkeypatch.setenv("PORT", "9000")

    config = Settings(_env_file=None)  # type: ignore[call-arg]

    assert config.app_name == "from-env"
    assert config.port == 9000


def test_unknown_log_format_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)  # type: ignore[call-arg]


def test_cli_overrides_host_and_port() -> None:
    args = build_parser().parse_args(["--host", "0.0.0.0", "--port", "9090"])
    assert args.host == "0.0.0.0"
    assert args.port == 9090
    assert args.reload is False
