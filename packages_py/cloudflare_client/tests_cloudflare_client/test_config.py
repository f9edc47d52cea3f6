"""
Tests for config and auth handlers.
"""
import pytest
from pydantic import ValidationError

from cloudflare_client.auth.auth_handler import BearerAuthHandler, _mask_value, create_auth_handler
from cloudflare_client.config import (
    DEFAULT_BASE_URL,
    ClientConfig,
    TimeoutConfig,
    normalize_timeout,
    resolve,
    resolve_config,
)

ENV_KEYS = ["CLOUDFLARE_API_TOKEN", "CLOUDFLARE_ACCOUNT_ID", "CLOUDFLARE_API_BASE_URL", "CLOUDFLARE_TIMEOUT"]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults():
    config = ClientConfig()
    assert config.base_url == DEFAULT_BASE_URL
    assert config.api_token is None
    assert config.account_id is None


def test_base_url_validation():
    assert ClientConfig(base_url="https://example.com/api/").base_url == "https://example.com/api"
    with pytest.raises(ValidationError) as exc:
        ClientConfig(base_url="ftp://example.com")
    assert "base_url must start with http:// or https://" in str(exc.value)


def test_token_is_secret():
    config = ClientConfig(api_token="super-secret")
    assert "super-secret" not in repr(config)
    assert resolve_config(config).api_token == "super-secret"


def test_resolve_precedence(clean_env):
    clean_env.setenv("CLOUDFLARE_ACCOUNT_ID", "from-env")
    assert resolve("from-arg", "CLOUDFLARE_ACCOUNT_ID", {"account_id": "from-dict"}, "account_id", "d") == "from-arg"
    assert resolve(None, "CLOUDFLARE_ACCOUNT_ID", {"account_id": "from-dict"}, "account_id", "d") == "from-env"
    clean_env.setenv("CLOUDFLARE_ACCOUNT_ID", "")
    assert resolve(None, "CLOUDFLARE_ACCOUNT_ID", {"account_id": "from-dict"}, "account_id", "d") == "from-dict"
    assert resolve(None, "CLOUDFLARE_ACCOUNT_ID", None, "account_id", "d") == "d"


def test_from_env(clean_env):
    clean_env.setenv("CLOUDFLARE_API_TOKEN", "env-token")
    clean_env.setenv("CLOUDFLARE_ACCOUNT_ID", "env-account")
    clean_env.setenv("CLOUDFLARE_TIMEOUT", "12.5")

    config = ClientConfig.from_env()
    assert config.api_token.get_secret_value() == "env-token"
    assert config.account_id == "env-account"
    assert config.timeout == 12.5
    assert config.base_url == DEFAULT_BASE_URL


def test_from_env_arguments_win(clean_env):
    clean_env.setenv("CLOUDFLARE_API_TOKEN", "env-token")
    config = ClientConfig.from_env(
        api_token="arg-token",
        config={"base_url": "https://proxy.example.com/v4/", "account_id": "dict-account"},
        headers={"X-Trace": "1"},
    )
    assert config.api_token.get_secret_value() == "arg-token"
    assert config.base_url == "https://proxy.example.com/v4"
    assert config.account_id == "dict-account"
    assert config.headers == {"X-Trace": "1"}


def test_normalize_timeout():
    assert normalize_timeout(None) == TimeoutConfig()
    normalized = normalize_timeout(7)
    assert (normalized.connect, normalized.read, normalized.write) == (7.0, 7.0, 7.0)
    custom = TimeoutConfig(connect=1, read=2, write=3, pool=4)
    assert normalize_timeout(custom) is custom


def test_resolve_config_copies_headers():
    config = ClientConfig(headers={"X-A": "1"})
    resolved = resolve_config(config)
    resolved.headers["X-B"] = "2"
    assert config.headers == {"X-A": "1"}


def test_create_auth_handler_without_token():
    assert create_auth_handler(resolve_config(ClientConfig())) is None


def test_create_auth_handler_bearer():
    handler = create_auth_handler(resolve_config(ClientConfig(api_token="abc")))
    assert isinstance(handler, BearerAuthHandler)
    context = {"method": "GET", "url": "u", "headers": {}, "body": None}
    assert handler.get_header(context) == {"Authorization": "Bearer abc"}


def test_callback_falls_back_to_static_token():
    handler = BearerAuthHandler("static", lambda context: None)
    context = {"method": "GET", "url": "u", "headers": {}, "body": None}
    assert handler.get_header(context) == {"Authorization": "Bearer static"}


def test_mask_value():
    assert _mask_value(None) == "<empty>"
    assert _mask_value("short") == "*****"
    assert _mask_value("0123456789abcdef") == "0123456789******"
