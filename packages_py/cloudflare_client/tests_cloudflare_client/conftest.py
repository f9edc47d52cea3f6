"""
Shared fixtures for cloudflare_client tests.
"""
import pytest

from cloudflare_client.config import ClientConfig

BASE_URL = "https://api.cloudflare.test/client/v4"


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def config():
    return ClientConfig(base_url=BASE_URL, api_token="test-token-123456", account_id="acc-1")


@pytest.fixture
def envelope():
    """Build a v4 response envelope."""
    def _envelope(result=None, success=True, errors=None, messages=None, **extra):
        body = {
            "success": success,
            "errors": errors or [],
            "messages": messages or [],
            "result": result,
        }
        body.update(extra)
        return body
    return _envelope
