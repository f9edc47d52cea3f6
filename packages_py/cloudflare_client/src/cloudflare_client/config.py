"""
Configuration models and validation for cloudflare-client.
"""
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, SecretStr, field_validator

from .types import TokenProvider

logger = logging.getLogger(__name__)

LOG_PREFIX = "[CloudflareConfig]"

# Constants
DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_TIMEOUT_CONNECT = 5.0
DEFAULT_TIMEOUT_READ = 30.0
DEFAULT_TIMEOUT_WRITE = 10.0

ENV_API_TOKEN = "CLOUDFLARE_API_TOKEN"
ENV_ACCOUNT_ID = "CLOUDFLARE_ACCOUNT_ID"
ENV_BASE_URL = "CLOUDFLARE_API_BASE_URL"
ENV_TIMEOUT = "CLOUDFLARE_TIMEOUT"


def resolve(
    arg: Any,
    env_keys: Union[str, List[str], None],
    config: Optional[Dict[str, Any]],
    config_key: str,
    default: Any,
) -> Any:
    """
    Resolve a value: argument, then environment, then config dict, then default.
    """
    if arg is not None:
        return arg

    if env_keys:
        keys = [env_keys] if isinstance(env_keys, str) else env_keys
        for key in keys:
            val = os.environ.get(key)
            if val is not None and val != "":
                return val

    if config and config_key in config:
        val = config[config_key]
        if val is not None:
            return val

    return default


class TimeoutConfig(BaseModel):
    """Timeout configuration."""
    connect: float = DEFAULT_TIMEOUT_CONNECT
    read: float = DEFAULT_TIMEOUT_READ
    write: float = DEFAULT_TIMEOUT_WRITE
    pool: Optional[float] = None


class ClientConfig(BaseModel):
    """Client configuration."""
    model_config = {"arbitrary_types_allowed": True}

    base_url: str = DEFAULT_BASE_URL
    api_token: Optional[SecretStr] = None
    account_id: Optional[str] = None
    timeout: Optional[Union[float, TimeoutConfig]] = None
    headers: Dict[str, str] = Field(default_factory=dict)

    # Callback for per-request token resolution
    get_token_for_request: Optional[TokenProvider] = None

    # Optional pre-configured client (httpx)
    httpx_client: Any = None

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @classmethod
    def from_env(
        cls,
        api_token: Optional[str] = None,
        account_id: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[Union[float, TimeoutConfig]] = None,
        config: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> "ClientConfig":
        """
        Build a config from arguments, the CLOUDFLARE_* environment and an
        optional dict, in that order of precedence.
        """
        token = resolve(api_token, ENV_API_TOKEN, config, "api_token", None)
        resolved_timeout = resolve(timeout, ENV_TIMEOUT, config, "timeout", None)
        if isinstance(resolved_timeout, str):
            resolved_timeout = float(resolved_timeout)

        resolved = cls(
            base_url=resolve(base_url, ENV_BASE_URL, config, "base_url", DEFAULT_BASE_URL),
            api_token=token,
            account_id=resolve(account_id, ENV_ACCOUNT_ID, config, "account_id", None),
            timeout=resolved_timeout,
            **kwargs,
        )
        logger.debug(
            f"{LOG_PREFIX} from_env: base_url={resolved.base_url}, "
            f"account_id={resolved.account_id}, token={'<set>' if token else '<missing>'}"
        )
        return resolved


def normalize_timeout(timeout: Optional[Union[float, TimeoutConfig]]) -> TimeoutConfig:
    """Normalize timeout to TimeoutConfig object."""
    if timeout is None:
        return TimeoutConfig()
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=float(timeout), read=float(timeout), write=float(timeout))
    return timeout


@dataclass
class ResolvedConfig:
    """Fully resolved configuration ready for usage."""
    base_url: str
    api_token: Optional[str]
    account_id: Optional[str]
    timeout: TimeoutConfig
    headers: Dict[str, str]
    get_token_for_request: Optional[TokenProvider] = None


def resolve_config(config: ClientConfig) -> ResolvedConfig:
    """Apply defaults and return resolved config."""
    return ResolvedConfig(
        base_url=config.base_url,
        api_token=config.api_token.get_secret_value() if config.api_token else None,
        account_id=config.account_id,
        timeout=normalize_timeout(config.timeout),
        headers=dict(config.headers),
        get_token_for_request=config.get_token_for_request,
    )
