"""
Auth handler utilities for cloudflare_client.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..config import ResolvedConfig
from ..types import RequestContext, TokenProvider

logger = logging.getLogger(__name__)
LOG_PREFIX = "[CloudflareAuth]"


def _mask_value(val: Optional[str]) -> str:
    """Mask sensitive value for logging, showing first 10 chars."""
    if not val:
        return "<empty>"
    if len(val) <= 10:
        return "*" * len(val)
    return val[:10] + "*" * (len(val) - 10)


class AuthHandler(ABC):
    """Auth handler interface."""

    @abstractmethod
    def get_header(self, context: RequestContext) -> Optional[Dict[str, str]]:
        """Get auth header for request."""
        ...


class BearerAuthHandler(AuthHandler):
    """Bearer token auth handler."""

    def __init__(
        self,
        api_token: Optional[str] = None,
        get_token_for_request: Optional[TokenProvider] = None,
    ):
        self._api_token = api_token
        self._get_token_for_request = get_token_for_request

    def get_header(self, context: RequestContext) -> Optional[Dict[str, str]]:
        """Get bearer auth header."""
        token = None
        if self._get_token_for_request:
            token = self._get_token_for_request(context)
        if not token:
            token = self._api_token
        if not token:
            return None
        header = {"Authorization": f"Bearer {token}"}
        logger.debug(
            f"{LOG_PREFIX} BearerAuthHandler.get_header: api_token={_mask_value(token)} -> "
            f"Authorization={_mask_value(header['Authorization'])}"
        )
        return header


def create_auth_handler(config: ResolvedConfig) -> Optional[AuthHandler]:
    """Create auth handler from config, or None when no token source is set."""
    if not config.api_token and not config.get_token_for_request:
        logger.warning(f"{LOG_PREFIX} create_auth_handler: no API token configured, requests are unauthenticated")
        return None
    logger.debug(
        f"{LOG_PREFIX} create_auth_handler: api_token={_mask_value(config.api_token)}, "
        f"callback={'yes' if config.get_token_for_request else 'no'}"
    )
    return BearerAuthHandler(config.api_token, config.get_token_for_request)
