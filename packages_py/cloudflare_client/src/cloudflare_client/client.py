"""
CloudflareClient: one transport, every resource API.
"""
import logging
from typing import Any, Dict, Optional, Union

from .audit_logs import AuditLogsApi
from .config import ClientConfig, ResolvedConfig, TimeoutConfig
from .core.base_client import BaseClient
from .dns import DnsApi
from .members import MembersApi
from .r2 import R2BucketsApi
from .subscriptions import SubscriptionsApi
from .user import UserApi
from .workers import WorkersApi
from .zones import ZoneSettingsApi

logger = logging.getLogger(__name__)

LOG_PREFIX = "[CloudflareClient]"


class CloudflareClient:
    """
    Entry point for the Cloudflare v4 API.

    Usage:
        async with CloudflareClient.from_env() as cf:
            record = await cf.dns.get_record(zone_id, record_id)
            async for log in cf.audit_logs.get_all_account_audit_logs(account_id):
                ...

    The resource APIs share the underlying connection pool. Closing the client
    closes the pool unless a pre-built ``httpx_client`` was supplied.
    """

    def __init__(self, config: ClientConfig):
        self._transport = BaseClient(config)

        self.dns = DnsApi(self._transport)
        self.workers = WorkersApi(self._transport)
        self.audit_logs = AuditLogsApi(self._transport)
        self.user = UserApi(self._transport)
        self.members = MembersApi(self._transport)
        self.subscriptions = SubscriptionsApi(self._transport)
        self.r2 = R2BucketsApi(self._transport)
        self.zone_settings = ZoneSettingsApi(self._transport)

        logger.debug(f"{LOG_PREFIX} Created for {self._transport.config.base_url}")

    @classmethod
    def create(cls, config: ClientConfig) -> "CloudflareClient":
        """Factory method to create a client."""
        return cls(config)

    @classmethod
    def from_env(
        cls,
        api_token: Optional[str] = None,
        account_id: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[Union[float, TimeoutConfig]] = None,
        config: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> "CloudflareClient":
        """Build a client from arguments, CLOUDFLARE_* variables and an optional dict."""
        return cls(
            ClientConfig.from_env(
                api_token=api_token,
                account_id=account_id,
                base_url=base_url,
                timeout=timeout,
                config=config,
                **kwargs,
            )
        )

    @property
    def config(self) -> ResolvedConfig:
        return self._transport.config

    @property
    def transport(self) -> BaseClient:
        return self._transport

    def r2_for_account(self, account_id: str) -> R2BucketsApi:
        """R2 bucket API bound to an account other than the configured one."""
        return R2BucketsApi(self._transport, account_id=account_id)

    async def connect(self) -> None:
        await self._transport.connect()

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> "CloudflareClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
