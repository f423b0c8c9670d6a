"""
Service clients.

Each service client owns one HTTP client and an immutable configuration,
and exposes its operation groups as lazily created properties.
"""

from typing import Any, Dict, Optional, Type, TypeVar
import logging

import httpx

from azmgmt_client.config import ClientConfig
from azmgmt_client.endpoints import (
    AlertsClient,
    KeyVaultOperationsClient,
    LocationsClient,
    SecurityOperationsClient,
    SecurityPinsClient,
    VaultsClient,
)
from azmgmt_client.http import (
    AsyncHTTPClient,
    AuthProvider,
    CredentialAuthProvider,
    TokenAuthProvider,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ManagementClient:
    """
    Base class for Azure management service clients.

    Example usage:
        ```python
        async with SecurityCenterClient(
            subscription_id="...",
            access_token="...",
            asc_location="centralus",
        ) as client:
            async for alert in client.alerts.list():
                print(alert.id, alert.state)
        ```

    Or without context manager:
        ```python
        client = SecurityCenterClient(config=ClientConfig.from_env(), credential=credential)
        ...
        await client.close()
        ```
    """

    def __init__(
        self,
        subscription_id: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        access_token: Optional[str] = None,
        credential: Optional[Any] = None,
        auth_provider: Optional[AuthProvider] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **config_overrides: Any,
    ):
        """
        Initialize the client.

        Args:
            subscription_id: Subscription all calls are scoped to
            config: Complete configuration (overrides are applied on top)
            access_token: Static bearer token
            credential: azure-identity style credential (takes precedence over access_token)
            auth_provider: Custom authentication provider (takes precedence over both)
            transport: Custom httpx transport, e.g. a RecordedTransport
            **config_overrides: Any ClientConfig field (asc_location, base_url, timeout, headers)
        """
        if subscription_id is not None:
            config_overrides["subscription_id"] = subscription_id
        values = (config or ClientConfig()).model_dump()
        values.update(config_overrides)
        self._config = ClientConfig(**values)

        if auth_provider is None:
            if credential is not None:
                auth_provider = CredentialAuthProvider(credential)
            else:
                auth_provider = TokenAuthProvider(access_token)
        self._auth_provider = auth_provider

        self._http = AsyncHTTPClient(
            base_url=self._config.base_url,
            auth_provider=auth_provider,
            timeout=self._config.timeout,
            headers=dict(self._config.headers),
            transport=transport,
        )

        # Operation groups (lazy-loaded)
        self._endpoint_clients: Dict[str, Any] = {}

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def subscription_id(self) -> Optional[str]:
        return self._config.subscription_id

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def is_authenticated(self) -> bool:
        return self._auth_provider.is_authenticated()

    @property
    def http(self) -> AsyncHTTPClient:
        """Get the underlying HTTP client for custom requests."""
        return self._http

    def _get_endpoint_client(self, client_class: Type[T]) -> T:
        """Get or create an operation group instance."""
        class_name = client_class.__name__
        if class_name not in self._endpoint_clients:
            self._endpoint_clients[class_name] = client_class(self._http, self._config)
        return self._endpoint_clients[class_name]

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()
        self._endpoint_clients.clear()
        logger.debug(f"{type(self).__name__} closed")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        auth_status = "authenticated" if self.is_authenticated else "not authenticated"
        return (
            f"{type(self).__name__}(subscription_id={self.subscription_id!r}, "
            f"base_url={self.base_url!r}, {auth_status})"
        )


class SecurityCenterClient(ManagementClient):
    """Client for Microsoft.Security."""

    @property
    def alerts(self) -> AlertsClient:
        return self._get_endpoint_client(AlertsClient)

    @property
    def operations(self) -> SecurityOperationsClient:
        return self._get_endpoint_client(SecurityOperationsClient)

    @property
    def locations(self) -> LocationsClient:
        return self._get_endpoint_client(LocationsClient)


class KeyVaultManagementClient(ManagementClient):
    """Client for Microsoft.KeyVault management operations."""

    @property
    def vaults(self) -> VaultsClient:
        return self._get_endpoint_client(VaultsClient)

    @property
    def operations(self) -> KeyVaultOperationsClient:
        return self._get_endpoint_client(KeyVaultOperationsClient)


class RecoveryServicesBackupClient(ManagementClient):
    """Client for Microsoft.RecoveryServices backup operations."""

    @property
    def security_pins(self) -> SecurityPinsClient:
        return self._get_endpoint_client(SecurityPinsClient)
