"""
azmgmt Client Library.

A type-safe async HTTP client for Azure management-plane APIs
(Security Center, Key Vault, Recovery Services Backup).

Example usage:
    ```python
    from azmgmt_client import SecurityCenterClient, AlertUpdateAction

    async with SecurityCenterClient(
        subscription_id="...",
        access_token="...",
        asc_location="centralus",
    ) as client:
        # Iterate across all pages
        async for alert in client.alerts.list():
            print(alert.id, alert.state)

        # Region-scoped calls take the location explicitly
        alert = await client.alerts.get_subscription_level_alert("alert-name", asc_location="westeurope")

        # State transitions
        await client.alerts.update_subscription_level_alert_state(alert.name, AlertUpdateAction.dismiss)
    ```
"""

__version__ = "0.1.0"

# Service clients
from azmgmt_client.client import (
    KeyVaultManagementClient,
    ManagementClient,
    RecoveryServicesBackupClient,
    SecurityCenterClient,
)

# Configuration
from azmgmt_client.config import ClientConfig

# HTTP client components (for advanced usage)
from azmgmt_client.http import (
    AsyncHTTPClient,
    AuthProvider,
    CredentialAuthProvider,
    TokenAuthProvider,
)

# Pagination
from azmgmt_client.paging import AsyncPager, Page

# Resource ids
from azmgmt_client.resource_id import (
    ResourceId,
    format_resource_id,
    location_from_id,
    parse_resource_id,
    resource_group_from_id,
)

# Alert state values
from azmgmt_types.security import AlertState, AlertUpdateAction

# Exceptions
from azmgmt_client.exceptions import (
    AzureMgmtError,
    BadRequestError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    exception_from_response,
)

__all__ = [
    # Version
    "__version__",
    # Service clients
    "ManagementClient",
    "SecurityCenterClient",
    "KeyVaultManagementClient",
    "RecoveryServicesBackupClient",
    # Configuration
    "ClientConfig",
    # HTTP components
    "AsyncHTTPClient",
    "AuthProvider",
    "TokenAuthProvider",
    "CredentialAuthProvider",
    # Pagination
    "AsyncPager",
    "Page",
    # Resource ids
    "ResourceId",
    "format_resource_id",
    "location_from_id",
    "parse_resource_id",
    "resource_group_from_id",
    # Alert state values
    "AlertState",
    "AlertUpdateAction",
    # Exceptions
    "AzureMgmtError",
    "BadRequestError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "exception_from_response",
]
