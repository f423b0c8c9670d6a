"""
Key Vault management (Microsoft.KeyVault) operation groups.
"""

from typing import Optional

from azmgmt_types.keyvault import Operation, OperationList, Vault, VaultListResult

from azmgmt_client.base import OperationGroup
from azmgmt_client.paging import AsyncPager

API_VERSION = "2018-02-14"
PROVIDER = "Microsoft.KeyVault"


class KeyVaultOperationsClient(OperationGroup):
    api_version = API_VERSION

    def list(self) -> AsyncPager[Operation]:
        """List all of the available Key Vault REST API operations."""
        return self._list(f"/providers/{PROVIDER}/operations", OperationList)


class VaultsClient(OperationGroup):
    """Client for key vaults (management plane only)."""

    api_version = API_VERSION

    def _vaults_path(self, resource_group_name: Optional[str] = None) -> str:
        return f"{self._subscription_path(resource_group_name)}/providers/{PROVIDER}/vaults"

    async def get(self, resource_group_name: str, vault_name: str) -> Vault:
        """Get the specified Azure key vault."""
        return await self._get_model(
            f"{self._vaults_path(resource_group_name)}/{self._segment(vault_name)}",
            Vault,
        )

    def list_by_resource_group(
        self,
        resource_group_name: str,
        top: Optional[int] = None,
    ) -> AsyncPager[Vault]:
        """List the key vaults in the resource group."""
        return self._list(self._vaults_path(resource_group_name), VaultListResult, {"$top": top})

    def list_by_subscription(self, top: Optional[int] = None) -> AsyncPager[Vault]:
        """List the key vaults in the subscription."""
        return self._list(self._vaults_path(), VaultListResult, {"$top": top})
