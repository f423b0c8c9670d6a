"""
Recovery Services backup (Microsoft.RecoveryServices) operation groups.
"""

from azmgmt_types.recoveryservices_backup import TokenInformation

from azmgmt_client.base import OperationGroup

API_VERSION = "2016-12-01"
PROVIDER = "Microsoft.RecoveryServices"


class SecurityPinsClient(OperationGroup):
    api_version = API_VERSION

    async def get(self, vault_name: str, resource_group_name: str) -> TokenInformation:
        """Get the security PIN used to authorize critical backup operations."""
        path = (
            f"{self._subscription_path(resource_group_name)}/providers/{PROVIDER}"
            f"/vaults/{self._segment(vault_name)}/backupSecurityPIN"
        )
        return await self._post_model(path, TokenInformation)
