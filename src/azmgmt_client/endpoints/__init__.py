"""
Operation group clients, one module per service.
"""

from azmgmt_client.endpoints.keyvault import KeyVaultOperationsClient, VaultsClient
from azmgmt_client.endpoints.recoveryservices_backup import SecurityPinsClient
from azmgmt_client.endpoints.security import AlertsClient, LocationsClient, SecurityOperationsClient

__all__ = [
    "AlertsClient",
    "KeyVaultOperationsClient",
    "LocationsClient",
    "SecurityOperationsClient",
    "SecurityPinsClient",
    "VaultsClient",
]
