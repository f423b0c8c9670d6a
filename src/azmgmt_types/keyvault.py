"""
Microsoft.KeyVault management-plane payload models.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from azmgmt_types.base import AzureModel, ResourceList, TrackedResource


class SkuName(str, Enum):
    standard = "standard"
    premium = "premium"


class LogSpecification(AzureModel):
    """Log specification of operation."""

    name: Optional[str] = Field(None, description="Name of log specification")
    display_name: Optional[str] = Field(None, description="Display name of log specification")
    blob_duration: Optional[str] = Field(None, description="Blob duration of specification")


class ServiceSpecification(AzureModel):
    """One property of operation, include log specifications."""

    log_specifications: Optional[List[LogSpecification]] = Field(
        None, description="Log specifications of operation"
    )


class OperationProperties(AzureModel):
    service_specification: Optional[ServiceSpecification] = None


class OperationDisplay(AzureModel):
    provider: Optional[str] = Field(None, description="Service provider: Microsoft Key Vault")
    resource: Optional[str] = Field(None, description="Resource on which the operation is performed")
    operation: Optional[str] = Field(None, description="Type of operation: get, read, delete, etc.")
    description: Optional[str] = Field(None, description="Description of operation")


class Operation(AzureModel):
    """Key Vault REST API operation definition."""

    name: Optional[str] = Field(None, description="Operation name: {provider}/{resource}/{operation}")
    display: Optional[OperationDisplay] = None
    origin: Optional[str] = Field(None, description="The origin of operations")
    properties: Optional[OperationProperties] = None

    @property
    def service_specification(self) -> Optional[ServiceSpecification]:
        return self.properties.service_specification if self.properties else None


class OperationList(ResourceList[Operation]):
    pass


class Sku(AzureModel):
    family: Optional[str] = Field("A", description="SKU family name")
    name: Optional[SkuName] = Field(None, description="SKU name to specify whether the key vault is standard or premium")


class Permissions(AzureModel):
    keys: Optional[List[str]] = None
    secrets: Optional[List[str]] = None
    certificates: Optional[List[str]] = None
    storage: Optional[List[str]] = None


class AccessPolicyEntry(AzureModel):
    tenant_id: Optional[str] = None
    object_id: Optional[str] = None
    application_id: Optional[str] = None
    permissions: Optional[Permissions] = None


class VaultProperties(AzureModel):
    tenant_id: Optional[str] = Field(None, description="Azure AD tenant used for authenticating requests")
    sku: Optional[Sku] = None
    access_policies: Optional[List[AccessPolicyEntry]] = None
    vault_uri: Optional[str] = Field(None, description="URI of the vault for key and secret operations")
    enabled_for_deployment: Optional[bool] = None
    enabled_for_disk_encryption: Optional[bool] = None
    enabled_for_template_deployment: Optional[bool] = None
    enable_soft_delete: Optional[bool] = None
    enable_purge_protection: Optional[bool] = None
    create_mode: Optional[str] = None


class Vault(TrackedResource):
    """Resource information with extended details."""

    properties: Optional[VaultProperties] = None


class VaultListResult(ResourceList[Vault]):
    pass
