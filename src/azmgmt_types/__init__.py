"""azmgmt types - Pydantic DTOs for Azure management-plane payloads."""

__version__ = "0.1.0"

from .base import (
    AzureModel,
    CloudError,
    DateTime,
    ErrorDetail,
    ReadOnly,
    Resource,
    ResourceList,
    TrackedResource,
)

__all__ = [
    "AzureModel",
    "CloudError",
    "DateTime",
    "ErrorDetail",
    "ReadOnly",
    "Resource",
    "ResourceList",
    "TrackedResource",
]
