"""
Parsing and formatting of ARM resource identifiers.

Identifiers look like::

    /subscriptions/{sub}/resourceGroups/{rg}/providers/{namespace}/{type}/{name}
    /subscriptions/{sub}/providers/{namespace}/{type}/{name}[/{type}/{name}...]
    {parent id}/providers/{namespace}/{type}/{name}    (extension resource)

Segment keywords ("subscriptions", "resourceGroups", "providers") are
matched case-insensitively, as ARM does.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import re

_RESOURCE_GROUP_PATTERN = re.compile(r"(?<=/resourcegroups/)[^/]+", re.IGNORECASE)
_LOCATION_PATTERN = re.compile(r"(?<=/locations/)[^/]+", re.IGNORECASE)


@dataclass(frozen=True)
class ResourceId:
    """
    A parsed resource identifier.

    Attributes:
        subscription_id: Subscription GUID
        resource_group: Resource group name, None for subscription-scoped ids
        namespace: Provider namespace (e.g., "Microsoft.Security")
        types: Resource type/name pairs following the namespace
        parent: The resource an extension resource is attached to, e.g. the
                virtual machine an alert was raised on
    """

    subscription_id: str
    namespace: str
    resource_group: Optional[str] = None
    types: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    parent: Optional["ResourceId"] = None

    @property
    def resource_type(self) -> str:
        """Full resource type, e.g. "Microsoft.Security/locations/alerts"."""
        return "/".join([self.namespace] + [segment for segment, _ in self.types])

    @property
    def name(self) -> Optional[str]:
        """Name of the leaf resource."""
        return self.types[-1][1] if self.types else None

    @property
    def location(self) -> Optional[str]:
        """Value of a "locations" segment, if the id has one."""
        for segment, value in self.types:
            if segment.lower() == "locations":
                return value
        return None

    @property
    def is_resource_group_scoped(self) -> bool:
        return self.resource_group is not None

    def __str__(self) -> str:
        segments = [part for pair in self.types for part in pair]
        if self.parent is not None:
            return "/".join([str(self.parent), "providers", self.namespace, *segments])
        return format_resource_id(
            self.subscription_id,
            self.namespace,
            *segments,
            resource_group=self.resource_group,
        )


def parse_resource_id(resource_id: str) -> ResourceId:
    """
    Parse a resource identifier.

    Args:
        resource_id: The id string

    Returns:
        The parsed ResourceId

    Raises:
        ValueError: If the id has no subscription or provider segment,
                    a dangling type without a name, or an extension
                    provider with no resource before it
    """
    parts = [p for p in resource_id.strip().split("/") if p]

    if len(parts) < 2 or parts[0].lower() != "subscriptions":
        raise ValueError(f"Resource id must start with /subscriptions/{{id}}: {resource_id!r}")
    subscription_id = parts[1]
    rest = parts[2:]

    resource_group = None
    if len(rest) >= 2 and rest[0].lower() == "resourcegroups":
        resource_group = rest[1]
        rest = rest[2:]

    if len(rest) < 2 or rest[0].lower() != "providers":
        raise ValueError(f"Resource id has no provider segment: {resource_id!r}")
    namespace = rest[1]
    rest = rest[2:]

    if len(rest) % 2:
        raise ValueError(f"Resource id has a type without a name: {resource_id!r}")

    parent: Optional[ResourceId] = None
    types: List[Tuple[str, str]] = []
    for i in range(0, len(rest), 2):
        segment, value = rest[i], rest[i + 1]
        if segment.lower() != "providers":
            types.append((segment, value))
            continue
        # Extension resource: everything so far is the resource it extends.
        if not types:
            raise ValueError(f"Resource id has an extension without a parent resource: {resource_id!r}")
        parent = ResourceId(subscription_id, namespace, resource_group, tuple(types), parent)
        namespace, types = value, []

    return ResourceId(
        subscription_id=subscription_id,
        namespace=namespace,
        resource_group=resource_group,
        types=tuple(types),
        parent=parent,
    )


def format_resource_id(
    subscription_id: str,
    namespace: str,
    *types_and_names: str,
    resource_group: Optional[str] = None,
) -> str:
    """
    Build a resource identifier.

    Example:
        format_resource_id("sub", "Microsoft.KeyVault", "vaults", "kv1", resource_group="rg")
        -> "/subscriptions/sub/resourceGroups/rg/providers/Microsoft.KeyVault/vaults/kv1"
    """
    parts = ["", "subscriptions", subscription_id]
    if resource_group:
        parts += ["resourceGroups", resource_group]
    parts += ["providers", namespace, *types_and_names]
    return "/".join(parts)


def resource_group_from_id(resource_id: str) -> Optional[str]:
    """Extract the resource group name, or None for subscription-scoped ids."""
    match = _RESOURCE_GROUP_PATTERN.search(resource_id)
    return match.group(0) if match else None


def location_from_id(resource_id: str) -> Optional[str]:
    """Extract the value of the "locations" segment, if present."""
    match = _LOCATION_PATTERN.search(resource_id)
    return match.group(0) if match else None
