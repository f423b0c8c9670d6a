"""
Microsoft.Security (Security Center) payload models.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict

from azmgmt_types.base import AzureModel, DateTime, ReadOnly, Resource, ResourceList


class AlertState(str, Enum):
    active = "Active"
    dismissed = "Dismissed"
    resolved = "Resolved"


class AlertUpdateAction(str, Enum):
    """Target of a state transition: the last path segment of the update call."""

    dismiss = "Dismiss"
    reactivate = "Reactivate"


class AlertEntity(AzureModel):
    """Impacted entity of an alert. Entity-specific attributes are kept as extras."""

    type: Optional[str] = ReadOnly("Type of entity")

    model_config = ConfigDict(extra="allow")


class AlertConfidenceReason(AzureModel):
    type: Optional[str] = ReadOnly("Type of confidence factor")
    reason: Optional[str] = ReadOnly("Description of the confidence reason")


class AlertProperties(AzureModel):
    state: Optional[str] = ReadOnly("State of the alert (Active, Dismissed, Resolved)")
    reported_time_utc: Optional[DateTime] = ReadOnly("Time the incident was reported in UTC")
    vendor_name: Optional[str] = ReadOnly("Name of the vendor that discovered the incident")
    alert_name: Optional[str] = ReadOnly("Name of the alert type")
    alert_display_name: Optional[str] = ReadOnly("Display name of the alert type")
    detected_time_utc: Optional[DateTime] = ReadOnly("Time the incident was detected by the vendor")
    description: Optional[str] = ReadOnly("Description of the incident and what it means")
    remediation_steps: Optional[str] = ReadOnly("Recommended steps to remediate the incident")
    action_taken: Optional[str] = ReadOnly("The action that was taken as a response to the alert")
    reported_severity: Optional[str] = ReadOnly("Estimated severity of this alert")
    compromised_entity: Optional[str] = ReadOnly("The entity that the incident happened on")
    associated_resource: Optional[str] = ReadOnly("Azure resource ID of the associated resource")
    extended_properties: Optional[Dict[str, Any]] = None
    system_source: Optional[str] = ReadOnly("The type of the alerted resource (Azure, Non-Azure)")
    can_be_investigated: Optional[bool] = ReadOnly("Whether this alert can be investigated")
    entities: Optional[List[AlertEntity]] = None
    confidence_score: Optional[float] = ReadOnly("Level of confidence for the alert")
    confidence_reasons: Optional[List[AlertConfidenceReason]] = None
    subscription_id: Optional[str] = ReadOnly("Azure subscription ID of the resource")
    instance_id: Optional[str] = ReadOnly("Instance ID of the alert")
    workspace_arm_id: Optional[str] = ReadOnly("Azure resource ID of the workspace")


class Alert(Resource):
    """Security alert."""

    properties: Optional[AlertProperties] = None

    @property
    def state(self) -> Optional[str]:
        return self.properties.state if self.properties else None


class AlertList(ResourceList[Alert]):
    pass


class OperationDisplay(AzureModel):
    """Security operation display."""

    provider: Optional[str] = ReadOnly("The resource provider for the operation")
    resource: Optional[str] = ReadOnly("The display name of the resource the operation applies to")
    operation: Optional[str] = ReadOnly("The display name of the security offering operation")
    description: Optional[str] = ReadOnly("The description of the operation")


class Operation(AzureModel):
    """Possible operation in the REST API of Microsoft.Security."""

    name: Optional[str] = ReadOnly("Name of the operation")
    origin: Optional[str] = ReadOnly("Where the operation is originated")
    display: Optional[OperationDisplay] = None


class OperationList(ResourceList[Operation]):
    pass


class AscLocation(Resource):
    """The ASC location of the subscription is in the "name" field."""

    properties: Optional[Dict[str, Any]] = None


class AscLocationList(ResourceList[AscLocation]):
    pass
