"""
Security Center (Microsoft.Security) operation groups.
"""

from typing import Optional, Union

from azmgmt_types.security import (
    Alert,
    AlertList,
    AlertUpdateAction,
    AscLocation,
    AscLocationList,
    Operation,
    OperationList,
)

from azmgmt_client.base import OperationGroup
from azmgmt_client.paging import AsyncPager

API_VERSION = "2015-06-01-preview"
PROVIDER = "Microsoft.Security"


class AlertsClient(OperationGroup):
    """
    Client for Security Center alerts.

    Region-scoped methods take ``asc_location`` explicitly and fall back to
    the client's configured location.
    """

    api_version = API_VERSION

    def _alerts_path(
        self,
        resource_group_name: Optional[str] = None,
        asc_location: Optional[str] = None,
        regional: bool = False,
    ) -> str:
        path = f"{self._subscription_path(resource_group_name)}/providers/{PROVIDER}"
        if regional:
            path += f"/locations/{self._segment(self._config.resolve_location(asc_location))}"
        return f"{path}/alerts"

    @staticmethod
    def _query(filter: Optional[str], select: Optional[str], expand: Optional[str]) -> dict:
        return {"$filter": filter, "$select": select, "$expand": expand}

    def list(
        self,
        filter: Optional[str] = None,
        select: Optional[str] = None,
        expand: Optional[str] = None,
    ) -> AsyncPager[Alert]:
        """List all the alerts associated with the subscription."""
        return self._list(self._alerts_path(), AlertList, self._query(filter, select, expand))

    def list_by_resource_group(
        self,
        resource_group_name: str,
        filter: Optional[str] = None,
        select: Optional[str] = None,
        expand: Optional[str] = None,
    ) -> AsyncPager[Alert]:
        """List all the alerts associated with the resource group."""
        return self._list(
            self._alerts_path(resource_group_name),
            AlertList,
            self._query(filter, select, expand),
        )

    def list_subscription_level_alerts_by_region(
        self,
        filter: Optional[str] = None,
        select: Optional[str] = None,
        expand: Optional[str] = None,
        asc_location: Optional[str] = None,
    ) -> AsyncPager[Alert]:
        """List all the subscription-level alerts stored in the given location."""
        return self._list(
            self._alerts_path(asc_location=asc_location, regional=True),
            AlertList,
            self._query(filter, select, expand),
        )

    def list_resource_group_level_alerts_by_region(
        self,
        resource_group_name: str,
        filter: Optional[str] = None,
        select: Optional[str] = None,
        expand: Optional[str] = None,
        asc_location: Optional[str] = None,
    ) -> AsyncPager[Alert]:
        """List all the resource-group-level alerts stored in the given location."""
        return self._list(
            self._alerts_path(resource_group_name, asc_location, regional=True),
            AlertList,
            self._query(filter, select, expand),
        )

    async def get_subscription_level_alert(
        self,
        alert_name: str,
        asc_location: Optional[str] = None,
    ) -> Alert:
        """Get a subscription-level alert."""
        path = f"{self._alerts_path(asc_location=asc_location, regional=True)}/{self._segment(alert_name)}"
        return await self._get_model(path, Alert)

    async def get_resource_group_level_alerts(
        self,
        alert_name: str,
        resource_group_name: str,
        asc_location: Optional[str] = None,
    ) -> Alert:
        """Get a resource-group-level alert."""
        path = (
            f"{self._alerts_path(resource_group_name, asc_location, regional=True)}"
            f"/{self._segment(alert_name)}"
        )
        return await self._get_model(path, Alert)

    async def update_subscription_level_alert_state(
        self,
        alert_name: str,
        alert_update_action_type: Union[AlertUpdateAction, str],
        asc_location: Optional[str] = None,
    ) -> None:
        """Update the state of a subscription-level alert (e.g., "Dismiss")."""
        path = (
            f"{self._alerts_path(asc_location=asc_location, regional=True)}"
            f"/{self._segment(alert_name)}/{self._segment(_action(alert_update_action_type))}"
        )
        await self._post_action(path)

    async def update_resource_group_level_alert_state(
        self,
        alert_name: str,
        alert_update_action_type: Union[AlertUpdateAction, str],
        resource_group_name: str,
        asc_location: Optional[str] = None,
    ) -> None:
        """Update the state of a resource-group-level alert (e.g., "Dismiss")."""
        path = (
            f"{self._alerts_path(resource_group_name, asc_location, regional=True)}"
            f"/{self._segment(alert_name)}/{self._segment(_action(alert_update_action_type))}"
        )
        await self._post_action(path)


def _action(value: Union[AlertUpdateAction, str]) -> str:
    return value.value if isinstance(value, AlertUpdateAction) else value


class SecurityOperationsClient(OperationGroup):
    """Client for the Microsoft.Security operations listing."""

    api_version = API_VERSION

    def list(self) -> AsyncPager[Operation]:
        """Expose all available operations for Security Center."""
        return self._list(f"/providers/{PROVIDER}/operations", OperationList)


class LocationsClient(OperationGroup):
    """
    Client for Security Center locations.

    The location a subscription's Security Center data is stored in is
    the "name" of the returned AscLocation.
    """

    api_version = API_VERSION

    def list(self) -> AsyncPager[AscLocation]:
        """List the locations where Security Center stores data for the subscription."""
        return self._list(f"{self._subscription_path()}/providers/{PROVIDER}/locations", AscLocationList)

    async def get(self, asc_location: Optional[str] = None) -> AscLocation:
        """Details of a specific location."""
        location = self._segment(self._config.resolve_location(asc_location))
        return await self._get_model(
            f"{self._subscription_path()}/providers/{PROVIDER}/locations/{location}",
            AscLocation,
        )
