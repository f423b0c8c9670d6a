"""
End-to-end alert scenarios replayed from recorded sessions.

Recordings live in tests/recordings/TestSecurityAlertsRecorded/. Set
AZURE_TEST_MODE=Record with AZURE_SUBSCRIPTION_ID and AZURE_ACCESS_TOKEN
to capture them again against a live subscription.
"""

import pytest

from azmgmt_client import AlertState, AlertUpdateAction, NotFoundError
from azmgmt_client.resource_id import location_from_id, resource_group_from_id


async def first_alert(client, resource_group_scoped):
    """First alert of the subscription listing with the wanted scope."""
    async for alert in client.alerts.list():
        if (resource_group_from_id(alert.id) is not None) == resource_group_scoped:
            return alert
    pytest.fail("No alert with the wanted scope in the subscription")


class TestSecurityAlertsRecorded:
    """Security Center alert scenarios."""

    @pytest.mark.asyncio
    async def test_list(self, recorded_security_client, recorded_transport):
        async with recorded_security_client as client:
            alerts = await client.alerts.list().to_list()

        assert len(alerts) > 0
        assert all(alert.properties.state for alert in alerts)
        assert not recorded_transport.pending

    @pytest.mark.asyncio
    async def test_get_resource_group_level_alerts(self, recorded_security_client):
        async with recorded_security_client as client:
            listed = await first_alert(client, resource_group_scoped=True)

            alert = await client.alerts.get_resource_group_level_alerts(
                listed.name,
                resource_group_from_id(listed.id),
                asc_location=location_from_id(listed.id),
            )

        assert alert.id == listed.id

    @pytest.mark.asyncio
    async def test_get_subscription_level_alert(self, recorded_security_client):
        async with recorded_security_client as client:
            listed = await first_alert(client, resource_group_scoped=False)

            alert = await client.alerts.get_subscription_level_alert(
                listed.name,
                asc_location=location_from_id(listed.id),
            )

        assert alert.id == listed.id

    @pytest.mark.asyncio
    async def test_list_by_resource_group(self, recorded_security_client):
        async with recorded_security_client as client:
            listed = await first_alert(client, resource_group_scoped=True)
            resource_group = resource_group_from_id(listed.id)

            alerts = await client.alerts.list_by_resource_group(resource_group).to_list()

        assert len(alerts) > 0
        assert all(resource_group_from_id(alert.id) == resource_group for alert in alerts)

    @pytest.mark.asyncio
    async def test_list_resource_group_level_alerts_by_region(self, recorded_security_client):
        async with recorded_security_client as client:
            listed = await first_alert(client, resource_group_scoped=True)
            location = location_from_id(listed.id)

            alerts = await client.alerts.list_resource_group_level_alerts_by_region(
                resource_group_from_id(listed.id),
                asc_location=location,
            ).to_list()

        assert len(alerts) > 0
        assert all(location_from_id(alert.id) == location for alert in alerts)

    @pytest.mark.asyncio
    async def test_list_subscription_level_alerts_by_region(self, recorded_security_client):
        async with recorded_security_client as client:
            listed = await first_alert(client, resource_group_scoped=False)

            alerts = await client.alerts.list_subscription_level_alerts_by_region(
                asc_location=location_from_id(listed.id),
            ).to_list()

        assert len(alerts) > 0
        assert all(resource_group_from_id(alert.id) is None for alert in alerts)

    @pytest.mark.asyncio
    async def test_update_resource_group_level_alert_state(self, recorded_security_client, recorded_transport):
        async with recorded_security_client as client:
            listed = await first_alert(client, resource_group_scoped=True)
            resource_group = resource_group_from_id(listed.id)
            location = location_from_id(listed.id)

            await client.alerts.update_resource_group_level_alert_state(
                listed.name, AlertUpdateAction.dismiss, resource_group, asc_location=location
            )
            alert = await client.alerts.get_resource_group_level_alerts(
                listed.name, resource_group, asc_location=location
            )

        assert alert.state == AlertState.dismissed.value
        assert not recorded_transport.pending

    @pytest.mark.asyncio
    async def test_update_subscription_level_alert_state(self, recorded_security_client, recorded_transport):
        async with recorded_security_client as client:
            listed = await first_alert(client, resource_group_scoped=False)
            location = location_from_id(listed.id)

            await client.alerts.update_subscription_level_alert_state(
                listed.name, AlertUpdateAction.dismiss, asc_location=location
            )
            alert = await client.alerts.get_subscription_level_alert(listed.name, asc_location=location)

        assert alert.state == AlertState.dismissed.value
        assert not recorded_transport.pending

    @pytest.mark.asyncio
    async def test_dismiss_already_dismissed_alert_is_idempotent(self, recorded_security_client, recorded_transport):
        """Test dismissing twice succeeds and leaves the alert dismissed."""
        alert_name = "2518770965529163669_F144EE95-A3E5-42DA-A279-967D115809AA"

        async with recorded_security_client as client:
            await client.alerts.update_subscription_level_alert_state(alert_name, AlertUpdateAction.dismiss)
            await client.alerts.update_subscription_level_alert_state(alert_name, AlertUpdateAction.dismiss)
            alert = await client.alerts.get_subscription_level_alert(alert_name)

        assert alert.state == AlertState.dismissed.value
        assert recorded_transport.request_count == 3

    @pytest.mark.asyncio
    async def test_update_state_of_missing_alert_raises_not_found(self, recorded_security_client):
        async with recorded_security_client as client:
            with pytest.raises(NotFoundError) as exc_info:
                await client.alerts.update_subscription_level_alert_state("does-not-exist", AlertUpdateAction.dismiss)

        assert exc_info.value.error_code == "AlertNotFound"
        assert exc_info.value.request_id is not None
