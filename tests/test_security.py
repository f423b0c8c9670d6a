"""Tests for the Security Center operation groups."""

import httpx
import pytest
import respx

from azmgmt_client import AlertUpdateAction, SecurityCenterClient
from azmgmt_client.endpoints.security import API_VERSION
from azmgmt_client.exceptions import AuthorizationError, NotFoundError

BASE_URL = "https://management.azure.com"
SUB = "00000000-0000-0000-0000-000000000000"
SUB_PATH = f"/subscriptions/{SUB}"


def json_page(items, next_link=None):
    body = {"value": items}
    if next_link:
        body["nextLink"] = next_link
    return httpx.Response(200, json=body)


# ============================================================================
# Alerts: listing
# ============================================================================


class TestAlertsList:
    """Tests for the alert listing methods."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_list(self, security_client, mock_alert_data):
        route = respx.get(f"{BASE_URL}{SUB_PATH}/providers/Microsoft.Security/alerts").mock(
            return_value=json_page([mock_alert_data])
        )

        async with security_client as client:
            alerts = await client.alerts.list().to_list()

        assert [alert.name for alert in alerts] == [mock_alert_data["name"]]
        request = route.calls.last.request
        assert request.url.params["api-version"] == API_VERSION
        assert "$filter" not in request.url.params
        assert request.headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_passes_odata_options(self, security_client):
        route = respx.get(f"{BASE_URL}{SUB_PATH}/providers/Microsoft.Security/alerts").mock(
            return_value=json_page([])
        )

        async with security_client as client:
            await client.alerts.list(filter="properties/state eq 'Active'", select="name", expand="entities").to_list()

        params = route.calls.last.request.url.params
        assert params["$filter"] == "properties/state eq 'Active'"
        assert params["$select"] == "name"
        assert params["$expand"] == "entities"

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_follows_next_link(self, security_client, alert_factory):
        """Test the absolute next link is requested as given."""
        next_link = f"{BASE_URL}{SUB_PATH}/providers/Microsoft.Security/alerts?api-version={API_VERSION}&$skiptoken=p2"
        route = respx.get(f"{BASE_URL}{SUB_PATH}/providers/Microsoft.Security/alerts").mock(
            side_effect=[
                json_page([alert_factory(name="a1")], next_link=next_link),
                json_page([alert_factory(name="a2")]),
            ]
        )

        async with security_client as client:
            names = [alert.name async for alert in client.alerts.list()]

        assert names == ["a1", "a2"]
        assert route.call_count == 2
        assert route.calls[1].request.url.params["$skiptoken"] == "p2"

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_by_resource_group(self, security_client, alert_factory):
        route = respx.get(
            f"{BASE_URL}{SUB_PATH}/resourceGroups/myService1/providers/Microsoft.Security/alerts"
        ).mock(return_value=json_page([alert_factory(resource_group="myService1")]))

        async with security_client as client:
            alerts = await client.alerts.list_by_resource_group("myService1").to_list()

        assert route.called
        assert "/resourceGroups/myService1/" in alerts[0].id

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_subscription_level_alerts_by_region_default_location(self, security_client):
        route = respx.get(f"{BASE_URL}{SUB_PATH}/providers/Microsoft.Security/locations/centralus/alerts").mock(
            return_value=json_page([])
        )

        async with security_client as client:
            assert await client.alerts.list_subscription_level_alerts_by_region().to_list() == []

        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_resource_group_level_alerts_by_region_explicit_location(self, security_client):
        """Test an explicit location overrides the configured one."""
        route = respx.get(
            f"{BASE_URL}{SUB_PATH}/resourceGroups/rg1/providers/Microsoft.Security/locations/westeurope/alerts"
        ).mock(return_value=json_page([]))

        async with security_client as client:
            await client.alerts.list_resource_group_level_alerts_by_region("rg1", asc_location="westeurope").to_list()

        assert route.called
        assert client.config.asc_location == "centralus"

    @pytest.mark.asyncio
    @respx.mock
    async def test_region_scoped_without_location_raises_before_request(self):
        client = SecurityCenterClient(SUB, access_token="test-token")

        with pytest.raises(ValueError):
            client.alerts.list_subscription_level_alerts_by_region()
        with pytest.raises(ValueError):
            await client.alerts.get_subscription_level_alert("a1")

        assert not respx.calls
        await client.close()

    def test_missing_subscription_raises(self):
        client = SecurityCenterClient(access_token="test-token", asc_location="centralus")
        with pytest.raises(ValueError):
            client.alerts.list()

    def test_empty_resource_group_rejected(self, security_client):
        with pytest.raises(ValueError):
            security_client.alerts.list_by_resource_group("")


# ============================================================================
# Alerts: get and state updates
# ============================================================================


class TestAlertsGetAndUpdate:
    """Tests for single-alert reads and state transitions."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_subscription_level_alert(self, security_client, mock_alert_data):
        name = mock_alert_data["name"]
        respx.get(f"{BASE_URL}{SUB_PATH}/providers/Microsoft.Security/locations/centralus/alerts/{name}").mock(
            return_value=httpx.Response(200, json=mock_alert_data)
        )

        async with security_client as client:
            alert = await client.alerts.get_subscription_level_alert(name)

        assert alert.id == mock_alert_data["id"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_resource_group_level_alerts(self, security_client, alert_factory):
        data = alert_factory(name="a1", resource_group="rg1", location="westeurope")
        respx.get(
            f"{BASE_URL}{SUB_PATH}/resourceGroups/rg1/providers/Microsoft.Security/locations/westeurope/alerts/a1"
        ).mock(return_value=httpx.Response(200, json=data))

        async with security_client as client:
            alert = await client.alerts.get_resource_group_level_alerts("a1", "rg1", asc_location="westeurope")

        assert alert.id == data["id"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_alert_name_is_quoted(self, security_client, mock_alert_data):
        route = respx.get(url__regex=r".*/alerts/a%2Fb\?").mock(return_value=httpx.Response(200, json=mock_alert_data))

        async with security_client as client:
            await client.alerts.get_subscription_level_alert("a/b")

        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_missing_alert(self, security_client):
        respx.get(f"{BASE_URL}{SUB_PATH}/providers/Microsoft.Security/locations/centralus/alerts/missing").mock(
            return_value=httpx.Response(
                404,
                json={"error": {"code": "AlertNotFound", "message": "Alert missing was not found"}},
                headers={"x-ms-request-id": "req-404"},
            )
        )

        async with security_client as client:
            with pytest.raises(NotFoundError) as exc_info:
                await client.alerts.get_subscription_level_alert("missing")

        assert exc_info.value.error_code == "AlertNotFound"
        assert exc_info.value.request_id == "req-404"

    @pytest.mark.asyncio
    @respx.mock
    @pytest.mark.parametrize("action", [AlertUpdateAction.dismiss, AlertUpdateAction.reactivate, "Dismiss"])
    async def test_update_subscription_level_alert_state(self, security_client, action):
        expected = action.value if isinstance(action, AlertUpdateAction) else action
        route = respx.post(
            f"{BASE_URL}{SUB_PATH}/providers/Microsoft.Security/locations/centralus/alerts/a1/{expected}"
        ).mock(return_value=httpx.Response(204))

        async with security_client as client:
            result = await client.alerts.update_subscription_level_alert_state("a1", action)

        assert result is None
        assert route.calls.last.request.url.params["api-version"] == API_VERSION
        assert route.calls.last.request.content == b""

    @pytest.mark.asyncio
    @respx.mock
    async def test_update_resource_group_level_alert_state(self, security_client):
        route = respx.post(
            f"{BASE_URL}{SUB_PATH}/resourceGroups/rg1/providers/Microsoft.Security/locations/westeurope/alerts/a1/Dismiss"
        ).mock(return_value=httpx.Response(204))

        async with security_client as client:
            await client.alerts.update_resource_group_level_alert_state(
                "a1", AlertUpdateAction.dismiss, "rg1", asc_location="westeurope"
            )

        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_update_forbidden(self, security_client):
        respx.post(url__regex=r".*/alerts/a1/Dismiss\?").mock(
            return_value=httpx.Response(
                403,
                json={"error": {"code": "AuthorizationFailed", "message": "No permission"}},
            )
        )

        async with security_client as client:
            with pytest.raises(AuthorizationError):
                await client.alerts.update_subscription_level_alert_state("a1", AlertUpdateAction.dismiss)


# ============================================================================
# Operations and Locations
# ============================================================================


class TestSecurityProvider:
    """Tests for provider operations and locations."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_operations_list_is_tenant_level(self, security_client):
        route = respx.get(f"{BASE_URL}/providers/Microsoft.Security/operations").mock(
            return_value=json_page(
                [{"name": "Microsoft.Security/alerts/read", "origin": "user", "display": {"resource": "Alerts"}}]
            )
        )

        async with security_client as client:
            operations = await client.operations.list().to_list()

        assert operations[0].name == "Microsoft.Security/alerts/read"
        assert route.calls.last.request.url.params["api-version"] == API_VERSION

    @pytest.mark.asyncio
    @respx.mock
    async def test_locations(self, security_client):
        location = {
            "id": f"{SUB_PATH}/providers/Microsoft.Security/locations/centralus",
            "name": "centralus",
            "type": "Microsoft.Security/locations",
            "properties": {"homeRegionName": "centralus"},
        }
        respx.get(f"{BASE_URL}{SUB_PATH}/providers/Microsoft.Security/locations").mock(
            return_value=json_page([location])
        )
        respx.get(f"{BASE_URL}{SUB_PATH}/providers/Microsoft.Security/locations/centralus").mock(
            return_value=httpx.Response(200, json=location)
        )

        async with security_client as client:
            locations = await client.locations.list().to_list()
            single = await client.locations.get()

        assert [item.name for item in locations] == ["centralus"]
        assert single.name == "centralus"
