"""Pytest configuration and fixtures for azmgmt tests."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import pytest

from azmgmt_client import SecurityCenterClient
from azmgmt_client.config import ENV_ACCESS_TOKEN, ENV_SUBSCRIPTION_ID
from azmgmt_client.recording import ENV_TEST_MODE, RecordedTransport, RecordMode

RECORDINGS_DIR = Path(__file__).parent / "recordings"

PLACEHOLDER_SUBSCRIPTION = "00000000-0000-0000-0000-000000000000"
ASC_LOCATION = "centralus"
BASE_URL = "https://management.azure.com"


# ============================================================================
# Sample Payloads
# ============================================================================


def alert_payload(
    name: str = "2518770965529163669_F144EE95-A3E5-42DA-A279-967D115809AA",
    resource_group: Optional[str] = None,
    location: str = ASC_LOCATION,
    state: str = "Active",
) -> Dict[str, Any]:
    """Build an alert as returned by the service."""
    scope = f"/subscriptions/{PLACEHOLDER_SUBSCRIPTION}"
    if resource_group:
        scope += f"/resourceGroups/{resource_group}"
    return {
        "id": f"{scope}/providers/Microsoft.Security/locations/{location}/alerts/{name}",
        "name": name,
        "type": "Microsoft.Security/Locations/alerts",
        "properties": {
            "state": state,
            "reportedTimeUtc": "2018-06-12T08:41:27.1375316Z",
            "vendorName": "Microsoft",
            "alertName": "SuspiciousAuthenticationActivity",
            "alertDisplayName": "Suspicious authentication activity",
            "reportedSeverity": "Medium",
            "compromisedEntity": "vm1",
            "extendedProperties": {"resourceType": "Virtual Machine"},
            "entities": [{"type": "ip", "address": "192.0.2.10"}],
            "confidenceScore": 0.8,
            "subscriptionId": PLACEHOLDER_SUBSCRIPTION,
        },
    }


def vault_payload(name: str = "kv-sample", resource_group: str = "rg1") -> Dict[str, Any]:
    return {
        "id": (
            f"/subscriptions/{PLACEHOLDER_SUBSCRIPTION}/resourceGroups/{resource_group}"
            f"/providers/Microsoft.KeyVault/vaults/{name}"
        ),
        "name": name,
        "type": "Microsoft.KeyVault/vaults",
        "location": "westus",
        "tags": {"env": "test"},
        "properties": {
            "tenantId": "11111111-1111-1111-1111-111111111111",
            "sku": {"family": "A", "name": "standard"},
            "accessPolicies": [],
            "vaultUri": f"https://{name}.vault.azure.net/",
            "enabledForDeployment": False,
            "enableSoftDelete": True,
        },
    }


@pytest.fixture
def mock_alert_data():
    """A subscription-level alert."""
    return alert_payload()


@pytest.fixture
def alert_factory():
    """Factory for alert payloads with a custom scope or state."""
    return alert_payload


@pytest.fixture
def mock_vault_data():
    """A Key Vault resource."""
    return vault_payload()


# ============================================================================
# Clients
# ============================================================================


@pytest.fixture
def security_client():
    """SecurityCenterClient against the default endpoint; pair with respx."""
    return SecurityCenterClient(
        PLACEHOLDER_SUBSCRIPTION,
        access_token="test-token",
        asc_location=ASC_LOCATION,
    )


# ============================================================================
# Record/Replay
# ============================================================================


def _recording_mode() -> RecordMode:
    return RecordMode(os.environ.get(ENV_TEST_MODE, RecordMode.playback.value))


@pytest.fixture
def recorded_transport(request):
    """
    Transport bound to tests/recordings/<TestClass>/<test_name>.json.

    In record mode the real subscription id is replaced by the placeholder
    before the recording is written.
    """
    owner = request.cls.__name__ if request.cls else request.path.stem
    path = RECORDINGS_DIR / owner / f"{request.node.name}.json"

    replacements = {}
    if _recording_mode() == RecordMode.record:
        replacements[os.environ[ENV_SUBSCRIPTION_ID]] = PLACEHOLDER_SUBSCRIPTION

    return RecordedTransport(
        path,
        replacements=replacements,
        variables={"SubscriptionId": PLACEHOLDER_SUBSCRIPTION},
    )


@pytest.fixture
def recorded_security_client(recorded_transport):
    """
    SecurityCenterClient wired to the recording.

    Record mode needs AZURE_SUBSCRIPTION_ID and AZURE_ACCESS_TOKEN; playback
    runs offline with placeholder values.
    """
    if recorded_transport.is_recording:
        subscription_id = os.environ[ENV_SUBSCRIPTION_ID]
        access_token = os.environ[ENV_ACCESS_TOKEN]
    else:
        subscription_id = PLACEHOLDER_SUBSCRIPTION
        access_token = "playback-token"

    return SecurityCenterClient(
        subscription_id,
        access_token=access_token,
        asc_location=ASC_LOCATION,
        transport=recorded_transport,
    )
