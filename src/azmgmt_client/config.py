"""
Client configuration.

Configuration is immutable once a client is built. Per-call values (such as
the Security Center location) are passed explicitly to each method and only
fall back to the configured defaults.
"""

from typing import Dict, Mapping, Optional
import os

from pydantic import BaseModel, ConfigDict, Field

from azmgmt_client.http import DEFAULT_BASE_URL

ENV_SUBSCRIPTION_ID = "AZURE_SUBSCRIPTION_ID"
ENV_ASC_LOCATION = "AZURE_ASC_LOCATION"
ENV_MANAGEMENT_ENDPOINT = "AZURE_MANAGEMENT_ENDPOINT"
ENV_ACCESS_TOKEN = "AZURE_ACCESS_TOKEN"


class ClientConfig(BaseModel):
    subscription_id: Optional[str] = Field(None, description="Subscription all calls are scoped to")
    asc_location: Optional[str] = Field(None, description="Default Security Center location for region-scoped calls")
    base_url: str = Field(DEFAULT_BASE_URL, description="ARM endpoint")
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra headers sent with every request")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Keyword overrides that are not None take precedence over the environment.
        """
        environ = os.environ if environ is None else environ
        values = {
            "subscription_id": environ.get(ENV_SUBSCRIPTION_ID),
            "asc_location": environ.get(ENV_ASC_LOCATION),
        }
        if environ.get(ENV_MANAGEMENT_ENDPOINT):
            values["base_url"] = environ[ENV_MANAGEMENT_ENDPOINT]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def require_subscription(self) -> str:
        if not self.subscription_id:
            raise ValueError(
                f"No subscription configured; pass subscription_id or set {ENV_SUBSCRIPTION_ID}"
            )
        return self.subscription_id

    def resolve_location(self, asc_location: Optional[str] = None) -> str:
        """Return the explicit location, or the configured default."""
        location = asc_location or self.asc_location
        if not location:
            raise ValueError(
                f"No Security Center location given; pass asc_location or set {ENV_ASC_LOCATION}"
            )
        return location
