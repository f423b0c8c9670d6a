"""
Microsoft.RecoveryServices backup payload models.
"""

from typing import Optional

from pydantic import Field

from azmgmt_types.base import AzureModel


class TokenInformation(AzureModel):
    """The token information details."""

    token: Optional[str] = Field(None, description="Token value")
    expiry_time_in_utc_ticks: Optional[int] = Field(None, description="Expiry time of token")
    security_pin: Optional[str] = Field(None, alias="securityPIN", description="Security PIN")
