"""
Async HTTP client for Azure Resource Manager.

This module provides a thin async HTTP client built on httpx with:
- Bearer token authentication (static token or azure-identity style credential)
- Request/response logging
- ARM error body parsing into typed exceptions
- Pluggable transport (used by the record/replay harness)

Retries are left to the transport; a failed call is surfaced immediately.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union
import inspect
import logging

import httpx
from pydantic import BaseModel, ValidationError as PydanticValidationError

from azmgmt_types.base import AzureModel, CloudError
from azmgmt_client.exceptions import (
    ConnectionError as ClientConnectionError,
    NetworkError,
    RateLimitError,
    ServiceUnavailableError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://management.azure.com"
DEFAULT_SCOPE = "https://management.azure.com/.default"


class AuthProvider(ABC):
    """Abstract base class for authentication providers."""

    @abstractmethod
    async def get_access_token(self) -> Optional[str]:
        """Get the current access token."""
        ...

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check if a token source is configured."""
        ...


class TokenAuthProvider(AuthProvider):
    """Static bearer token provider."""

    def __init__(self, access_token: Optional[str] = None):
        self._access_token = access_token

    async def get_access_token(self) -> Optional[str]:
        return self._access_token

    def is_authenticated(self) -> bool:
        return self._access_token is not None


class CredentialAuthProvider(AuthProvider):
    """
    Adapter for azure-identity style credentials.

    Any object exposing ``get_token(*scopes)`` returning an object with a
    ``token`` attribute works; both sync and async credentials are accepted.
    """

    def __init__(self, credential: Any, scope: str = DEFAULT_SCOPE):
        self._credential = credential
        self._scope = scope

    async def get_access_token(self) -> Optional[str]:
        access_token = self._credential.get_token(self._scope)
        if inspect.isawaitable(access_token):
            access_token = await access_token
        return access_token.token

    def is_authenticated(self) -> bool:
        return self._credential is not None


class AsyncHTTPClient:
    """
    Async HTTP client for ARM requests.

    This client handles:
    - Base URL management
    - Authentication header injection
    - Response parsing and error handling
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        auth_provider: Optional[AuthProvider] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            base_url: ARM endpoint (e.g., "https://management.azure.com")
            auth_provider: Authentication provider for token management
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            transport: Custom httpx transport (e.g., a RecordedTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.auth_provider = auth_provider or TokenAuthProvider()
        self.timeout = timeout
        self._default_headers = headers or {}
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Build request headers."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            **self._default_headers,
        }
        if extra_headers:
            headers.update(extra_headers)
        return headers

    async def _add_auth_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Add authentication header if available."""
        if self.auth_provider and self.auth_provider.is_authenticated():
            token = await self.auth_provider.get_access_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Convert HTTP error responses to appropriate exceptions."""
        status_code = response.status_code
        details: Dict[str, Any] = {}

        request_id = response.headers.get("x-ms-request-id")
        if request_id:
            details["request_id"] = request_id

        # ARM wraps errors as {"error": {"code": ..., "message": ...}}
        error_code = None
        try:
            error = CloudError.deserialize(response.json()).error
        except (ValueError, TypeError, PydanticValidationError):
            error = None
        if error is not None and (error.code or error.message):
            message = error.message or error.code
            error_code = error.code
            if error.target:
                details["target"] = error.target
            if error.details:
                details["errors"] = [item.serialize() for item in error.details]
        else:
            message = response.text or f"HTTP {status_code}"

        logger.debug(f"Request failed with HTTP {status_code}: {message}")

        if status_code in (429, 503):
            retry_after = response.headers.get("Retry-After")
            error_class = RateLimitError if status_code == 429 else ServiceUnavailableError
            raise error_class(
                message,
                status_code=status_code,
                error_code=error_code,
                details=details,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        raise exception_from_response(status_code, message, error_code=error_code, details=details)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Make an HTTP request.

        Args:
            method: HTTP method (GET or POST)
            path: Request path relative to base_url, or an absolute URL
                  (next-page links are absolute)
            params: Query parameters
            json_data: JSON body data (can be dict or model)
            headers: Additional headers

        Returns:
            httpx.Response object

        Raises:
            AzureMgmtError: On HTTP errors
            ConnectionError: On connection failures
            TimeoutError: On request timeout
            NetworkError: On other transport failures
        """
        client = await self._get_client()

        request_headers = self._build_headers(headers)
        request_headers = await self._add_auth_header(request_headers)

        if json_data is not None and isinstance(json_data, AzureModel):
            json_data = json_data.serialize()
        elif json_data is not None and isinstance(json_data, BaseModel):
            json_data = json_data.model_dump(mode="json", by_alias=True, exclude_none=True)

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        logger.debug(f"{method} {path}")
        try:
            response = await client.request(
                method=method,
                url=path,
                params=params,
                json=json_data,
                headers=request_headers,
            )
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Request timed out: {e}")
        except httpx.ConnectError as e:
            raise ClientConnectionError(f"Connection failed: {e}")
        except httpx.TransportError as e:
            raise NetworkError(f"Request failed: {e}")

        if response.is_success:
            return response

        self._handle_error_response(response)

    async def get(
        self,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Make a GET request."""
        return await self._request("GET", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        *,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Make a POST request."""
        return await self._request("POST", path, json_data=json_data, params=params, headers=headers)
