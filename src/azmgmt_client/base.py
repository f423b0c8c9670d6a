"""
Base class for operation group clients.

An operation group is the set of REST methods scoped to one resource type
(e.g., Security Center alerts). Subclasses declare the service api-version
and implement one method per endpoint using the helpers below.
"""

from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import quote
import logging

from azmgmt_types.base import AzureModel, ResourceList

from azmgmt_client.config import ClientConfig
from azmgmt_client.http import AsyncHTTPClient
from azmgmt_client.paging import AsyncPager, Page

logger = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=AzureModel)


class OperationGroup:
    """
    Base class for all operation group clients.

    Provides path building, api-version handling, typed GETs, paged
    listing and body-less action POSTs.
    """

    api_version: str = ""

    def __init__(
        self,
        http_client: AsyncHTTPClient,
        config: ClientConfig,
    ):
        """
        Initialize the operation group.

        Args:
            http_client: The underlying HTTP client
            config: Immutable client configuration
        """
        self._http = http_client
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    @staticmethod
    def _segment(value: str) -> str:
        """Quote a caller-supplied path segment."""
        if not value:
            raise ValueError("Path segment must not be empty")
        return quote(str(value), safe="")

    def _subscription_path(self, resource_group_name: Optional[str] = None) -> str:
        """Build "/subscriptions/{sub}[/resourceGroups/{rg}]"."""
        path = f"/subscriptions/{self._segment(self._config.require_subscription())}"
        if resource_group_name is not None:
            path += f"/resourceGroups/{self._segment(resource_group_name)}"
        return path

    def _params(self, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Query parameters with the api-version applied."""
        merged = {"api-version": self.api_version}
        if params:
            merged.update({k: v for k, v in params.items() if v is not None})
        return merged

    async def _get_model(
        self,
        path: str,
        model: Type[TModel],
        params: Optional[Dict[str, Any]] = None,
    ) -> TModel:
        """GET a single resource and deserialize it."""
        response = await self._http.get(path, params=self._params(params))
        return model.deserialize(response.json())

    async def _post_model(
        self,
        path: str,
        model: Type[TModel],
        body: Optional[AzureModel] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> TModel:
        """POST and deserialize the response body."""
        response = await self._http.post(path, json_data=body, params=self._params(params))
        return model.deserialize(response.json())

    async def _post_action(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> None:
        """POST an action that answers with no body (200/202/204)."""
        await self._http.post(path, params=self._params(params))

    def _list(
        self,
        path: str,
        list_model: Type[ResourceList],
        params: Optional[Dict[str, Any]] = None,
    ) -> AsyncPager:
        """
        Lazily list a collection.

        The first request goes to ``path`` with the api-version; following
        requests go to the server-supplied next link unchanged.
        """
        query = self._params(params)

        async def fetch_page(next_link: Optional[str]) -> Page:
            if next_link:
                response = await self._http.get(next_link)
            else:
                response = await self._http.get(path, params=query)
            result = list_model.deserialize(response.json())
            return Page(items=list(result.value), next_link=result.next_link)

        return AsyncPager(fetch_page)
