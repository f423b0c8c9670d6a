"""
Lazy pagination over ARM collections.

ARM list operations return ``{"value": [...], "nextLink": "..."}``. An
``AsyncPager`` walks those pages on demand: the next page is fetched only
once the current one has been drained, and only if a next link exists.
"""

from dataclasses import dataclass, field
from typing import AsyncIterator, Awaitable, Callable, Generic, List, Optional, TypeVar
import logging

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class Page(Generic[T]):
    """A single page of results and the continuation link."""

    items: List[T] = field(default_factory=list)
    next_link: Optional[str] = None

    @property
    def is_last(self) -> bool:
        return not self.next_link


# Called with None for the first page, then with each next link.
FetchPage = Callable[[Optional[str]], Awaitable[Page[T]]]


class AsyncPager(Generic[T]):
    """
    Forward-only async iterator over every item of a paged collection.

    Example usage:
        ```python
        async for alert in client.alerts.list():
            print(alert.name)

        pages = client.alerts.list().by_page()
        async for page in pages:
            print(len(page.items), page.next_link)
        ```

    The pager cannot be restarted: once exhausted it stays exhausted, and
    a failed page fetch propagates to the caller and ends iteration.
    """

    def __init__(self, fetch_page: FetchPage):
        self._fetch_page = fetch_page
        self._pages: Optional[AsyncIterator[Page[T]]] = None
        self._buffer: List[T] = []
        self._started = False
        self.pages_fetched = 0

    async def _iter_pages(self) -> AsyncIterator[Page[T]]:
        next_link: Optional[str] = None
        while True:
            page = await self._fetch_page(next_link)
            self.pages_fetched += 1
            logger.debug(f"Fetched page {self.pages_fetched} with {len(page.items)} items")
            yield page
            if page.is_last:
                break
            next_link = page.next_link

    def _page_iterator(self) -> AsyncIterator[Page[T]]:
        if self._pages is None:
            self._pages = self._iter_pages()
        return self._pages

    def by_page(self) -> AsyncIterator[Page[T]]:
        """
        Iterate over whole pages instead of items.

        Raises:
            RuntimeError: If item iteration has already started
        """
        if self._started:
            raise RuntimeError("Pager already iterated by item; by_page() must be used from the start")
        return self._page_iterator()

    def __aiter__(self) -> "AsyncPager[T]":
        return self

    async def __anext__(self) -> T:
        self._started = True
        pages = self._page_iterator()
        while not self._buffer:
            page = await pages.__anext__()
            self._buffer = list(page.items)
        return self._buffer.pop(0)

    async def to_list(self) -> List[T]:
        """Drain the remaining items into a list."""
        return [item async for item in self]

    async def first(self) -> Optional[T]:
        """Return the next item, or None if the collection is exhausted."""
        try:
            return await self.__anext__()
        except StopAsyncIteration:
            return None
