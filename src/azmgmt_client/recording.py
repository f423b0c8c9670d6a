"""
Record/replay of HTTP sessions for deterministic tests.

``RecordedTransport`` is an httpx transport. In playback mode it answers
requests from a JSON recording; in record mode it forwards them to the
real service and writes the exchange to the recording when closed.

The mode defaults to the ``AZURE_TEST_MODE`` environment variable
("Playback" or "Record"), falling back to playback.

Recording layout::

    {
      "Entries": [
        {
          "RequestUri": "/subscriptions/.../alerts?api-version=...",
          "RequestMethod": "GET",
          "RequestBody": "",
          "ResponseStatusCode": 200,
          "ResponseHeaders": {"x-ms-request-id": "..."},
          "ResponseBody": {"value": [...]}
        }
      ],
      "Variables": {"SubscriptionId": "00000000-0000-0000-0000-000000000000"}
    }
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlencode
import json
import logging
import os

import httpx

logger = logging.getLogger(__name__)

ENV_TEST_MODE = "AZURE_TEST_MODE"

# Body-framing headers are dropped: recorded bodies are stored decoded.
_DROPPED_HEADERS = {"content-encoding", "content-length", "transfer-encoding", "connection"}


class RecordMode(str, Enum):
    playback = "Playback"
    record = "Record"


class RecordingMismatchError(Exception):
    """A request in playback mode has no matching recorded entry."""


def request_key(method: str, url: Union[str, httpx.URL]) -> str:
    """Match key: method, path and query parameters in sorted order."""
    url = httpx.URL(url)
    key = f"{method.upper()} {url.path}"
    params = sorted(url.params.multi_items())
    if params:
        key += "?" + urlencode(params)
    return key


class RecordedTransport(httpx.AsyncBaseTransport):
    """
    An httpx transport that records or replays HTTP interactions.

    Playback consumes entries in recorded order: the first unused entry with
    the same method, path and query answers the request.
    """

    def __init__(
        self,
        path: Union[str, Path],
        mode: Optional[Union[RecordMode, str]] = None,
        replacements: Optional[Dict[str, str]] = None,
        variables: Optional[Dict[str, str]] = None,
        inner: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            path: Recording file
            mode: Playback or Record; defaults to $AZURE_TEST_MODE
            replacements: Strings substituted when a recording is written
                          (e.g., the real subscription id by a placeholder)
            variables: Values stored with a new recording
            inner: Transport used in record mode
        """
        self.path = Path(path)
        self.mode = RecordMode(mode or os.environ.get(ENV_TEST_MODE, RecordMode.playback.value))
        self.replacements = replacements or {}
        self.variables: Dict[str, str] = dict(variables or {})
        self.entries: List[Dict[str, Any]] = []
        self.request_count = 0
        self._inner = inner

        if self.mode == RecordMode.playback:
            self._load()
        elif self._inner is None:
            self._inner = httpx.AsyncHTTPTransport()

    @property
    def is_recording(self) -> bool:
        return self.mode == RecordMode.record

    @property
    def pending(self) -> List[Dict[str, Any]]:
        """Recorded entries not yet replayed."""
        return list(self.entries) if self.mode == RecordMode.playback else []

    def _load(self) -> None:
        if not self.path.exists():
            raise FileNotFoundError(
                f"No recording at {self.path}; run with {ENV_TEST_MODE}=Record to create it"
            )
        with open(self.path, "r", encoding="utf-8") as file:
            data = json.load(file)
        self.entries = list(data.get("Entries", []))
        self.variables.update(data.get("Variables", {}))
        logger.debug(f"Loaded {len(self.entries)} recorded entries from {self.path}")

    def save(self) -> None:
        """Write the recording, applying replacements."""
        text = json.dumps({"Entries": self.entries, "Variables": self.variables}, indent=2)
        for old, new in self.replacements.items():
            text = text.replace(old, new)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as file:
            file.write(text + "\n")
        logger.info(f"Wrote {len(self.entries)} entries to {self.path}")

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.request_count += 1
        if self.mode == RecordMode.playback:
            return self._replay(request)
        return await self._record(request)

    def _replay(self, request: httpx.Request) -> httpx.Response:
        key = request_key(request.method, request.url.raw_path.decode("ascii"))
        for index, entry in enumerate(self.entries):
            if request_key(entry["RequestMethod"], entry["RequestUri"]) == key:
                self.entries.pop(index)
                break
        else:
            raise RecordingMismatchError(f"No recorded response for {key} in {self.path}")

        body = entry.get("ResponseBody")
        if body is None or body == "":
            content = b""
        elif isinstance(body, str):
            content = body.encode("utf-8")
        else:
            content = json.dumps(body).encode("utf-8")
        return httpx.Response(
            entry["ResponseStatusCode"],
            headers=entry.get("ResponseHeaders") or {},
            content=content,
            request=request,
        )

    async def _record(self, request: httpx.Request) -> httpx.Response:
        response = await self._inner.handle_async_request(request)
        try:
            content = await response.aread()
        finally:
            await response.aclose()

        headers = {k: v for k, v in response.headers.items() if k.lower() not in _DROPPED_HEADERS}
        text = content.decode("utf-8", errors="replace")
        try:
            body: Any = json.loads(text) if text else ""
        except ValueError:
            body = text

        self.entries.append(
            {
                "RequestUri": request.url.raw_path.decode("ascii"),
                "RequestMethod": request.method,
                "RequestBody": request.content.decode("utf-8") if request.content else "",
                "ResponseStatusCode": response.status_code,
                "ResponseHeaders": headers,
                "ResponseBody": body,
            }
        )
        return httpx.Response(response.status_code, headers=headers, content=content, request=request)

    async def aclose(self) -> None:
        if self.mode == RecordMode.record:
            self.save()
            await self._inner.aclose()
