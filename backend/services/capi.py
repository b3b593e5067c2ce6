"""Guardian Content API (CAPI) client for most-viewed lists.

The client is thin: one GET per call, no retries. Every failure is raised
as an ``UpstreamError`` subclass so the cause stays visible in logs.
"""

import logging

import httpx
from pydantic import ValidationError

from errors import (
    UpstreamDecodeError,
    UpstreamReadError,
    UpstreamRequestError,
    UpstreamStatusError,
)
from models import CapiResponse

logger = logging.getLogger(__name__)


class CapiClient:
    def __init__(self, http_client: httpx.AsyncClient, base_url: str, api_key: str):
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key

    def url_for(self, path: str) -> str:
        return f"{self._base_url}/{path}"

    async def most_viewed(self, path: str) -> CapiResponse:
        """Fetch the most-viewed list for ``path`` (usually an edition code).

        Raises:
            UpstreamRequestError: the request never got a response.
            UpstreamStatusError: CAPI answered with a non-2xx status.
            UpstreamReadError: the body could not be read.
            UpstreamDecodeError: the body is not the expected JSON shape.
        """
        params = {"show-most-viewed": "true", "api-key": self._api_key}
        logger.info("CAPI GET %s", self.url_for(path))

        try:
            async with self._http.stream("GET", self.url_for(path), params=params) as resp:
                if resp.is_error:
                    raise UpstreamStatusError(f"GET failed: CAPI returned HTTP {resp.status_code}")
                try:
                    body = await resp.aread()
                except httpx.HTTPError as e:
                    raise UpstreamReadError(f"Unable to read response body: {e}") from e
        except httpx.HTTPError as e:
            raise UpstreamRequestError(f"GET failed: {e}") from e

        try:
            return CapiResponse.model_validate_json(body)
        except ValidationError as e:
            raise UpstreamDecodeError(f"Unable to unmarshal response body: {e}") from e
