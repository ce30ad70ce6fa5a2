import httpx
import logging
from typing import Optional

from ..config.settings import settings
from ..exceptions import UpstreamConnectionError, UpstreamStatusError

logger = logging.getLogger(__name__)

class UpstreamHTTPClient:
    def __init__(self, timeout: float = settings.UPSTREAM_TIMEOUT, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, url: str) -> str:
        """
        Fetch ``url`` once and return the response body as text.

        The client is scoped to this call so the connection is released whatever
        the outcome. No retries are attempted.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
                follow_redirects=True,
            ) as client:
                resp = await client.get(url)
        except httpx.TransportError as e:
            logger.error(f"Error connecting to {url}: {e}")
            raise UpstreamConnectionError(cause=e) from e

        if resp.status_code != 200:
            logger.error(f"status code error: {resp.status_code} {resp.reason_phrase}")
            raise UpstreamStatusError(status_code=resp.status_code)

        return resp.text

# Create a single instance to be used by the application
upstream_http_client = UpstreamHTTPClient()
