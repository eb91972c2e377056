"""
Client the dashboard view uses to call the proxy endpoint
"""

from typing import Any, Dict

import aiohttp

from ..utils.logging import get_logger

logger = get_logger(__name__)


class EndpointClient:
    """Calls ``GET /api/fetchData`` and returns the parsed JSON body"""

    def __init__(self, url: str):
        self.url = url

    async def fetch_payload(self) -> Dict[str, Any]:
        """
        Fetch the converted dataset from the proxy endpoint

        The body is returned whatever the status: a failed proxy call
        answers ``{"error": ...}``, which the caller treats as missing data.
        """
        async with aiohttp.ClientSession() as session:
            async with session.get(self.url) as response:
                logger.debug(f"{self.url} answered HTTP {response.status}")
                return await response.json(content_type=None)
