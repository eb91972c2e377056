"""
Client for the Seoul open-data ridership XML service
"""

import aiohttp

from ..core.constants import REMOTE_API_URL
from ..core.exceptions import UpstreamFetchError, wrap_exception
from ..utils.logging import get_logger

logger = get_logger(__name__)


class RemoteRidershipSource:
    """Fetches the fixed ridership query as raw XML text"""

    def __init__(self, url: str = REMOTE_API_URL):
        """
        Initialize remote source

        Args:
            url: Full query URL; year-month and row range are part of it
        """
        self.url = url

    async def fetch_xml(self) -> str:
        """
        Issue one GET to the remote service and return the body as text

        Returns:
            str: Response body

        Raises:
            UpstreamFetchError: On connection failure or a non-2xx status
        """
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self.url) as response:
                    if response.status < 200 or response.status >= 300:
                        raise UpstreamFetchError(
                            f"Remote source answered HTTP {response.status}",
                            details={"url": self.url, "status": response.status},
                        )
                    text = await response.text()
        except aiohttp.ClientError as e:
            raise wrap_exception(
                e,
                UpstreamFetchError,
                "Remote source unreachable",
                details={"url": self.url},
            ) from e

        logger.debug(f"Fetched {len(text)} characters from {self.url}")
        return text
