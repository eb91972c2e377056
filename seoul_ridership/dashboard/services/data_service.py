"""
Fetch-and-convert pipeline and page template loading

Routes stay thin: they call into this service and only decide how results
and failures map onto HTTP responses.
"""

from pathlib import Path
from typing import Any, Dict

from ...core.converter import xml_to_object
from ...infrastructure.remote_source import RemoteRidershipSource
from ...utils.logging import get_logger

logger = get_logger(__name__)

TEMPLATE_PATH = Path(__file__).parent.parent / "templates" / "dashboard.html"


class DataService:
    """Service wrapping the remote source and the XML conversion"""

    def __init__(self, source: RemoteRidershipSource):
        """
        Initialize data service

        Args:
            source: Remote ridership source to fetch XML from
        """
        self.source = source

    async def fetch_converted(self) -> Dict[str, Any]:
        """
        Fetch the remote XML and convert it to a JSON-compatible object

        Raises:
            UpstreamFetchError: If the remote source fails
            ConversionError: If the body is not well-formed XML
        """
        xml_text = await self.source.fetch_xml()
        logger.debug(f"Converting {len(xml_text)} characters of XML")
        return xml_to_object(xml_text)

    def get_dashboard_html(self) -> str:
        """
        Get dashboard HTML content from template

        Returns:
            str: HTML content for the dashboard
        """
        try:
            return TEMPLATE_PATH.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.error(f"Dashboard template missing: {TEMPLATE_PATH}")
            return """
                <!DOCTYPE html>
                <html>
                <head><title>Dashboard Not Found</title></head>
                <body>
                    <h1>Dashboard Template Not Found</h1>
                    <p>Expected location: {}</p>
                </body>
                </html>
                """.format(
                TEMPLATE_PATH
            )
