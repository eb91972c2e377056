"""
Data Access API for Seoul subway ridership

Runs the same fetch-convert-project pipeline as the dashboard, without the
HTTP layer, for scripts and notebooks.

Example:
    >>> from seoul_ridership import RidershipData
    >>> data = RidershipData()
    >>> dataset = data.load()
    >>> print(dataset.stations)
    >>>
    >>> row = data.get_station("서울역")
    >>> print(row.ride_on[8])
    >>>
    >>> chart = data.get_chart("시청")
    >>> print(chart.to_chartjs()["labels"])
"""

import asyncio
from typing import Optional

from .core.converter import xml_to_object
from .core.models import ChartSeries, RidershipDataset, RidershipRow
from .infrastructure.remote_source import RemoteRidershipSource
from .utils.logging import get_logger

logger = get_logger(__name__)


class RidershipData:
    """
    High-level access to the ridership dataset.

    Each ``fetch``/``load`` call queries the remote source again; the most
    recent result is kept on ``dataset`` for the lookup helpers.

    Args:
        source: Remote source to query (default: the fixed Seoul open-data query)
    """

    def __init__(self, source: Optional[RemoteRidershipSource] = None):
        self.source = source or RemoteRidershipSource()
        self.dataset: Optional[RidershipDataset] = None

    async def fetch(self) -> RidershipDataset:
        """
        Fetch, convert and parse the remote dataset

        Raises:
            UpstreamFetchError: If the remote source fails
            ConversionError: If the body is not well-formed XML
            DatasetShapeError: If the document has no ridership rows element
        """
        xml_text = await self.source.fetch_xml()
        self.dataset = RidershipDataset.from_converted(xml_to_object(xml_text))
        logger.info(
            f"Loaded {len(self.dataset.rows)} ridership rows "
            f"(total available: {self.dataset.total_count})"
        )
        return self.dataset

    def load(self) -> RidershipDataset:
        """Synchronous ``fetch`` for code without a running event loop"""
        return asyncio.run(self.fetch())

    def _current(self) -> RidershipDataset:
        if self.dataset is None:
            return self.load()
        return self.dataset

    def get_station(self, station: str) -> RidershipRow:
        """
        Row for ``station``, loading the dataset first if needed

        Raises:
            StationNotFoundError: If no row matches exactly
        """
        return self._current().get(station)

    def get_chart(self, station: str) -> ChartSeries:
        """Chart series for ``station``"""
        return ChartSeries.from_row(self.get_station(station))
