"""
Dashboard view state and load logic

The view owns the selected station and the chart on display. Every load
fetches the whole dataset from the proxy endpoint, picks the selected
station's row and replaces the chart; a failed load or a missing station
leaves the chart as it was.
"""

from typing import Any, Awaitable, Callable, Dict, Sequence

from ..core import constants
from ..core.exceptions import InvalidStationError
from ..core.models import ChartSeries, RidershipDataset, UIState
from ..utils.logging import get_logger

logger = get_logger(__name__)

PayloadFetcher = Callable[[], Awaitable[Dict[str, Any]]]


class DashboardView:
    """Station selector, refresh control and chart state for one page"""

    def __init__(
        self,
        fetch_payload: PayloadFetcher,
        stations: Sequence[str] = constants.STATIONS,
        default_station: str = constants.DEFAULT_STATION,
    ):
        """
        Initialize dashboard view

        Args:
            fetch_payload: Coroutine function returning the proxy endpoint's JSON body
            stations: Station names offered by the selector
            default_station: Station selected when a page session starts
        """
        self._fetch_payload = fetch_payload
        self.stations = tuple(stations)
        self.default_station = default_station
        self.state = UIState(selected_station=default_station)

        self._latest_load = 0

    async def activate(self) -> UIState:
        """
        Start a page session: default selection, empty chart, initial load

        Called once per page load; state left by an earlier page is dropped.
        """
        self.state = UIState(selected_station=self.default_station)
        await self.load(self.state.selected_station)
        return self.state

    async def load(self, station: str) -> bool:
        """
        Fetch the dataset and show ``station``'s hourly counts

        Only the most recently issued load may update the chart; responses
        for earlier loads are dropped when they resolve.

        Args:
            station: Exact station name to look up

        Returns:
            bool: True if the chart was replaced
        """
        self._latest_load += 1
        ticket = self._latest_load

        try:
            payload = await self._fetch_payload()
            dataset = RidershipDataset.from_payload(payload)
        except Exception as e:
            logger.error(f"Error fetching or processing data: {e}")
            return False

        if ticket != self._latest_load:
            logger.debug(
                f"Discarding stale load #{ticket} for {station} "
                f"(latest is #{self._latest_load})"
            )
            return False

        row = dataset.find(station)
        if row is None:
            logger.error(f"No data found for the station: {station}")
            return False

        self.state.chart = ChartSeries.from_row(row)
        logger.debug(f"Chart updated for {station} (load #{ticket})")
        return True

    async def select_station(self, station: str) -> UIState:
        """
        Change the selected station and load it

        Raises:
            InvalidStationError: If ``station`` is not one of the selector's options
        """
        if station not in self.stations:
            raise InvalidStationError(
                f"Unknown station: {station}",
                details={"stations": ", ".join(self.stations)},
            )

        self.state.selected_station = station
        await self.load(station)
        return self.state

    async def refresh(self) -> UIState:
        """Reload the current selection"""
        await self.load(self.state.selected_station)
        return self.state

    def snapshot(self) -> Dict[str, Any]:
        """JSON-ready view state for the page"""
        return self.state.to_dict(self.stations)
