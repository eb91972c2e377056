"""
Ridership data model and chart projection

The remote payload names its 48 hourly counters by interpolating the hour
into ``HR_{h}_GET_ON_NOPE`` / ``HR_{h}_GET_OFF_NOPE``. That naming is read in
exactly one place, ``RidershipRow.from_record``; everything downstream works
with the typed ``HourlyCount`` list.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from . import constants
from .exceptions import DatasetShapeError, StationNotFoundError


# =============================================================================
# Helper Functions
# =============================================================================


def _parse_count(value: Any) -> int:
    """Parse a numeric-string counter, treating missing or bad values as 0"""
    if value is None or value == "":
        return 0
    try:
        count = int(value)
    except (TypeError, ValueError):
        try:
            count = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return 0
    return max(0, count)


def _as_list(value: Any) -> List[Any]:
    """A single converted element comes back as a dict, several as a list"""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


# =============================================================================
# Ridership Records
# =============================================================================


class HourlyCount(BaseModel):
    """Boarding and alighting counts for one hour of the day"""

    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, lt=constants.HOURS_PER_DAY)
    ride_on: int = Field(default=0, ge=0)
    ride_off: int = Field(default=0, ge=0)


class RidershipRow(BaseModel):
    """One station's monthly hourly boarding/alighting counts"""

    station: str
    line: Optional[str] = None
    month: Optional[str] = None
    job_date: Optional[str] = None
    hours: List[HourlyCount]

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "RidershipRow":
        """
        Build a row from one converted ``<row>`` element

        Args:
            record: Converted row mapping of field name to string value

        Returns:
            RidershipRow with exactly 24 hourly records in hour order
        """
        hours = [
            HourlyCount(
                hour=hour,
                ride_on=_parse_count(
                    record.get(constants.RIDE_ON_FIELD_TEMPLATE.format(hour=hour))
                ),
                ride_off=_parse_count(
                    record.get(constants.RIDE_OFF_FIELD_TEMPLATE.format(hour=hour))
                ),
            )
            for hour in range(constants.HOURS_PER_DAY)
        ]

        return cls(
            station=str(record.get(constants.STATION_FIELD, "")),
            line=record.get(constants.LINE_FIELD) or None,
            month=record.get(constants.MONTH_FIELD) or None,
            job_date=record.get(constants.JOB_DATE_FIELD) or None,
            hours=hours,
        )

    @property
    def ride_on(self) -> List[int]:
        return [h.ride_on for h in self.hours]

    @property
    def ride_off(self) -> List[int]:
        return [h.ride_off for h in self.hours]


class RidershipDataset(BaseModel):
    """All rows returned by one query, in source order"""

    rows: List[RidershipRow] = Field(default_factory=list)
    total_count: Optional[int] = None
    result_code: Optional[str] = None
    result_message: Optional[str] = None

    @classmethod
    def from_converted(cls, converted: Dict[str, Any]) -> "RidershipDataset":
        """
        Read a dataset from the converted XML document

        Args:
            converted: Output of ``xml_to_object`` for the remote payload

        Raises:
            DatasetShapeError: If the service root element is missing
        """
        if not isinstance(converted, dict):
            raise DatasetShapeError(
                "Converted payload is not an object",
                details={"type": type(converted).__name__},
            )

        root = converted.get(constants.SERVICE_NAME)
        if not isinstance(root, dict):
            raise DatasetShapeError(
                f"Payload has no {constants.SERVICE_NAME} element",
                details={"keys": list(converted.keys())},
            )

        records = _as_list(root.get(constants.ROW_ELEMENT))
        rows = [RidershipRow.from_record(r) for r in records if isinstance(r, dict)]

        result = root.get(constants.RESULT_FIELD)
        result = result if isinstance(result, dict) else {}
        total = root.get(constants.TOTAL_COUNT_FIELD)

        return cls(
            rows=rows,
            total_count=_parse_count(total) if total else None,
            result_code=result.get("CODE"),
            result_message=result.get("MESSAGE"),
        )

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "RidershipDataset":
        """
        Read a dataset from the ``/api/fetchData`` response body

        Args:
            payload: Parsed JSON body, ``{"data": <converted XML>}``

        Raises:
            DatasetShapeError: If the body carries no converted document
        """
        if not isinstance(payload, dict):
            raise DatasetShapeError(
                "Response body is not an object",
                details={"type": type(payload).__name__},
            )
        if "data" not in payload:
            raise DatasetShapeError(
                "Response body has no data field",
                details={"error": payload.get("error")},
            )
        return cls.from_converted(payload["data"])

    def find(self, station: str) -> Optional[RidershipRow]:
        """Return the first row whose station name equals ``station`` exactly"""
        for row in self.rows:
            if row.station == station:
                return row
        return None

    def get(self, station: str) -> RidershipRow:
        """Like ``find`` but raises StationNotFoundError on a miss"""
        row = self.find(station)
        if row is None:
            raise StationNotFoundError(
                f"No data found for the station: {station}",
                details={"rows": len(self.rows)},
            )
        return row

    @property
    def stations(self) -> List[str]:
        return [row.station for row in self.rows]


# =============================================================================
# Chart Projection
# =============================================================================


class SeriesStyle(BaseModel):
    """Immutable presentation attributes of one chart line"""

    model_config = ConfigDict(frozen=True)

    label: str
    border_color: str
    background_color: str
    fill: bool = False


RIDE_ON_STYLE = SeriesStyle(
    label=constants.RIDE_ON_LABEL,
    border_color=constants.RIDE_ON_BORDER_COLOR,
    background_color=constants.RIDE_ON_BACKGROUND_COLOR,
)

RIDE_OFF_STYLE = SeriesStyle(
    label=constants.RIDE_OFF_LABEL,
    border_color=constants.RIDE_OFF_BORDER_COLOR,
    background_color=constants.RIDE_OFF_BACKGROUND_COLOR,
)


class ChartDataset(BaseModel):
    """One styled line of the chart"""

    model_config = ConfigDict(frozen=True)

    style: SeriesStyle
    data: List[int]

    def to_chartjs(self) -> Dict[str, Any]:
        return {
            "label": self.style.label,
            "data": list(self.data),
            "borderColor": self.style.border_color,
            "backgroundColor": self.style.background_color,
            "fill": self.style.fill,
        }


class ChartSeries(BaseModel):
    """Hour labels plus ride-on and ride-off lines for one station"""

    model_config = ConfigDict(frozen=True)

    labels: List[str]
    ride_on: ChartDataset
    ride_off: ChartDataset

    @classmethod
    def empty(cls) -> "ChartSeries":
        """Chart shown before the first successful load"""
        return cls(
            labels=[],
            ride_on=ChartDataset(style=RIDE_ON_STYLE, data=[]),
            ride_off=ChartDataset(style=RIDE_OFF_STYLE, data=[]),
        )

    @classmethod
    def from_row(cls, row: RidershipRow) -> "ChartSeries":
        """Project a row onto 24 hourly points per line"""
        return cls(
            labels=[
                constants.HOUR_LABEL_TEMPLATE.format(hour=h.hour) for h in row.hours
            ],
            ride_on=ChartDataset(style=RIDE_ON_STYLE, data=row.ride_on),
            ride_off=ChartDataset(style=RIDE_OFF_STYLE, data=row.ride_off),
        )

    def to_chartjs(self) -> Dict[str, Any]:
        """Chart.js ``data`` object"""
        return {
            "labels": list(self.labels),
            "datasets": [self.ride_on.to_chartjs(), self.ride_off.to_chartjs()],
        }


# =============================================================================
# View State
# =============================================================================


@dataclass
class UIState:
    """Selected station and the chart currently on display"""

    selected_station: str = constants.DEFAULT_STATION
    chart: ChartSeries = field(default_factory=ChartSeries.empty)

    def to_dict(self, stations: Sequence[str] = constants.STATIONS) -> Dict[str, Any]:
        return {
            "selected_station": self.selected_station,
            "stations": list(stations),
            "chart": self.chart.to_chartjs(),
        }
