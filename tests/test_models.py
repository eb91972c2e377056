"""
Test ridership rows, datasets and chart projection
"""

import pydantic
import pytest

from seoul_ridership.core.exceptions import DatasetShapeError, StationNotFoundError
from seoul_ridership.core.models import (
    RIDE_OFF_STYLE,
    RIDE_ON_STYLE,
    ChartSeries,
    RidershipDataset,
    RidershipRow,
    UIState,
)


def test_row_reads_all_hours_in_order(station_fields):
    """Test that 48 numeric fields map onto 24 hour records in order"""
    ride_on = [h * 10 for h in range(24)]
    ride_off = [h * 3 + 1 for h in range(24)]

    row = RidershipRow.from_record(station_fields("서울역", ride_on, ride_off))

    assert [h.hour for h in row.hours] == list(range(24))
    assert row.ride_on == ride_on
    assert row.ride_off == ride_off
    assert row.station == "서울역"
    assert row.line == "1호선"
    assert row.month == "202411"


def test_missing_field_defaults_to_zero(station_fields):
    """Test that a missing hourly field becomes 0 without touching other hours"""
    fields = station_fields("서울역")
    del fields["HR_5_GET_ON_NOPE"]

    row = RidershipRow.from_record(fields)

    assert row.ride_on[5] == 0
    assert row.ride_on[:5] == [100, 101, 102, 103, 104]
    assert row.ride_on[6:] == [100 + h for h in range(6, 24)]
    assert row.ride_off == [50 + h for h in range(24)]


@pytest.mark.parametrize("value", ["", "n/a", "-3", None])
def test_unparseable_or_negative_field_becomes_zero(station_fields, value):
    """Test that bad counter values become 0"""
    fields = station_fields("시청")
    fields["HR_7_GET_OFF_NOPE"] = value

    row = RidershipRow.from_record(fields)

    assert row.ride_off[7] == 0


def test_decimal_string_is_truncated(station_fields):
    """Test that decimal strings are read as whole counts"""
    fields = station_fields("종각")
    fields["HR_0_GET_ON_NOPE"] = "12.0"

    assert RidershipRow.from_record(fields).ride_on[0] == 12


def test_dataset_metadata(make_payload, station_fields):
    """Test that total count and result code are read from the payload"""
    dataset = RidershipDataset.from_payload(make_payload([station_fields("서울역")]))

    assert dataset.total_count == 1
    assert dataset.result_code == "INFO-000"
    assert dataset.stations == ["서울역"]


def test_dataset_without_rows_is_empty():
    """Test that an API error document yields no rows"""
    converted = {"CardSubwayTime": {"RESULT": {"CODE": "INFO-200", "MESSAGE": "해당하는 데이터가 없습니다."}}}

    dataset = RidershipDataset.from_converted(converted)

    assert dataset.rows == []
    assert dataset.result_code == "INFO-200"


@pytest.mark.parametrize(
    "payload",
    [{"error": "Failed to fetch data"}, {"data": {"RESULT": {}}}, {"data": "text"}, []],
)
def test_payload_shape_errors(payload):
    """Test that bodies without the row path raise DatasetShapeError"""
    with pytest.raises(DatasetShapeError):
        RidershipDataset.from_payload(payload)


def test_find_is_exact_and_first_match(make_payload, station_fields):
    """Test linear exact-match lookup"""
    payload = make_payload(
        [
            station_fields("서울역", ride_on=[1] * 24),
            station_fields("서울역", ride_on=[2] * 24),
        ]
    )
    dataset = RidershipDataset.from_payload(payload)

    assert dataset.find("서울역").ride_on[0] == 1
    assert dataset.find("서울") is None
    with pytest.raises(StationNotFoundError):
        dataset.get("시청")


def test_chart_series_from_row(station_fields):
    """Test chart labels, data and styles for one row"""
    row = RidershipRow.from_record(station_fields("서울역"))

    chart = ChartSeries.from_row(row)
    chartjs = chart.to_chartjs()

    assert chartjs["labels"] == [f"{h}시" for h in range(24)]
    ride_on, ride_off = chartjs["datasets"]
    assert ride_on == {
        "label": "승차 인원",
        "data": row.ride_on,
        "borderColor": "rgba(75,192,192,1)",
        "backgroundColor": "rgba(75,192,192,0.2)",
        "fill": False,
    }
    assert ride_off["label"] == "하차 인원"
    assert ride_off["borderColor"] == "rgba(255,99,132,1)"
    assert ride_off["data"] == row.ride_off


def test_styles_are_shared_but_immutable(station_fields):
    """Test that chart styles cannot be mutated through a chart"""
    chart = ChartSeries.from_row(RidershipRow.from_record(station_fields("시청")))

    assert chart.ride_on.style is RIDE_ON_STYLE
    with pytest.raises(pydantic.ValidationError):
        chart.ride_on.style.label = "changed"
    assert RIDE_ON_STYLE.label == "승차 인원"
    assert RIDE_OFF_STYLE.fill is False


def test_initial_ui_state():
    """Test the state shown before the first load"""
    state = UIState().to_dict()

    assert state["selected_station"] == "서울역"
    assert state["chart"]["labels"] == []
    assert [d["data"] for d in state["chart"]["datasets"]] == [[], []]
    assert "종로5가" in state["stations"]
