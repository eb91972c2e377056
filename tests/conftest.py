"""
Pytest configuration and fixtures for the ridership dashboard tests
"""

import pytest

from seoul_ridership.core import constants
from seoul_ridership.core.converter import xml_to_object


def _station_fields(station, ride_on=None, ride_off=None, line="1호선"):
    """One <row>'s fields; hourly counts default to 100+h and 50+h"""
    ride_on = ride_on if ride_on is not None else [100 + h for h in range(24)]
    ride_off = ride_off if ride_off is not None else [50 + h for h in range(24)]

    fields = {
        "USE_MM": constants.QUERY_MONTH,
        "SBWY_ROUT_LN_NM": line,
        "STTN": station,
    }
    for hour in range(24):
        fields[f"HR_{hour}_GET_ON_NOPE"] = str(ride_on[hour])
        fields[f"HR_{hour}_GET_OFF_NOPE"] = str(ride_off[hour])
    fields["JOB_YMD"] = "20241203"
    return fields


def _build_xml(rows, total=None):
    """CardSubwayTime document with one <row> per field mapping"""
    parts = [
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>',
        "<CardSubwayTime>",
        f"<list_total_count>{total if total is not None else len(rows)}</list_total_count>",
        "<RESULT><CODE>INFO-000</CODE><MESSAGE>정상 처리되었습니다</MESSAGE></RESULT>",
    ]
    for fields in rows:
        cells = "".join(f"<{key}>{value}</{key}>" for key, value in fields.items())
        parts.append(f"<row>{cells}</row>")
    parts.append("</CardSubwayTime>")
    return "\n".join(parts)


class FakeSource:
    """Stands in for RemoteRidershipSource"""

    def __init__(self, xml_text="", error=None):
        self.url = "http://remote.test/sample/xml/CardSubwayTime/1/5/202411/"
        self.xml_text = xml_text
        self.error = error
        self.calls = 0

    async def fetch_xml(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.xml_text


@pytest.fixture
def station_fields():
    """Factory for one station's row fields"""
    return _station_fields


@pytest.fixture
def build_xml():
    """Factory for a CardSubwayTime XML document"""
    return _build_xml


@pytest.fixture
def sample_xml():
    """Five stations, matching the dashboard's station set"""
    return _build_xml([_station_fields(station) for station in constants.STATIONS])


@pytest.fixture
def make_payload():
    """Factory for the proxy endpoint's JSON body from row field mappings"""

    def _make(rows):
        return {"data": xml_to_object(_build_xml(rows))}

    return _make


@pytest.fixture
def make_source():
    """Factory for fake remote sources"""
    return FakeSource
