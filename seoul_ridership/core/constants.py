"""
Constants and default values for the ridership dashboard

This module centralizes the fixed query, station set and chart styling so
that the server, the view and the tests agree on them.
"""

# =============================================================================
# Remote Data Source
# =============================================================================

# Seoul open-data service name; also the root element of the XML payload
SERVICE_NAME = "CardSubwayTime"

# Hardcoded query: sample key, rows 1..5, usage month 2024-11
QUERY_MONTH = "202411"
QUERY_START_ROW = 1
QUERY_END_ROW = 5

REMOTE_API_URL = (
    f"http://openapi.seoul.go.kr:8088/sample/xml/{SERVICE_NAME}/"
    f"{QUERY_START_ROW}/{QUERY_END_ROW}/{QUERY_MONTH}/"
)

# =============================================================================
# Payload Field Names
# =============================================================================

ROW_ELEMENT = "row"
STATION_FIELD = "STTN"
LINE_FIELD = "SBWY_ROUT_LN_NM"
MONTH_FIELD = "USE_MM"
JOB_DATE_FIELD = "JOB_YMD"
TOTAL_COUNT_FIELD = "list_total_count"
RESULT_FIELD = "RESULT"

RIDE_ON_FIELD_TEMPLATE = "HR_{hour}_GET_ON_NOPE"
RIDE_OFF_FIELD_TEMPLATE = "HR_{hour}_GET_OFF_NOPE"

HOURS_PER_DAY = 24

# =============================================================================
# Dashboard Constants
# =============================================================================

DEFAULT_DASHBOARD_HOST = "127.0.0.1"
DEFAULT_DASHBOARD_PORT = 8080

FETCH_DATA_PATH = "/api/fetchData"
FETCH_ERROR_MESSAGE = "Failed to fetch data"

STATIONS = ("서울역", "시청", "종각", "종로3가", "종로5가")
DEFAULT_STATION = "서울역"

HOUR_LABEL_TEMPLATE = "{hour}시"

# =============================================================================
# Chart Styling
# =============================================================================

RIDE_ON_LABEL = "승차 인원"
RIDE_ON_BORDER_COLOR = "rgba(75,192,192,1)"
RIDE_ON_BACKGROUND_COLOR = "rgba(75,192,192,0.2)"

RIDE_OFF_LABEL = "하차 인원"
RIDE_OFF_BORDER_COLOR = "rgba(255,99,132,1)"
RIDE_OFF_BACKGROUND_COLOR = "rgba(255,99,132,0.2)"

# =============================================================================
# Server Startup
# =============================================================================

STARTUP_WAIT_SECONDS = 10
STARTUP_POLL_INTERVAL = 0.1  # seconds
