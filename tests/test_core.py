"""
Test package surface, logging, terminal output and networking helpers
"""

import socket
from contextlib import closing

from seoul_ridership.core.exceptions import (
    RidershipDashboardError,
    UpstreamFetchError,
    wrap_exception,
)
from seoul_ridership.core.models import RidershipRow
from seoul_ridership.utils.cli_output import build_station_table
from seoul_ridership.utils.logging import RidershipFormatter, get_logger, setup_logging
from seoul_ridership.utils.networking import find_available_port, is_port_available


def test_import():
    """Test that the package exposes its public API"""
    import seoul_ridership

    assert seoul_ridership.__version__
    for name in seoul_ridership.__all__:
        assert hasattr(seoul_ridership, name)


def test_exception_message_includes_details_and_cause():
    """Test exception string formatting"""
    error = wrap_exception(
        ConnectionError("refused"), UpstreamFetchError, details={"status": 503}
    )

    assert isinstance(error, RidershipDashboardError)
    assert "status=503" in str(error)
    assert "Caused by: refused" in str(error)


def test_get_logger_namespacing():
    """Test that loggers sit under the package logger"""
    assert get_logger("seoul_ridership.dashboard").name == "seoul_ridership.dashboard"
    assert get_logger("scripts").name == "seoul_ridership.scripts"


def test_setup_logging_handlers(tmp_path):
    """Test that setup_logging installs unfiltered console and file handlers"""
    log_file = tmp_path / "logs" / "dashboard.log"

    logger = setup_logging(level="INFO", log_file=str(log_file))
    try:
        assert len(logger.handlers) == 2
        for handler in logger.handlers:
            assert isinstance(handler.formatter, RidershipFormatter)
            assert handler.filters == []

        get_logger("dashboard.server").info("Dashboard started")
        for handler in logger.handlers:
            handler.flush()

        assert "Dashboard started" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_station_table(station_fields):
    """Test the terminal table for one station"""
    row = RidershipRow.from_record(station_fields("서울역"))

    table = build_station_table(row)

    assert table.row_count == 25
    assert "서울역" in str(table.title)


def test_find_available_port_skips_busy_port():
    """Test that a bound port is skipped"""
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as busy:
        busy.bind(("127.0.0.1", 0))
        busy.listen(1)
        busy_port = busy.getsockname()[1]

        assert not is_port_available(busy_port)
        assert find_available_port(busy_port) != busy_port
