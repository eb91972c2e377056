"""
Blocking entry point that serves the dashboard until interrupted
"""

import threading

from ..core import constants
from ..utils import cli_output
from ..utils.logging import get_logger
from ..utils.networking import find_available_port
from .server import DashboardServer

logger = get_logger(__name__)


def serve(
    port: int = constants.DEFAULT_DASHBOARD_PORT,
    host: str = constants.DEFAULT_DASHBOARD_HOST,
    block: bool = True,
) -> DashboardServer:
    """
    Start the dashboard on ``port`` or the next free port

    Args:
        port: Preferred port
        host: Host to bind to
        block: Wait until Ctrl+C, then stop the server

    Returns:
        The started server (already stopped when ``block`` is True)
    """
    available_port = find_available_port(port, host=host)
    dashboard = DashboardServer(port=available_port, host=host)
    dashboard.start()

    cli_output.print_banner()
    cli_output.print_dashboard_url(dashboard.get_url(), port, available_port)

    if block:
        try:
            threading.Event().wait()
        except KeyboardInterrupt:
            logger.info("Interrupted, shutting down")
        finally:
            dashboard.stop()

    return dashboard
