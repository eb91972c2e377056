"""
FastAPI dashboard server for Seoul subway ridership

Wires the remote source, the proxy/transform endpoint, the dashboard view
and the page into one app and runs it with uvicorn in a background thread.
"""

import asyncio
import threading
import time
from typing import Optional, Sequence

import requests
import uvicorn
from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from .. import __version__
from ..core import constants
from ..core.exceptions import DashboardStartupError
from ..infrastructure import EndpointClient, RemoteRidershipSource
from ..utils.logging import get_logger
from .routes import create_api_routes, create_view_routes
from .services import DataService
from .view import DashboardView

logger = get_logger(__name__)


class DashboardServer:
    """Single-page ridership dashboard server"""

    def __init__(
        self,
        port: int = constants.DEFAULT_DASHBOARD_PORT,
        host: str = constants.DEFAULT_DASHBOARD_HOST,
        source: Optional[RemoteRidershipSource] = None,
        view: Optional[DashboardView] = None,
        stations: Sequence[str] = constants.STATIONS,
    ):
        """
        Initialize dashboard server

        Args:
            port: Port to serve dashboard on
            host: Host to bind to (default: 127.0.0.1 for localhost only)
            source: Remote ridership source (default: the fixed Seoul open-data query)
            view: Dashboard view (default: one that calls this server's /api/fetchData)
            stations: Station names offered by the selector
        """
        self.port = port
        self.host = host
        self.stations = tuple(stations)

        if host == "0.0.0.0":
            logger.warning(
                "Dashboard binding to 0.0.0.0 - accessible from ALL network interfaces."
            )

        self.app = FastAPI(
            title="Seoul Subway Ridership Dashboard",
            description="Hourly ride-on/ride-off counts per station",
            version=__version__,
        )

        self.source = source or RemoteRidershipSource()
        self.data_service = DataService(self.source)

        if view is None:
            client = EndpointClient(f"{self.local_url}{constants.FETCH_DATA_PATH}")
            view = DashboardView(client.fetch_payload, stations=self.stations)
        self.view = view

        self._setup_routes()

        self.server_thread: Optional[threading.Thread] = None
        self._server_started = False
        self._stop_event = threading.Event()
        self._uvicorn_server: Optional[uvicorn.Server] = None

    @property
    def local_url(self) -> str:
        host = "127.0.0.1" if self.host == "0.0.0.0" else self.host
        return f"http://{host}:{self.port}"

    def _setup_routes(self):
        """Mount the API and view routers and the page route"""
        self.app.include_router(create_api_routes(self.data_service, self.stations))
        self.app.include_router(create_view_routes(self.view))

        @self.app.get("/")
        async def dashboard():
            """Main dashboard page"""
            return HTMLResponse(self.data_service.get_dashboard_html())

    def start(self):
        """
        Start the dashboard server in a background thread

        Raises:
            DashboardStartupError: If /api/status does not answer in time
        """
        if self._server_started:
            logger.info(f"Dashboard already running on port {self.port}")
            return

        def run_server():
            config = uvicorn.Config(
                app=self.app,
                host=self.host,
                port=self.port,
                log_level="warning",
                access_log=False,
            )
            self._uvicorn_server = uvicorn.Server(config)

            try:
                asyncio.run(self._uvicorn_server.serve())
            except Exception as e:
                if not self._stop_event.is_set():
                    logger.error(f"Dashboard server error: {e}")

        self._stop_event.clear()
        self.server_thread = threading.Thread(target=run_server, daemon=True)
        self.server_thread.start()

        if not self._wait_until_ready():
            self.stop()
            raise DashboardStartupError(
                "Dashboard did not become ready",
                details={"port": self.port, "timeout": constants.STARTUP_WAIT_SECONDS},
            )

        self._server_started = True
        logger.info(f"Dashboard started: {self.get_url()}")

    def _wait_until_ready(self) -> bool:
        deadline = time.time() + constants.STARTUP_WAIT_SECONDS
        while time.time() < deadline:
            if self.server_thread is not None and not self.server_thread.is_alive():
                return False
            try:
                response = requests.get(f"{self.local_url}/api/status", timeout=1)
                if response.status_code == 200:
                    return True
            except requests.RequestException:
                pass
            time.sleep(constants.STARTUP_POLL_INTERVAL)
        return False

    def stop(self):
        """Stop the dashboard server"""
        self._stop_event.set()

        if self._uvicorn_server:
            self._uvicorn_server.should_exit = True

        if self.server_thread and self.server_thread.is_alive():
            self.server_thread.join(timeout=5)

        if self._server_started:
            logger.info(f"Dashboard stopped (port {self.port})")
        self._server_started = False

    def get_url(self) -> str:
        """Get dashboard URL"""
        return self.local_url

    def is_running(self) -> bool:
        """Check if server is running"""
        return self._server_started and (
            self.server_thread is None or self.server_thread.is_alive()
        )
