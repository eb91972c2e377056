"""
API routes for the dashboard server

This module contains the proxy/transform endpoint that turns the remote
XML into JSON, plus the status and station-list endpoints.
"""

import time
from typing import Sequence

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ...core.constants import FETCH_DATA_PATH, FETCH_ERROR_MESSAGE
from ...core.exceptions import ConversionError, UpstreamFetchError
from ...utils.logging import get_logger
from ..services import DataService

logger = get_logger(__name__)


def create_api_routes(data_service: DataService, stations: Sequence[str]) -> APIRouter:
    """
    Create API routes with dependency injection

    Args:
        data_service: Service that fetches and converts the remote XML
        stations: Station names offered by the selector

    Returns:
        APIRouter: Configured router with all API endpoints
    """
    router = APIRouter()

    def _failure() -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": FETCH_ERROR_MESSAGE})

    @router.get(FETCH_DATA_PATH)
    async def fetch_data():
        """Fetch the remote ridership XML and return it converted to JSON"""
        try:
            data = await data_service.fetch_converted()
        except UpstreamFetchError as e:
            logger.error(f"Error fetching data: {e}")
            return _failure()
        except ConversionError as e:
            logger.error(f"Error converting data: {e}")
            return _failure()
        except Exception as e:
            logger.error(f"Unexpected error fetching data: {e}", exc_info=True)
            return _failure()

        return {"data": data}

    @router.get("/api/stations")
    async def get_stations():
        """Get the selectable station names"""
        return {"stations": list(stations)}

    @router.get("/api/status")
    async def get_status():
        """Get dashboard status"""
        return {
            "dashboard": "running",
            "source_url": data_service.source.url,
            "timestamp": time.time(),
        }

    return router
