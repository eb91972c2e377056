"""
View routes for the dashboard page

The page never talks to the remote source itself: it reads and changes the
view state through these endpoints, and the view loads data through the
proxy endpoint.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ...core.exceptions import InvalidStationError
from ...utils.logging import get_logger
from ..view import DashboardView

logger = get_logger(__name__)


class StationSelection(BaseModel):
    """Body of a station change request"""

    station: str


def create_view_routes(view: DashboardView) -> APIRouter:
    """
    Create view routes with dependency injection

    Args:
        view: Dashboard view whose state the page renders

    Returns:
        APIRouter: Configured router with view endpoints
    """
    router = APIRouter()

    @router.get("/api/view")
    async def get_view():
        """Start a page session and return its state after the initial load"""
        await view.activate()
        return view.snapshot()

    @router.post("/api/view/station")
    async def select_station(selection: StationSelection):
        """Select a station and load its chart"""
        try:
            await view.select_station(selection.station)
        except InvalidStationError as e:
            logger.warning(f"Invalid station selection: {e}")
            raise HTTPException(status_code=400, detail=e.message)
        return view.snapshot()

    @router.post("/api/view/refresh")
    async def refresh():
        """Reload the selected station"""
        await view.refresh()
        return view.snapshot()

    return router
