"""
Seoul Subway Ridership
Hourly ride-on/ride-off dashboard over the Seoul open-data CardSubwayTime API
"""

__version__ = "0.1.0"

from .core.models import ChartSeries, RidershipDataset, RidershipRow
from .dashboard.launcher import serve
from .dashboard.server import DashboardServer
from .data_access import RidershipData

__all__ = [
    "serve",
    "DashboardServer",
    "RidershipData",
    "RidershipDataset",
    "RidershipRow",
    "ChartSeries",
]
