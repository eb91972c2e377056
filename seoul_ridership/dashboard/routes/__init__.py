"""
Dashboard routes module

- API routes: the proxy/transform endpoint and server status
- View routes: page state, station selection and refresh
"""

from .api import create_api_routes
from .view import create_view_routes

__all__ = ["create_api_routes", "create_view_routes"]
