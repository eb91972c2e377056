"""
Dashboard services module

This module provides the fetch-and-convert pipeline and page template
loading behind the dashboard routes.
"""

from .data_service import DataService

__all__ = ["DataService"]
