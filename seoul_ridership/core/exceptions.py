"""
Custom exception classes for the ridership dashboard

Each failure the pipeline can hit has its own type so that the endpoint and
the view can decide which ones to collapse, log or surface.
"""

from typing import Any, Dict, Optional


class RidershipDashboardError(Exception):
    """Base exception for all ridership dashboard errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self):
        base_msg = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            base_msg += f" (Details: {details_str})"
        if self.cause:
            base_msg += f" (Caused by: {self.cause})"
        return base_msg


# =============================================================================
# Remote Source Exceptions
# =============================================================================


class UpstreamFetchError(RidershipDashboardError):
    """Remote data source unreachable or answered with a non-2xx status"""

    pass


class ConversionError(RidershipDashboardError):
    """Remote payload is not well-formed XML"""

    pass


# =============================================================================
# Dataset Exceptions
# =============================================================================


class DatasetError(RidershipDashboardError):
    """Base exception for errors reading a converted payload"""

    pass


class DatasetShapeError(DatasetError):
    """Converted payload does not contain the expected row sequence"""

    pass


class StationNotFoundError(DatasetError):
    """No row in the dataset matches the requested station"""

    pass


# =============================================================================
# Dashboard Exceptions
# =============================================================================


class DashboardError(RidershipDashboardError):
    """Base exception for dashboard-related errors"""

    pass


class DashboardStartupError(DashboardError):
    """Dashboard server did not come up"""

    pass


# =============================================================================
# Validation Exceptions
# =============================================================================


class ValidationError(RidershipDashboardError):
    """Caller-supplied value rejected"""

    pass


class InvalidStationError(ValidationError):
    """Station is not part of the selectable station set"""

    pass


# =============================================================================
# Utility Functions
# =============================================================================


def wrap_exception(
    original_exception: Exception,
    new_exception_class: type,
    message: Optional[str] = None,
    **kwargs,
) -> RidershipDashboardError:
    """
    Wrap a generic exception in a specific dashboard exception

    Args:
        original_exception: The original exception
        new_exception_class: The new exception class to use
        message: Optional custom message
        **kwargs: Additional arguments for the new exception

    Returns:
        New exception instance with the original as cause
    """
    if message is None:
        message = f"Operation failed: {str(original_exception)}"

    return new_exception_class(message=message, cause=original_exception, **kwargs)
