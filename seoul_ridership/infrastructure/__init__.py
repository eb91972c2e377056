"""
HTTP clients for the remote data source and the dashboard's own endpoint
"""

from .endpoint_client import EndpointClient
from .remote_source import RemoteRidershipSource

__all__ = ["RemoteRidershipSource", "EndpointClient"]
