"""
Port selection for the dashboard server
"""

import socket
from contextlib import closing

from .logging import get_logger

logger = get_logger(__name__)


def is_port_available(port: int, host: str = "127.0.0.1") -> bool:
    """
    Check if a port is available for binding.

    Args:
        port: Port number to check
        host: Host address (default: localhost)

    Returns:
        True if port is available, False otherwise
    """
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as sock:
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, port))
            return True
        except OSError:
            return False


def _os_assigned_port(host: str) -> int:
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as sock:
        sock.bind((host, 0))
        return sock.getsockname()[1]


def find_available_port(
    preferred: int, host: str = "127.0.0.1", search_range: int = 100
) -> int:
    """
    Find an available port, starting with preferred.

    Tries ``preferred``, then ports above it up to ``search_range`` away,
    then lets the OS pick.

    Args:
        preferred: Preferred port number (0 = let OS choose)
        host: Host to bind to (default: localhost)
        search_range: How many ports above ``preferred`` to try

    Returns:
        Available port number
    """
    if preferred == 0:
        return _os_assigned_port(host)

    for port in range(preferred, min(preferred + search_range, 65536)):
        if is_port_available(port, host):
            if port != preferred:
                logger.info(f"Port {preferred} in use, using port {port} instead")
            return port

    return _os_assigned_port(host)
