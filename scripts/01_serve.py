#!/usr/bin/env python3
"""Example: Serve the ridership dashboard"""

from seoul_ridership import serve
from seoul_ridership.utils.logging import setup_logging

setup_logging(level="INFO")

# Opens on http://localhost:8080 (or the next free port); Ctrl+C to stop
serve(port=8080)
