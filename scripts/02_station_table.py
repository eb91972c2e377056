#!/usr/bin/env python3
"""Example: Programmatic access to the ridership data"""

import sys

from seoul_ridership import RidershipData
from seoul_ridership.core.exceptions import RidershipDashboardError
from seoul_ridership.utils import cli_output

station = sys.argv[1] if len(sys.argv) > 1 else "서울역"

data = RidershipData()

try:
    dataset = data.load()
except RidershipDashboardError as e:
    cli_output.print_error(f"Could not load ridership data: {e}")
    sys.exit(1)

print(f"Stations in this query: {', '.join(dataset.stations)}")
if dataset.total_count is not None:
    print(f"  Rows available upstream: {dataset.total_count}")

try:
    row = data.get_station(station)
except RidershipDashboardError as e:
    cli_output.print_error(str(e))
    sys.exit(1)

cli_output.print_station_table(row)

# Busiest boarding hour
peak = max(row.hours, key=lambda h: h.ride_on)
print(f"\nPeak boarding: {peak.hour}시 ({peak.ride_on:,} riders)")
