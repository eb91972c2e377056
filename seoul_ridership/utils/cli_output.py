"""
Styled terminal output using the Rich library
"""

from typing import Optional

from rich.console import Console
from rich.table import Table

from ..core.models import RidershipRow

# Global console instance
console = Console()


def print_banner():
    """Print startup banner"""
    console.print()
    console.print(
        "[bold cyan]Seoul Subway Ridership[/bold cyan] [dim]─ hourly ride-on/ride-off[/dim]"
    )


def print_dashboard_url(
    url: str, original_port: Optional[int] = None, port: Optional[int] = None
):
    """Print dashboard URL, noting a port fallback if one happened"""
    if original_port is not None and port is not None and original_port != port:
        console.print(
            f"[dim]Port [cyan]{original_port}[/cyan] in use, using [cyan]{port}[/cyan][/dim]"
        )
    console.print(f"[cyan]→[/cyan] Dashboard: [bold cyan]{url}[/bold cyan]")
    console.print("[dim]Press Ctrl+C to stop[/dim]")
    console.print()


def build_station_table(row: RidershipRow) -> Table:
    """Hourly ride-on/ride-off table for one station"""
    title = row.station if not row.line else f"{row.station} ({row.line})"
    if row.month:
        title += f" · {row.month}"

    table = Table(title=title)
    table.add_column("시간", justify="right")
    table.add_column("승차 인원", justify="right", style="cyan")
    table.add_column("하차 인원", justify="right", style="magenta")

    for hour in row.hours:
        table.add_row(f"{hour.hour}시", f"{hour.ride_on:,}", f"{hour.ride_off:,}")

    table.add_section()
    table.add_row("합계", f"{sum(row.ride_on):,}", f"{sum(row.ride_off):,}")
    return table


def print_station_table(row: RidershipRow):
    """Print a station's hourly table"""
    console.print(build_station_table(row))


def print_error(message: str):
    """Print error message"""
    console.print(f"[bold red]{message}[/bold red]")
