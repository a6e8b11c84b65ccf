"""Load, order and publish a location file."""

from __future__ import annotations

from typing import Optional

import httpx
from rich.console import Console

from .api_client import LocationRegistryClient
from .config import Settings
from .loader import load_locations
from .logging_utils import get_logger
from .models import PublishReport
from .publisher import publish_locations
from .sequencer import sort_locations_in_place

logger = get_logger(__name__)


async def run_seed(
    settings: Settings,
    console: Optional[Console] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> PublishReport:
    active_console = console or Console()

    records = load_locations(settings.csv_path, delimiter=settings.csv_delimiter)
    if not records:
        logger.warning("No location data found in %s to populate.", settings.csv_path)
        return PublishReport()

    sort_locations_in_place(records)
    total = len(records)

    async with LocationRegistryClient(settings, transport=transport) as client:
        with active_console.status(f"Publishing {total} locations...") as status:

            def update(report: PublishReport) -> None:
                status.update(
                    f"Processed {report.total}/{total} locations; "
                    f"{report.failed} failed"
                )

            return await publish_locations(
                client,
                records,
                delay=settings.publish_delay,
                on_progress=update,
            )
