"""Replay an ordered batch of locations against the registry."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Iterable, Optional

from .api_client import (LocationRegistryClient, NoResponseError, PublishError,
                         RequestSetupError, ServerRejectedError)
from .config import DEFAULT_PUBLISH_DELAY
from .logging_utils import get_logger
from .models import LocationPayload, LocationRecord, PublishReport

logger = get_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]
Progress = Callable[[PublishReport], None]


def _describe_failure(record: LocationRecord, exc: PublishError) -> str:
    label = f"{record.name} ({record.code})"
    if isinstance(exc, ServerRejectedError):
        return f"ERROR saving {label}: Status {exc.status_code} - {exc.body}"
    if isinstance(exc, NoResponseError):
        return f"ERROR: No response received for {label}. Is the server running? {exc}"
    if isinstance(exc, RequestSetupError):
        return f"ERROR: Request setup failed for {label}: {exc}"
    return f"ERROR saving {label}: {exc}"


async def publish_location(
    client: LocationRegistryClient, record: LocationRecord
) -> str:
    """Save one record and return the response body."""
    payload = LocationPayload.from_record(record)
    response = await client.save_location(payload, parent_code=record.parent_code)
    return response.text


async def publish_locations(
    client: LocationRegistryClient,
    records: Iterable[LocationRecord],
    delay: float = DEFAULT_PUBLISH_DELAY,
    sleep: Sleep = asyncio.sleep,
    on_progress: Optional[Progress] = None,
) -> PublishReport:
    """Save every record in order, one request at a time.

    A failed record is logged and counted; it never stops the batch. Records
    with an unrecognized level are skipped and counted as malformed. After
    each request the loop waits ``delay`` seconds.
    """
    report = PublishReport()
    logger.info("Starting population process...")

    for record in records:
        if not record.is_known_level:
            logger.warning(
                "Skipping %s (%s): unrecognized level %r",
                record.name,
                record.code,
                record.level,
            )
            report.malformed += 1
            if on_progress is not None:
                on_progress(report)
            continue

        logger.info(
            "Attempting to save: %s (%s), Type: %s, Parent: %s",
            record.name,
            record.code,
            record.level,
            record.parent_code or "None",
        )
        try:
            body = await publish_location(client, record)
        except PublishError as exc:
            message = _describe_failure(record, exc)
            logger.error("%s", message)
            report.record_failure(record.code, message)
        else:
            logger.info("SUCCESS: %s (%s) - %s", record.name, record.code, body)
            report.succeeded += 1

        if on_progress is not None:
            on_progress(report)
        await sleep(delay)

    logger.info(
        "Population process finished: %s saved, %s failed, %s malformed",
        report.succeeded,
        report.failed,
        report.malformed,
    )
    return report
