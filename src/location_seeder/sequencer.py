"""Order a batch of locations so that higher administrative tiers come first."""

from __future__ import annotations

from typing import Iterable

from .logging_utils import get_logger
from .models import LocationLevel, LocationRecord

logger = get_logger(__name__)

# Unrecognized levels share one rank below every known tier.
UNKNOWN_RANK = len(LocationLevel)


def hierarchy_key(record: LocationRecord) -> int:
    rank = record.rank
    return UNKNOWN_RANK if rank is None else rank


def _warn_unknown(records: Iterable[LocationRecord]) -> None:
    for record in records:
        if not record.is_known_level:
            logger.warning(
                "Unrecognized level %r for %s (%s); ordering it after %s",
                record.level,
                record.name,
                record.code,
                LocationLevel.VILLAGE.value,
            )


def sequence_locations(records: Iterable[LocationRecord]) -> list[LocationRecord]:
    """Return the batch sorted by hierarchy rank.

    The sort is stable, so records of the same level keep their input order.
    Parent codes are not checked; only the tier decides the position.
    """
    batch = list(records)
    sort_locations_in_place(batch)
    return batch


def sort_locations_in_place(records: list[LocationRecord]) -> None:
    _warn_unknown(records)
    records.sort(key=hierarchy_key)
