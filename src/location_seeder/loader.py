"""Read location records from a delimited text file."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterator, Mapping, Optional, Union

from pydantic import ValidationError

from .logging_utils import get_logger
from .models import LocationRecord

logger = get_logger(__name__)

LEVEL_COLUMN = "Level"
CODE_COLUMN = "LocationCode"
NAME_COLUMN = "LocationName"
PARENT_COLUMN = "ParentCode"
REQUIRED_COLUMNS = (LEVEL_COLUMN, CODE_COLUMN, NAME_COLUMN, PARENT_COLUMN)


class LoadError(OSError):
    """Raised when the location file cannot be opened, decoded or parsed."""


def _clean(value: Optional[str]) -> str:
    return value.strip() if isinstance(value, str) else ""


def _iter_rows(
    path: Path, delimiter: str
) -> Iterator[tuple[int, Mapping[str, str]]]:
    # utf-8-sig drops a leading BOM that would otherwise stick to the "Level" header.
    with path.open("r", encoding="utf-8-sig", newline="") as fh:
        reader = csv.reader(fh, delimiter=delimiter)
        header: list[str] = []
        for cells in reader:
            if any(_clean(cell) for cell in cells):
                header = [_clean(name) for name in cells]
                break
        if not header:
            return
        missing = [column for column in REQUIRED_COLUMNS if column not in header]
        if missing:
            raise LoadError(
                f"{path} is missing required column(s): {', '.join(missing)}"
            )
        for cells in reader:
            yield reader.line_num, dict(zip(header, cells))


def load_locations(
    path: Union[str, Path], delimiter: str = ","
) -> list[LocationRecord]:
    """Load every location row of ``path`` in file order.

    Values are trimmed, blank lines are skipped and rows that fail validation
    are logged and dropped. Any I/O, decoding or CSV error aborts the load.
    """
    source = Path(path)
    records: list[LocationRecord] = []
    try:
        for line_num, row in _iter_rows(source, delimiter):
            values = {column: _clean(row.get(column)) for column in REQUIRED_COLUMNS}
            if not any(_clean(value) for value in row.values()):
                continue
            try:
                record = LocationRecord(
                    level=values[LEVEL_COLUMN],
                    code=values[CODE_COLUMN],
                    name=values[NAME_COLUMN],
                    parent_code=values[PARENT_COLUMN] or None,
                )
            except ValidationError as exc:
                logger.error(
                    "Skipping line %s of %s due to validation error: %s",
                    line_num,
                    source,
                    exc,
                )
                continue
            logger.debug("Loaded %s", record.model_dump())
            records.append(record)
    except LoadError:
        raise
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        logger.error("Error reading CSV file %s: %s", source, exc)
        raise LoadError(f"Cannot read {source}: {exc}") from exc

    logger.info("Read %s records from %s", len(records), source)
    return records
