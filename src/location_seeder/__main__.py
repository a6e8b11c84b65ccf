from __future__ import annotations

import asyncio
import sys
from typing import Optional, Sequence

from rich.console import Console

from .config import Settings
from .loader import LoadError
from .logging_utils import get_logger, setup_logging
from .seed import run_seed

console = Console()
LOGGER = get_logger("location_seeder")


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = Settings.from_env()
    except Exception as exc:  # pragma: no cover - guard for CLI usage
        setup_logging()
        LOGGER.error("Configuration error: %s", exc)
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    if len(args) > 1:
        print("usage: location-seeder [CSV_PATH]", file=sys.stderr)
        sys.exit(1)
    if args:
        settings = settings.with_csv_path(args[0])

    setup_logging(settings.log_level, console=console)

    try:
        report = asyncio.run(run_seed(settings, console=console))
    except LoadError as exc:
        LOGGER.error("Failed to run population script: %s", exc)
        print(f"Load error: {exc}", file=sys.stderr)
        sys.exit(2)
    except Exception as exc:  # pragma: no cover - guard for CLI usage
        LOGGER.exception("Population failed")
        print(f"Population failed: {exc}", file=sys.stderr)
        sys.exit(3)

    if report.failures:
        LOGGER.warning("%s location(s) were not saved:", report.failed)
        for code, reason in report.failures:
            LOGGER.warning("  %s: %s", code, reason)


if __name__ == "__main__":
    main()
