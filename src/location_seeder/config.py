"""Configuration loading for the location seeder."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:8081/api/hec/location"
DEFAULT_SAVE_PATH = "saveLocation"
DEFAULT_CSV_PATH = "rwanda_locations.csv"
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_PUBLISH_DELAY = 0.1


def _float(value: Optional[str], default: float) -> float:
    try:
        return float(value) if value is not None else default
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    api_base: str = DEFAULT_API_URL
    save_path: str = DEFAULT_SAVE_PATH
    csv_path: str = DEFAULT_CSV_PATH
    csv_delimiter: str = ","
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    publish_delay: float = DEFAULT_PUBLISH_DELAY
    log_level: str = "INFO"

    @property
    def save_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/{self.save_path.lstrip('/')}"

    def with_csv_path(self, csv_path: str) -> "Settings":
        return replace(self, csv_path=csv_path)

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()

        delimiter = os.getenv("CSV_DELIMITER") or ","
        if len(delimiter) != 1:
            raise ValueError(
                f"CSV_DELIMITER must be a single character, got {delimiter!r}"
            )

        return cls(
            api_base=os.getenv("LOCATION_API_URL", DEFAULT_API_URL).rstrip("/"),
            # Leading slashes are dropped so "saveLocation" and "/saveLocation" compose the same URL.
            save_path=os.getenv("LOCATION_SAVE_PATH", DEFAULT_SAVE_PATH).lstrip("/"),
            csv_path=os.getenv("LOCATION_CSV_PATH", DEFAULT_CSV_PATH),
            csv_delimiter=delimiter,
            http_timeout=_float(os.getenv("HTTP_TIMEOUT"), DEFAULT_HTTP_TIMEOUT),
            publish_delay=max(
                0.0, _float(os.getenv("PUBLISH_DELAY"), DEFAULT_PUBLISH_DELAY)
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
