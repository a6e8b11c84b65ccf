"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from location_seeder.config import Settings
from location_seeder.models import LocationRecord

HEADER = "Level,LocationCode,LocationName,ParentCode\n"


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str], Path]:
    """Write CSV text to a temporary file and return its path."""

    def _write(text: str, name: str = "locations.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_csv(write_csv: Callable[[str], Path]) -> Path:
    """A small file listing children before their parents."""
    return write_csv(
        HEADER
        + "village,RW01010101,Ubumwe,RW010101\n"
        + "cell,RW010101,Kiyovu,RW0101\n"
        + "district,RW0101,Nyarugenge,RW01\n"
        + "province,RW01,Kigali,\n"
        + "sector,RW01010,Nyarugenge Sector,RW0101\n"
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a fake registry with no throttling."""
    return Settings(
        api_base="http://registry.test/api/hec/location",
        csv_path=str(tmp_path / "locations.csv"),
        publish_delay=0.0,
    )


@pytest.fixture
def province() -> LocationRecord:
    return LocationRecord(level="province", code="RW01", name="Kigali", parent_code="")


@pytest.fixture
def district() -> LocationRecord:
    return LocationRecord(
        level="district", code="RW0101", name="Nyarugenge", parent_code="RW01"
    )
