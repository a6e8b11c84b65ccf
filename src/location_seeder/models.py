"""Location records, request payloads and the per-run publish report."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LocationLevel(str, Enum):
    """Administrative tiers, declared from the top of the hierarchy down."""

    PROVINCE = "PROVINCE"
    DISTRICT = "DISTRICT"
    SECTOR = "SECTOR"
    CELL = "CELL"
    VILLAGE = "VILLAGE"

    @property
    def rank(self) -> int:
        return _RANKS[self.value]


_RANKS = {level.value: index for index, level in enumerate(LocationLevel)}


def rank_of(level: Optional[str]) -> Optional[int]:
    """Return the hierarchy rank for ``level`` or ``None`` when it is not a known tag."""
    if not isinstance(level, str):
        return None
    return _RANKS.get(level.strip().upper())


class LocationRecord(BaseModel):
    """One normalized row of the input file."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    level: str
    code: str = Field(min_length=1)
    name: str = Field(min_length=1)
    parent_code: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("parent_code")
    @classmethod
    def _blank_parent(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @property
    def rank(self) -> Optional[int]:
        return rank_of(self.level)

    @property
    def is_known_level(self) -> bool:
        return self.rank is not None


class LocationPayload(BaseModel):
    """JSON body of a ``saveLocation`` request."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    location_code: str = Field(alias="locationCode")
    location_type: str = Field(alias="locationType")
    location_name: str = Field(alias="locationName")

    @classmethod
    def from_record(cls, record: LocationRecord) -> "LocationPayload":
        return cls(
            location_code=record.code,
            location_type=record.level.upper(),
            location_name=record.name,
        )

    def to_json(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


@dataclass
class PublishReport:
    succeeded: int = 0
    failed: int = 0
    malformed: int = 0
    failures: list[tuple[str, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.succeeded + self.failed + self.malformed

    @property
    def ok(self) -> bool:
        return self.failed == 0 and self.malformed == 0

    def record_failure(self, code: str, reason: str) -> None:
        self.failed += 1
        self.failures.append((code, reason))
