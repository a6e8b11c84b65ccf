"""Tests for reading location files."""

from pathlib import Path
from typing import Callable

import pytest

from location_seeder.loader import LoadError, load_locations

from .conftest import HEADER


class TestLoadLocations:
    """Tests for load_locations."""

    def test_loads_rows_in_file_order(self, sample_csv: Path) -> None:
        records = load_locations(sample_csv)
        assert [r.code for r in records] == [
            "RW01010101",
            "RW010101",
            "RW0101",
            "RW01",
            "RW01010",
        ]
        assert records[0].level == "VILLAGE"
        assert records[3].parent_code is None

    def test_header_only_is_empty(self, write_csv: Callable[..., Path]) -> None:
        assert load_locations(write_csv(HEADER)) == []

    def test_empty_file_is_empty(self, write_csv: Callable[..., Path]) -> None:
        assert load_locations(write_csv("")) == []

    def test_blank_lines_are_skipped(self, write_csv: Callable[..., Path]) -> None:
        path = write_csv(
            HEADER
            + "province,RW01,Kigali,\n"
            + "\n"
            + ",,,\n"
            + "district,RW0101,Nyarugenge,RW01\n"
            + "\n"
        )
        assert len(load_locations(path)) == 2

    def test_blank_line_before_header(self, write_csv: Callable[..., Path]) -> None:
        path = write_csv("\n" + HEADER + "province,RW01,Kigali,\n")
        (record,) = load_locations(path)
        assert record.code == "RW01"

    def test_whitespace_line_before_header(
        self, write_csv: Callable[..., Path]
    ) -> None:
        path = write_csv("  \n ,, ,\n" + HEADER + "province,RW01,Kigali,\n")
        (record,) = load_locations(path)
        assert record.name == "Kigali"

    def test_blank_lines_only_is_empty(self, write_csv: Callable[..., Path]) -> None:
        assert load_locations(write_csv("\n  \n")) == []

    def test_values_are_trimmed(self, write_csv: Callable[..., Path]) -> None:
        path = write_csv(HEADER + " province ,  RW01 ,  Kigali  ,  \n")
        (record,) = load_locations(path)
        assert record.name == "Kigali"
        assert record.code == "RW01"
        assert record.level == "PROVINCE"
        assert record.parent_code is None

    def test_extra_columns_and_bom(self, write_csv: Callable[..., Path]) -> None:
        path = write_csv(
            "\ufeffLevel,LocationCode,LocationName,ParentCode,Population\n"
            "district,RW0101,Nyarugenge,RW01,374319\n"
        )
        (record,) = load_locations(path)
        assert record.parent_code == "RW01"

    def test_custom_delimiter(self, write_csv: Callable[..., Path]) -> None:
        path = write_csv(
            "Level;LocationCode;LocationName;ParentCode\ncell;C1;Kiyovu;S1\n"
        )
        (record,) = load_locations(path, delimiter=";")
        assert record.level == "CELL"

    def test_invalid_rows_are_dropped(self, write_csv: Callable[..., Path]) -> None:
        path = write_csv(
            HEADER + "province,,Kigali,\n" + "province,RW02,,\n" + "province,RW03,South,\n"
        )
        assert [r.code for r in load_locations(path)] == ["RW03"]

    def test_unknown_level_is_loaded(self, write_csv: Callable[..., Path]) -> None:
        (record,) = load_locations(write_csv(HEADER + "region,X1,Somewhere,\n"))
        assert record.level == "REGION"
        assert not record.is_known_level

    def test_missing_column(self, write_csv: Callable[..., Path]) -> None:
        path = write_csv("Level,LocationCode,LocationName\nprovince,RW01,Kigali\n")
        with pytest.raises(LoadError, match="ParentCode"):
            load_locations(path)

    def test_header_names_are_case_sensitive(
        self, write_csv: Callable[..., Path]
    ) -> None:
        path = write_csv("level,locationcode,locationname,parentcode\n")
        with pytest.raises(LoadError):
            load_locations(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(LoadError):
            load_locations(tmp_path / "absent.csv")

    def test_missing_file_is_an_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_locations(tmp_path / "absent.csv")

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.csv"
        path.write_bytes(HEADER.encode() + "province,RW01,K\xe9,\n".encode("latin-1"))
        with pytest.raises(LoadError):
            load_locations(path)
