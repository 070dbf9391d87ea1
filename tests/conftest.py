"""Pytest configuration and shared fixtures."""

import csv
from pathlib import Path
from typing import Callable, List
from unittest.mock import Mock

import pytest

from slcsp_app.config.loader import ConfigLoader, RunSettings

ZIPS_HEADER = ["zipcode", "state", "county_code", "name", "rate_area"]
PLANS_HEADER = ["plan_id", "state", "metal_level", "rate", "rate_area"]
TEMPLATE_HEADER = ["zipcode", "rate"]


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, List[List[str]]], Path]:
    """Factory writing rows to a CSV file under tmp_path."""
    def _write(name: str, rows: List[List[str]]) -> Path:
        path = tmp_path / name
        with open(path, "w", newline="") as f:
            csv.writer(f, lineterminator="\n").writerows(rows)
        return path
    return _write


@pytest.fixture
def sample_zip_rows() -> List[List[str]]:
    """Zip mapping rows: one ambiguous zip code, one repeated identical mapping."""
    return [
        ZIPS_HEADER,
        ["64148", "MO", "29095", "Jackson", "3"],
        ["67118", "KS", "20155", "Reno", "6"],
        ["40813", "KY", "21013", "Bell", "8"],
        ["54923", "WI", "55137", "Waushara", "15"],
        ["54923", "WI", "55139", "Winnebago", "11"],
        ["07184", "NJ", "34031", "Passaic", "1"],
        ["31551", "GA", "13229", "Pierce", "6"],
        ["64148", "MO", "29037", "Cass", "3"],
    ]


@pytest.fixture
def sample_plan_rows() -> List[List[str]]:
    """Plan rows covering ties, non-silver plans and an unmapped rate area."""
    return [
        PLANS_HEADER,
        ["74449NR9870320", "MO", "Silver", "290.05", "3"],
        ["26325VH2723968", "MO", "Silver", "245.2", "3"],
        ["92239KP1136017", "MO", "Silver", "265.82", "3"],
        ["06085NT5396553", "MO", "Gold", "200", "3"],
        ["21989AG3021493", "KS", "Silver", "212.35", "6"],
        ["44883XK0947355", "KS", "Silver", "212.35", "6"],
        ["56767JB6312474", "KY", "Silver", "300", "8"],
        ["94148ZF2593413", "KY", "Silver", "310", "8"],
        ["41447WL4470735", "WI", "Silver", "100", "15"],
        ["06293ZT8863934", "WI", "Silver", "110", "15"],
        ["07579WY8543262", "NJ", "Silver", "250", "1"],
        ["26631YR3384683", "GA", "Gold", "300", "6"],
        ["10311HY9921036", "TX", "Silver", "199", "99"],
        ["99283EM0291382", "TX", "Silver", "180", "99"],
        ["55555ZZ0000000", "ZZ", "Gold", "1", "1"],
    ]


@pytest.fixture
def sample_template_rows() -> List[List[str]]:
    """Template rows, including an unknown and a repeated zip code."""
    return [
        TEMPLATE_HEADER,
        ["64148", ""],
        ["67118", ""],
        ["54923", ""],
        ["07184", ""],
        ["31551", ""],
        ["99999", ""],
        ["40813", ""],
        ["64148", "123.45"],
    ]


@pytest.fixture
def data_dir(tmp_path, write_csv, sample_zip_rows, sample_plan_rows, sample_template_rows) -> Path:
    """Directory holding the three input resources."""
    write_csv("zips.csv", sample_zip_rows)
    write_csv("plans.csv", sample_plan_rows)
    write_csv("slcsp.csv", sample_template_rows)
    return tmp_path


@pytest.fixture
def settings(data_dir: Path) -> RunSettings:
    """Run settings pointing at data_dir, without any YAML file."""
    loader = ConfigLoader.create(data_dir / "absent.yaml")
    return loader.build_settings(loader.merge_config({"data_dir": str(data_dir)}))


@pytest.fixture
def mock_logger() -> Mock:
    """Diagnostics sink double; bind() returns the same mock."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def read_csv() -> Callable[[Path], List[List[str]]]:
    """Read a CSV file back into rows."""
    def _read(path: Path) -> List[List[str]]:
        with open(path, newline="") as f:
            return list(csv.reader(f))
    return _read
