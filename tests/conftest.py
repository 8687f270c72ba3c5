"""Shared fixtures for the travel optimizer tests."""

from pathlib import Path
from typing import Callable

import pytest

from travel_optimizer.config import reset_config
from travel_optimizer.container import reset_container
from travel_optimizer.domain.models import Leg
from travel_optimizer.times import parse_time_of_day

SCHEDULE_HEADER = "source,destination,mode,departureTime,arrivalTime,cost"
REQUEST_HEADER = "requestId,customerName,source,destination,criteria"


def make_leg(
    source: str,
    destination: str,
    departure: str,
    arrival: str,
    cost: int = 0,
    mode: str = "train",
) -> Leg:
    return Leg(
        source=source,
        destination=destination,
        mode=mode,
        departure=parse_time_of_day(departure),
        arrival=parse_time_of_day(arrival),
        cost=cost,
    )


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Make every test start from default configuration."""
    for name in (
        "TRAVEL_SEARCH_PRUNING",
        "TRAVEL_SEARCH_FAIL_FAST",
        "TRAVEL_SCHEDULE_SKIP_INVALID_ROWS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write a header plus rows to a CSV file under tmp_path."""

    def _write(name: str, header: str, *rows: str) -> Path:
        path = tmp_path / name
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def schedule_csv(write_csv) -> Path:
    return write_csv(
        "schedules.csv",
        SCHEDULE_HEADER,
        "A,B,train,09:00,10:00,5",
        "A,C,bus,08:00,08:30,1",
        "C,B,bus,08:45,09:30,1",
    )


@pytest.fixture
def requests_csv(write_csv) -> Path:
    return write_csv(
        "requests.csv",
        REQUEST_HEADER,
        "R1,Alice,A,B,time",
        "R2,Bob,A,B,cost",
        "R3,Carol,A,B,hops",
    )
