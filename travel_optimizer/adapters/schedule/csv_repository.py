"""CSV Schedule Repository adapter.

Reads the two delimited input tables into typed records:

- schedule table: source, destination, mode, departureTime, arrivalTime, cost
- request table: requestId, customerName, source, destination, criteria

The first line of each table is a header and is discarded. Columns are
positional; the header names are not checked.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import (
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from ...config import ScheduleConfig, get_config
from ...domain.errors import ScheduleFormatError, ScheduleLoadError
from ...domain.models import Leg, RawTravelRequest
from ...times import parse_time_of_day

R = TypeVar("R")
FileStamp = Tuple[int, int]

LEG_COLUMNS = 6
REQUEST_COLUMNS = 5


@dataclass
class CSVScheduleRepository:
    """Schedule repository that loads from CSV files.

    This adapter implements ScheduleRepositoryPort. Loaded legs are cached
    per file path and reloaded when the file's size or modification time
    changes.

    Attributes:
        config: Schedule configuration (paths, delimiter, leniency)
    """

    config: ScheduleConfig = field(default_factory=lambda: get_config().schedule)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _legs: Dict[Path, Tuple[FileStamp, Tuple[Leg, ...]]] = field(
        default_factory=dict, repr=False
    )

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_legs(self, path: Optional[Path] = None) -> Sequence[Leg]:
        """Load the leg catalog.

        Args:
            path: Optional override of ``config.schedules_path``.

        Returns:
            Every valid leg in file order.

        Raises:
            ScheduleLoadError: If the file cannot be read.
            ScheduleFormatError: If a row is malformed and
                ``skip_invalid_rows`` is disabled.
        """
        source = Path(path) if path is not None else self.config.schedules_path
        stamp = self._file_stamp(source)
        cached = self._legs.get(source)
        if cached is not None and cached[0] == stamp:
            return cached[1]

        legs = tuple(self._read_table(source, LEG_COLUMNS, _parse_leg))
        self._legs[source] = (stamp, legs)
        self._logger.info(
            "Schedule loaded",
            extra={"path": str(source), "legs": len(legs)},
        )
        return legs

    def load_requests(self, path: Optional[Path] = None) -> Sequence[RawTravelRequest]:
        """Load customer requests.

        Args:
            path: Optional override of ``config.requests_path``.

        Returns:
            Every valid request row in file order, criterion unvalidated.

        Raises:
            ScheduleLoadError: If the file cannot be read.
            ScheduleFormatError: If a row is malformed and
                ``skip_invalid_rows`` is disabled.
        """
        source = Path(path) if path is not None else self.config.requests_path
        requests = list(self._read_table(source, REQUEST_COLUMNS, _parse_request))
        self._logger.info(
            "Requests loaded",
            extra={"path": str(source), "requests": len(requests)},
        )
        return requests

    def clear_cache(self) -> None:
        """Clear cached leg catalogs."""
        self._legs.clear()
        self._logger.debug("Schedule cache cleared")

    def _file_stamp(self, path: Path) -> FileStamp:
        try:
            stat = path.stat()
        except OSError as e:
            raise ScheduleLoadError(
                f"Failed to read {path}",
                file_path=str(path),
                cause=e,
            )
        return stat.st_mtime_ns, stat.st_size

    def _read_table(
        self,
        path: Path,
        columns: int,
        parse_row: Callable[[List[str]], R],
    ) -> List[R]:
        self._logger.debug(
            "Reading table",
            extra={"path": str(path), "columns": columns},
        )

        records: List[R] = []
        try:
            with path.open(newline="", encoding=self.config.encoding) as f:
                for line_number, row in self._data_rows(path, f):
                    try:
                        if len(row) != columns:
                            raise ValueError(
                                f"expected {columns} columns, got {len(row)}"
                            )
                        records.append(parse_row([cell.strip() for cell in row]))
                    except ValueError as e:
                        error = ScheduleFormatError(
                            f"Invalid row in {path.name} at line {line_number}",
                            file_path=str(path),
                            line_number=line_number,
                            cause=e,
                        )
                        if not self.config.skip_invalid_rows:
                            raise error
                        self._logger.warning(
                            "Skipping invalid row",
                            extra={
                                "path": str(path),
                                "line_number": line_number,
                                "error": str(e),
                            },
                        )
        except (OSError, UnicodeDecodeError) as e:
            raise ScheduleLoadError(
                f"Failed to read {path}",
                file_path=str(path),
                cause=e,
            )

        return records

    def _data_rows(
        self, path: Path, lines: Iterable[str]
    ) -> Iterator[Tuple[int, List[str]]]:
        reader = csv.reader(lines, delimiter=self.config.delimiter)
        try:
            next(reader, None)  # header
            for row in reader:
                if not any(cell.strip() for cell in row):
                    continue
                yield reader.line_num, row
        except csv.Error as e:
            # Raised even with skip_invalid_rows; the rest of the file is unusable.
            raise ScheduleFormatError(
                f"Unreadable CSV in {path.name} at line {reader.line_num}",
                file_path=str(path),
                line_number=reader.line_num,
                cause=e,
            )


def _parse_leg(row: List[str]) -> Leg:
    source, destination, mode, departure_str, arrival_str, cost_str = row
    if not source or not destination:
        raise ValueError("source and destination are required")

    departure = parse_time_of_day(departure_str)
    arrival = parse_time_of_day(arrival_str)
    if arrival < departure:
        raise ValueError(
            f"arrival {arrival_str} is before departure {departure_str}; "
            "overnight legs are not supported"
        )

    if not (cost_str.isascii() and cost_str.isdigit()):
        raise ValueError(f"cost must be a non-negative integer, got {cost_str!r}")
    cost = int(cost_str)

    return Leg(
        source=source,
        destination=destination,
        mode=mode,
        departure=departure,
        arrival=arrival,
        cost=cost,
    )


def _parse_request(row: List[str]) -> RawTravelRequest:
    request_id, customer_name, source, destination, criteria = row
    if not request_id:
        raise ValueError("requestId is required")

    return RawTravelRequest(
        request_id=request_id,
        customer_name=customer_name,
        source=source,
        destination=destination,
        criteria=criteria,
    )
