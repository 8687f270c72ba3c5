"""Typed domain errors for the Travel Optimizer.

All errors inherit from TravelOptimizerError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TravelOptimizerError(Exception):
    """Base error for the travel optimizer domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidCriterionError(TravelOptimizerError):
    """A request asked for an optimization criterion we do not support.

    Attributes:
        criterion: The raw criterion value as supplied by the caller
    """

    criterion: str = ""


@dataclass
class ScheduleFormatError(TravelOptimizerError):
    """A row of an input table could not be turned into a typed record.

    Attributes:
        file_path: Path to the offending file if known
        line_number: 1-based line number of the offending row
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class ScheduleLoadError(TravelOptimizerError):
    """An input table could not be read at all.

    Attributes:
        file_path: Path to the file that failed to load
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(TravelOptimizerError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
