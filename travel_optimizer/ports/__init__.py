"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .cache import CachePort
from .graph import RouteSolverPort, ScheduleGraph, ScheduleRepositoryPort
from .output import ResultWriterPort

__all__ = [
    # Graph
    "ScheduleGraph",
    "ScheduleRepositoryPort",
    "RouteSolverPort",
    # Output
    "ResultWriterPort",
    # Cache
    "CachePort",
]
