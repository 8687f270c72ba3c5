"""Graph-related utilities for representing the schedule network.

This subpackage contains modules to build an in-memory graph from
scheduled legs and to run the multi-criteria search on top of it.
"""

from .build_graph import ScheduleGraph, build_schedule_graph
from .search import find_optimal_schedule

__all__ = ["ScheduleGraph", "build_schedule_graph", "find_optimal_schedule"]
