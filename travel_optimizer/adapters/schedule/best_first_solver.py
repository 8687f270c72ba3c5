"""Best-first Route Solver adapter.

This adapter wraps the search in graph/search.py and adds:
- Logging
- Memoization of schedules for the graph currently served
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..cache import InMemoryCache
from ...domain.models import OptimalSchedule, PruningPolicy, TravelRequest
from ...graph.search import find_optimal_schedule
from ...ports.cache import CachePort
from ...ports.graph import ScheduleGraph


@dataclass
class BestFirstRouteSolver:
    """Route solver using the multi-criteria best-first search.

    This adapter implements RouteSolverPort. Two requests with the same
    source, destination and criterion share one search as long as the
    graph does not change; call ``reset`` when switching graphs.

    Attributes:
        pruning: Finalization policy passed to the search
        cache: Cache for computed schedules
    """

    pruning: PruningPolicy = PruningPolicy.LOCATION_TIME
    cache: CachePort[OptimalSchedule] = field(
        default_factory=lambda: InMemoryCache(name="schedules")
    )
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: ScheduleGraph, request: TravelRequest) -> OptimalSchedule:
        """Find the optimal itinerary for a request.

        Args:
            graph: The schedule graph.
            request: A request with a validated criterion.

        Returns:
            OptimalSchedule with the winning legs, or an empty schedule
            with value 0 if the destination is unreachable.
        """
        self._logger.debug(
            "Solving request",
            extra={
                "request_id": request.request_id,
                "source": request.source,
                "destination": request.destination,
                "criterion": request.criterion.value,
            },
        )

        key = self._cache_key(request)
        schedule = self.cache.get_or_compute(
            key, lambda: find_optimal_schedule(graph, request, self.pruning)
        )

        if schedule.is_empty and request.source != request.destination:
            self._logger.warning(
                "No route found",
                extra={
                    "request_id": request.request_id,
                    "source": request.source,
                    "destination": request.destination,
                },
            )
        else:
            self._logger.info(
                "Route found",
                extra={
                    "request_id": request.request_id,
                    "legs": schedule.num_legs,
                    "criterion": schedule.criterion.value,
                    "value": schedule.value,
                },
            )

        return schedule

    def reset(self) -> None:
        """Drop memoized schedules."""
        cleared = self.cache.clear()
        self._logger.debug("Solver cache reset", extra={"entries_cleared": cleared})

    def _cache_key(self, request: TravelRequest) -> str:
        # Locations are free text, so no separator is safe to join on.
        return repr(
            (
                request.source,
                request.destination,
                request.criterion.value,
                self.pruning.value,
            )
        )
