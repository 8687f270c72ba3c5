"""Graph ports - Abstractions for schedule loading and routing.

These protocols define the contracts for schedule operations, including
loading the leg catalog and customer requests, and computing optimal
itineraries.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

from ..graph.build_graph import ScheduleGraph

if TYPE_CHECKING:
    from ..domain.models import Leg, OptimalSchedule, RawTravelRequest, TravelRequest

__all__ = ["ScheduleGraph", "ScheduleRepositoryPort", "RouteSolverPort"]


class ScheduleRepositoryPort(Protocol):
    """Port for loading schedule data.

    Implementation: adapters/schedule/csv_repository.py

    The repository turns stored tables into typed records. It does not
    validate criteria; requests come back raw so that a bad criterion
    only fails its own request.
    """

    def load_legs(self, path: Optional[Path] = None) -> Sequence[Leg]:
        """Load the leg catalog.

        Args:
            path: Optional override of the configured schedule table.

        Returns:
            Every leg of the catalog, in file order.
        """
        ...

    def load_requests(self, path: Optional[Path] = None) -> Sequence[RawTravelRequest]:
        """Load customer requests.

        Args:
            path: Optional override of the configured request table.

        Returns:
            Every request, in file order.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/search.py (find_optimal_schedule)

    The solver computes the optimal itinerary for one request.
    """

    def solve(self, graph: ScheduleGraph, request: TravelRequest) -> OptimalSchedule:
        """Find the optimal itinerary for a request.

        Args:
            graph: The schedule graph.
            request: A request with a validated criterion.

        Returns:
            OptimalSchedule, empty when no route exists.
        """
        ...

    def reset(self) -> None:
        """Forget anything memoized for a previous graph."""
        ...
