"""Multi-criteria best-first search over scheduled legs.

A generalized Dijkstra: states on the frontier are partial itineraries,
ordered by the three-key ordering of the request's criterion. A leg can
only be boarded if it departs no earlier than the traveller's last
arrival; waiting time counts towards the total time.
"""

import heapq
import itertools
from datetime import time
from typing import List, Optional, Set, Tuple

from ..domain.models import (
    Location,
    OptimalSchedule,
    PruningPolicy,
    SearchState,
    TravelRequest,
)
from .build_graph import ScheduleGraph

FinalizedKey = Tuple[Location, Optional[time]]


def find_optimal_schedule(
    graph: ScheduleGraph,
    request: TravelRequest,
    pruning: PruningPolicy = PruningPolicy.LOCATION_TIME,
) -> OptimalSchedule:
    """Compute the optimal itinerary for a single request.

    Parameters
    ----------
    graph:
        Schedule graph as produced by ``build_schedule_graph``.
    request:
        The request to solve. Its criterion selects the ordering.
    pruning:
        Key used to finalize extracted states, see ``PruningPolicy``.

    Returns
    -------
    OptimalSchedule
        The winning legs and the value of the request's criterion. When
        the destination cannot be reached the schedule is empty with
        value 0. A request whose source is its destination also yields an
        empty schedule with value 0.
    """
    criterion = request.criterion
    counter = itertools.count()

    start = SearchState.initial(request.source)
    heap: List[Tuple[Tuple[int, int, int], int, SearchState]] = [
        (criterion.sort_key(start), next(counter), start)
    ]
    finalized: Set[FinalizedKey] = set()

    while heap:
        _, _, current = heapq.heappop(heap)

        if current.location == request.destination:
            return OptimalSchedule(
                legs=current.path,
                criterion=criterion,
                value=criterion.value_of(current),
            )

        key = _finalized_key(current, pruning)
        if key in finalized:
            continue
        finalized.add(key)

        for leg in graph.get(current.location, ()):
            if not current.can_board(leg):
                continue

            successor = current.extend(leg)
            heapq.heappush(
                heap, (criterion.sort_key(successor), next(counter), successor)
            )

    return OptimalSchedule.empty(criterion)


def _finalized_key(state: SearchState, pruning: PruningPolicy) -> FinalizedKey:
    if pruning is PruningPolicy.LOCATION:
        return (state.location, None)
    return (state.location, state.last_arrival)
