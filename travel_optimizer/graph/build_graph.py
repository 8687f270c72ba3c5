"""Schedule graph construction.

This module defines the ScheduleGraph type used throughout the project:
an adjacency mapping from a location to the legs departing from it.
"""

from typing import Dict, Iterable, Mapping, Sequence, Tuple

from ..domain.models import Leg, Location

ScheduleGraph = Mapping[Location, Sequence[Leg]]


def build_schedule_graph(legs: Iterable[Leg]) -> ScheduleGraph:
    """Index legs by their source location.

    Legs keep their input order within each location. Destinations that
    never appear as a source are not added as keys; terminal locations
    simply have no outbound legs. An empty catalog yields an empty graph.

    The returned mapping holds tuples and is never mutated afterwards, so
    it can be shared between searches.
    """
    grouped: Dict[Location, list[Leg]] = {}
    for leg in legs:
        grouped.setdefault(leg.source, []).append(leg)

    graph: Dict[Location, Tuple[Leg, ...]] = {
        location: tuple(outbound) for location, outbound in grouped.items()
    }
    return graph
