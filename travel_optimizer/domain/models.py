"""Immutable domain models for the Travel Optimizer.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of the application:
scheduled legs, customer requests, search states and the resulting
optimal schedules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple

from ..times import format_time_of_day, minutes_between
from .errors import InvalidCriterionError

Location = str


class Criterion(str, Enum):
    """Metric used to rank competing itineraries.

    Each criterion defines a three-key ordering over search states:

    - TIME: total minutes, then cost, then hops
    - COST: total cost, then minutes, then hops
    - HOPS: hop count, then minutes, then cost
    """

    TIME = "time"
    COST = "cost"
    HOPS = "hops"

    @classmethod
    def parse(cls, text: str) -> Criterion:
        """Resolve a criterion name, case-insensitively.

        Raises:
            InvalidCriterionError: If ``text`` names no supported criterion.
        """
        normalized = text.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidCriterionError(
            f"Invalid criteria: {text!r}",
            criterion=text,
        )

    def sort_key(self, state: SearchState) -> Tuple[int, int, int]:
        if self is Criterion.TIME:
            return (state.total_minutes, state.total_cost, state.hops)
        if self is Criterion.COST:
            return (state.total_cost, state.total_minutes, state.hops)
        return (state.hops, state.total_minutes, state.total_cost)

    def value_of(self, state: SearchState) -> int:
        """Return the primary metric of ``state`` for this criterion."""
        return self.sort_key(state)[0]


class PruningPolicy(str, Enum):
    """How the search decides a state can be discarded.

    LOCATION_TIME finalizes a (location, arrival time) pair. Later
    connections only depend on when the traveller arrives, so this keeps
    the search optimal.

    LOCATION finalizes a location the first time it is extracted, whatever
    the arrival time. A state that arrives earlier but ranks worse is then
    discarded, even when it was the only one able to catch an onward
    connection. Kept for parity with older results.
    """

    LOCATION_TIME = "location_time"
    LOCATION = "location"


@dataclass(frozen=True, slots=True)
class Leg:
    """One scheduled, directed movement between two locations.

    Attributes:
        source: Departure location
        destination: Arrival location
        mode: Transport mode label (e.g. 'train', 'bus')
        departure: Departure time of day
        arrival: Arrival time of day, never earlier than departure
        cost: Non-negative price of the leg
    """

    source: Location
    destination: Location
    mode: str
    departure: time
    arrival: time
    cost: int = 0

    @property
    def travel_minutes(self) -> int:
        return minutes_between(self.departure, self.arrival)

    def to_dict(self) -> Dict[str, str]:
        return {
            "source": self.source,
            "destination": self.destination,
            "mode": self.mode,
            "departureTime": format_time_of_day(self.departure),
            "arrivalTime": format_time_of_day(self.arrival),
        }


@dataclass(frozen=True, slots=True)
class RawTravelRequest:
    """A request row as read from storage, criterion not yet validated.

    Keeping the criterion raw lets an invalid value fail only its own
    request instead of the whole load.
    """

    request_id: str
    customer_name: str
    source: Location
    destination: Location
    criteria: str

    def to_request(self) -> TravelRequest:
        """Validate the criterion and build a TravelRequest.

        Raises:
            InvalidCriterionError: If the criterion is not supported.
        """
        return TravelRequest(
            request_id=self.request_id,
            customer_name=self.customer_name,
            source=self.source,
            destination=self.destination,
            criterion=Criterion.parse(self.criteria),
        )


@dataclass(frozen=True, slots=True)
class TravelRequest:
    """A customer's request for an optimal itinerary."""

    request_id: str
    customer_name: str
    source: Location
    destination: Location
    criterion: Criterion


@dataclass(frozen=True, slots=True)
class SearchState:
    """A partial itinerary on the search frontier.

    States are never modified: ``extend`` builds a new state with a new
    path tuple, so two states never share a mutable path.

    Attributes:
        location: Where the traveller currently is
        last_arrival: Arrival time of the last leg taken (None at the start)
        path: Legs taken so far, in order
        total_minutes: Travel plus waiting minutes accumulated so far
        total_cost: Sum of the costs of ``path``
        hops: Number of legs in ``path``
    """

    location: Location
    last_arrival: Optional[time] = None
    path: Tuple[Leg, ...] = field(default_factory=tuple)
    total_minutes: int = 0
    total_cost: int = 0
    hops: int = 0

    @classmethod
    def initial(cls, location: Location) -> SearchState:
        return cls(location=location)

    def can_board(self, leg: Leg) -> bool:
        """Check whether ``leg`` departs no earlier than our last arrival."""
        if self.last_arrival is None:
            return True
        return leg.departure >= self.last_arrival

    def extend(self, leg: Leg) -> SearchState:
        """Return the state reached by taking ``leg`` from this state."""
        waiting = 0
        if self.last_arrival is not None:
            waiting = minutes_between(self.last_arrival, leg.departure)

        return SearchState(
            location=leg.destination,
            last_arrival=leg.arrival,
            path=self.path + (leg,),
            total_minutes=self.total_minutes + leg.travel_minutes + waiting,
            total_cost=self.total_cost + leg.cost,
            hops=self.hops + 1,
        )


@dataclass(frozen=True, slots=True)
class OptimalSchedule:
    """Best itinerary found for one request.

    An empty ``legs`` tuple with value 0 means no route exists (or the
    source already is the destination).

    Attributes:
        legs: The winning sequence of legs
        criterion: Criterion used to select it
        value: Value of that criterion for the winning path
    """

    legs: Tuple[Leg, ...]
    criterion: Criterion
    value: int = 0

    @classmethod
    def empty(cls, criterion: Criterion) -> OptimalSchedule:
        return cls(legs=(), criterion=criterion, value=0)

    @property
    def is_empty(self) -> bool:
        """Check if the schedule has no legs."""
        return len(self.legs) == 0

    @property
    def num_legs(self) -> int:
        return len(self.legs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "routes": [leg.to_dict() for leg in self.legs],
            "criteria": self.criterion.value,
            "value": self.value,
        }


@dataclass(frozen=True, slots=True)
class TravelPlan:
    """Outcome of a batch of requests.

    Attributes:
        schedules: Optimal schedule per request id, in request order
        failures: Error message per request id that could not be solved
        already_there: Ids of requests whose source is their destination
    """

    schedules: Dict[str, OptimalSchedule] = field(default_factory=dict)
    failures: Dict[str, str] = field(default_factory=dict)
    already_there: FrozenSet[str] = frozenset()

    @property
    def has_failures(self) -> bool:
        return len(self.failures) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schedules": {
                request_id: schedule.to_dict()
                for request_id, schedule in self.schedules.items()
            },
            "failures": dict(self.failures),
        }
