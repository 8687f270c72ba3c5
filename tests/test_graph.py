from datetime import time

import pytest

from conftest import make_leg
from travel_optimizer.domain.models import (
    Criterion,
    PruningPolicy,
    TravelRequest,
)
from travel_optimizer.graph.build_graph import build_schedule_graph
from travel_optimizer.graph.search import find_optimal_schedule
from travel_optimizer.times import minutes_between


def request(source, destination, criterion, request_id="R1"):
    return TravelRequest(
        request_id=request_id,
        customer_name="Test",
        source=source,
        destination=destination,
        criterion=Criterion(criterion),
    )


NETWORK = [
    make_leg("A", "B", "06:00", "08:00", 50),
    make_leg("A", "C", "06:30", "07:00", 5),
    make_leg("C", "B", "07:30", "09:00", 10),
    make_leg("C", "D", "07:10", "07:40", 3),
    make_leg("D", "B", "08:00", "08:20", 4),
    make_leg("B", "E", "08:30", "09:00", 7),
    make_leg("B", "E", "09:30", "10:00", 2),
    make_leg("D", "E", "07:00", "07:30", 1),
]


def test_build_schedule_graph_indexes_every_leg_by_source():
    graph = build_schedule_graph(NETWORK)

    assert set(graph) == {"A", "B", "C", "D"}
    assert sum(len(legs) for legs in graph.values()) == len(NETWORK)
    for location, legs in graph.items():
        assert all(leg.source == location for leg in legs)


def test_build_schedule_graph_keeps_input_order():
    graph = build_schedule_graph(NETWORK)

    assert list(graph["A"]) == [NETWORK[0], NETWORK[1]]
    assert list(graph["B"]) == [NETWORK[5], NETWORK[6]]


def test_build_schedule_graph_empty_catalog():
    assert dict(build_schedule_graph([])) == {}


def test_terminal_destination_is_not_a_key():
    graph = build_schedule_graph([make_leg("A", "B", "09:00", "10:00")])

    assert "B" not in graph


def test_single_leg_time():
    leg = make_leg("A", "B", "09:00", "10:00", 5)
    graph = build_schedule_graph([leg])

    schedule = find_optimal_schedule(graph, request("A", "B", "time"))

    assert schedule.legs == (leg,)
    assert schedule.criterion is Criterion.TIME
    assert schedule.value == 60


def test_cost_prefers_cheaper_connection_over_faster_direct_leg():
    direct = make_leg("A", "B", "09:00", "10:00", 5)
    first = make_leg("A", "C", "08:00", "08:30", 1)
    second = make_leg("C", "B", "08:45", "09:30", 1)
    graph = build_schedule_graph([direct, first, second])

    by_cost = find_optimal_schedule(graph, request("A", "B", "cost"))
    by_time = find_optimal_schedule(graph, request("A", "B", "time"))

    assert by_cost.legs == (first, second)
    assert by_cost.value == 2
    assert by_time.legs == (direct,)
    assert by_time.value == 60


def test_hops_tie_broken_by_total_time():
    short = make_leg("A", "B", "08:00", "09:00", 10)
    long = make_leg("A", "B", "07:00", "09:30", 10)
    graph = build_schedule_graph([long, short])

    schedule = find_optimal_schedule(graph, request("A", "B", "hops"))

    assert schedule.legs == (short,)
    assert schedule.legs[0].departure == time(8, 0)
    assert schedule.value == 1


def test_time_tie_broken_by_cost():
    expensive = make_leg("A", "B", "08:00", "09:00", 10)
    cheap = make_leg("A", "B", "10:00", "11:00", 3)
    graph = build_schedule_graph([expensive, cheap])

    schedule = find_optimal_schedule(graph, request("A", "B", "time"))

    assert schedule.legs == (cheap,)
    assert schedule.value == 60


def test_unreachable_destination_returns_empty_schedule():
    graph = build_schedule_graph([make_leg("A", "C", "09:00", "10:00", 5)])

    schedule = find_optimal_schedule(graph, request("A", "B", "cost"))

    assert schedule.is_empty
    assert schedule.value == 0
    assert schedule.criterion is Criterion.COST


def test_unknown_source_returns_empty_schedule():
    graph = build_schedule_graph(NETWORK)

    schedule = find_optimal_schedule(graph, request("Z", "B", "time"))

    assert schedule.is_empty
    assert schedule.value == 0


@pytest.mark.parametrize("criterion", ["time", "cost", "hops"])
def test_same_source_and_destination(criterion):
    graph = build_schedule_graph(NETWORK)

    schedule = find_optimal_schedule(graph, request("A", "A", criterion))

    assert schedule.legs == ()
    assert schedule.value == 0


def test_connection_departing_before_arrival_is_rejected():
    graph = build_schedule_graph(
        [
            make_leg("A", "C", "08:00", "09:00", 1),
            make_leg("C", "B", "08:30", "09:30", 1),
        ]
    )

    schedule = find_optimal_schedule(graph, request("A", "B", "time"))

    assert schedule.is_empty


def test_connection_departing_at_arrival_time_is_feasible():
    first = make_leg("A", "C", "08:00", "09:00", 1)
    second = make_leg("C", "B", "09:00", "09:30", 1)
    graph = build_schedule_graph([first, second])

    schedule = find_optimal_schedule(graph, request("A", "B", "time"))

    assert schedule.legs == (first, second)
    assert schedule.value == 90


def test_waiting_time_counts_towards_total_time():
    first = make_leg("A", "C", "08:00", "08:30", 1)
    second = make_leg("C", "B", "09:00", "09:30", 1)
    graph = build_schedule_graph([first, second])

    schedule = find_optimal_schedule(graph, request("A", "B", "time"))

    # 30 travel + 30 waiting + 30 travel
    assert schedule.value == 90


def _cheap_but_late_network():
    early_expensive = make_leg("A", "C", "08:00", "09:00", 10)
    late_cheap = make_leg("A", "C", "10:00", "11:00", 1)
    onward = make_leg("C", "B", "09:30", "10:00", 1)
    return early_expensive, late_cheap, onward


def test_location_time_pruning_keeps_earlier_arrival_alive():
    early_expensive, late_cheap, onward = _cheap_but_late_network()
    graph = build_schedule_graph([early_expensive, late_cheap, onward])

    schedule = find_optimal_schedule(graph, request("A", "B", "cost"))

    assert schedule.legs == (early_expensive, onward)
    assert schedule.value == 11


def test_location_pruning_discards_later_states_at_same_location():
    early_expensive, late_cheap, onward = _cheap_but_late_network()
    graph = build_schedule_graph([early_expensive, late_cheap, onward])

    schedule = find_optimal_schedule(
        graph, request("A", "B", "cost"), pruning=PruningPolicy.LOCATION
    )

    assert schedule.is_empty


def test_search_terminates_on_cycles():
    graph = build_schedule_graph(
        [
            make_leg("A", "C", "08:00", "08:00", 0),
            make_leg("C", "A", "08:00", "08:00", 0),
        ]
    )

    schedule = find_optimal_schedule(graph, request("A", "B", "hops"))

    assert schedule.is_empty


def test_graph_is_not_mutated_by_search():
    graph = build_schedule_graph(NETWORK)
    snapshot = {location: tuple(legs) for location, legs in graph.items()}

    for criterion in ("time", "cost", "hops"):
        find_optimal_schedule(graph, request("A", "E", criterion))

    assert {location: tuple(legs) for location, legs in graph.items()} == snapshot


@pytest.mark.parametrize("criterion", ["time", "cost", "hops"])
def test_reported_value_matches_path(criterion):
    graph = build_schedule_graph(NETWORK)

    schedule = find_optimal_schedule(graph, request("A", "E", criterion))

    legs = schedule.legs
    assert legs
    assert legs[0].source == "A"
    assert legs[-1].destination == "E"
    for previous, following in zip(legs, legs[1:]):
        assert previous.destination == following.source
        assert following.departure >= previous.arrival

    total_minutes = sum(leg.travel_minutes for leg in legs) + sum(
        minutes_between(previous.arrival, following.departure)
        for previous, following in zip(legs, legs[1:])
    )
    expected = {
        "time": total_minutes,
        "cost": sum(leg.cost for leg in legs),
        "hops": len(legs),
    }[criterion]
    assert schedule.value == expected


def test_network_optimal_paths():
    graph = build_schedule_graph(NETWORK)

    by_time = find_optimal_schedule(graph, request("A", "E", "time"))
    by_cost = find_optimal_schedule(graph, request("A", "E", "cost"))
    by_hops = find_optimal_schedule(graph, request("A", "E", "hops"))

    # D -> E leaves at 07:00, before anyone can reach D
    assert [leg.destination for leg in by_time.legs] == ["C", "D", "B", "E"]
    assert by_time.value == 150
    assert [leg.destination for leg in by_cost.legs] == ["C", "D", "B", "E"]
    assert by_cost.value == 14
    assert [leg.destination for leg in by_hops.legs] == ["B", "E"]
    assert by_hops.value == 2
