"""End-to-end tests running the pipeline on the bundled sample data."""

from pathlib import Path

from travel_optimizer.domain.models import Criterion, PruningPolicy
from travel_optimizer.pipeline import compute_travel_plan, get_optimal_travel_options

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
SCHEDULES_CSV = DATA_DIR / "schedules.csv"
REQUESTS_CSV = DATA_DIR / "requests.csv"


def test_sample_data_results():
    schedules = get_optimal_travel_options(SCHEDULES_CSV, REQUESTS_CSV)

    assert set(schedules) == {"R1", "R2", "R3", "R4"}

    fastest = schedules["R1"]
    assert fastest.criterion is Criterion.TIME
    assert [leg.mode for leg in fastest.legs] == ["flight"]
    assert fastest.value == 120

    cheapest = schedules["R2"]
    assert [leg.destination for leg in cheapest.legs] == [
        "Agra",
        "Jaipur",
        "Ahmedabad",
        "Mumbai",
    ]
    assert cheapest.value == 1950

    fewest = schedules["R3"]
    assert [leg.destination for leg in fewest.legs] == ["Mumbai", "Pune"]
    assert fewest.value == 2

    assert schedules["R4"].is_empty
    assert schedules["R4"].value == 0


def test_location_pruning_on_sample_data():
    schedules = get_optimal_travel_options(
        SCHEDULES_CSV, REQUESTS_CSV, pruning=PruningPolicy.LOCATION
    )

    assert schedules["R2"].value == 1950


def test_compute_travel_plan_writes_output(tmp_path):
    output = tmp_path / "plan.json"

    plan = compute_travel_plan(SCHEDULES_CSV, REQUESTS_CSV, output_path=output)

    assert output.exists()
    assert not plan.has_failures
