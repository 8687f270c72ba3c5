"""High-level entry point for the Travel Optimizer.

The pipeline is organized in several stages:

1. Input acquisition (schedule and request tables).
2. Graph construction (legs indexed by source location).
3. Route search (one best-first search per request).
4. Result assembly (request id -> optimal schedule).

This module wires these stages together through the default container
without implementing any business logic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from .config import AppConfig, get_config
from .container import Container
from .domain.models import OptimalSchedule, PruningPolicy, TravelPlan
from .services import TravelOptimizerService

PathLike = Union[str, Path]


def build_service(
    *,
    pruning: Optional[PruningPolicy] = None,
    fail_fast: Optional[bool] = None,
    config: Optional[AppConfig] = None,
) -> TravelOptimizerService:
    """Create a TravelOptimizerService, overriding search settings if given."""
    config = config or get_config()

    overrides = {}
    if pruning is not None:
        overrides["pruning"] = PruningPolicy(pruning)
    if fail_fast is not None:
        overrides["fail_fast"] = fail_fast
    if overrides:
        config = config.model_copy(
            update={"search": config.search.model_copy(update=overrides)}
        )

    return Container.create_default(config).resolve(TravelOptimizerService)


def compute_travel_plan(
    schedule_path: PathLike,
    requests_path: PathLike,
    *,
    output_path: Optional[PathLike] = None,
    pruning: Optional[PruningPolicy] = None,
    fail_fast: Optional[bool] = None,
) -> TravelPlan:
    """Solve every request of ``requests_path`` against ``schedule_path``.

    Failed requests are reported in ``TravelPlan.failures``.
    """
    service = build_service(pruning=pruning, fail_fast=fail_fast)
    return service.get_optimal_travel_options(
        Path(schedule_path),
        Path(requests_path),
        output_path=Path(output_path) if output_path is not None else None,
    )


def get_optimal_travel_options(
    schedule_path: PathLike,
    requests_path: PathLike,
    *,
    pruning: Optional[PruningPolicy] = None,
    fail_fast: bool = False,
) -> Dict[str, OptimalSchedule]:
    """Return the optimal schedule of every request, keyed by request id.

    Requests that cannot be solved (e.g. unknown criterion) are left out
    of the mapping unless ``fail_fast`` is set, in which case the first
    such error is raised. Use ``compute_travel_plan`` to see the errors.
    """
    plan = compute_travel_plan(
        schedule_path,
        requests_path,
        pruning=pruning,
        fail_fast=fail_fast,
    )
    return plan.schedules
