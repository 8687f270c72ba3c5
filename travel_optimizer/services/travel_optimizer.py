"""Travel optimizer service - Main orchestrator.

Loads the leg catalog and the customer requests, builds the schedule
graph once and solves every request against it, one after the other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Set

from ..domain.errors import TravelOptimizerError
from ..domain.models import OptimalSchedule, TravelPlan
from ..graph.build_graph import build_schedule_graph
from ..ports.graph import RouteSolverPort, ScheduleRepositoryPort
from ..ports.output import ResultWriterPort
from ..times import format_time_of_day


@dataclass
class TravelOptimizerService:
    """Main service computing optimal travel options for a batch.

    This service orchestrates the full pipeline:
    1. Loading legs and requests
    2. Graph construction
    3. One search per request
    4. Optional export of the result mapping

    Attributes:
        schedule_repository: Loads legs and requests
        route_solver: Computes optimal itineraries
        result_writer: Optional writer for the result mapping
        fail_fast: Re-raise the first request error instead of recording it
    """

    schedule_repository: ScheduleRepositoryPort
    route_solver: RouteSolverPort
    result_writer: Optional[ResultWriterPort] = None
    fail_fast: bool = False

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def get_optimal_travel_options(
        self,
        schedule_path: Optional[Path] = None,
        requests_path: Optional[Path] = None,
        output_path: Optional[Path] = None,
    ) -> TravelPlan:
        """Compute the optimal schedule of every request.

        Args:
            schedule_path: Schedule table, defaults to the configured one.
            requests_path: Request table, defaults to the configured one.
            output_path: If given, the plan is also written there.

        Returns:
            TravelPlan mapping request ids to schedules, plus the requests
            that failed and why.

        Raises:
            ScheduleLoadError: If an input table cannot be read.
            ScheduleFormatError: If an input row is malformed.
            TravelOptimizerError: The first request error when
                ``fail_fast`` is set.
        """
        legs = self.schedule_repository.load_legs(schedule_path)
        requests = self.schedule_repository.load_requests(requests_path)

        graph = build_schedule_graph(legs)
        self.route_solver.reset()
        self._logger.info(
            "Schedule graph built",
            extra={"locations": len(graph), "legs": len(legs)},
        )

        schedules: Dict[str, OptimalSchedule] = {}
        failures: Dict[str, str] = {}
        already_there: Set[str] = set()

        for raw in requests:
            request_id = raw.request_id
            if request_id in schedules or request_id in failures:
                self._logger.warning(
                    "Duplicate request id, keeping the last one",
                    extra={"request_id": request_id},
                )
                schedules.pop(request_id, None)
                failures.pop(request_id, None)
                already_there.discard(request_id)

            try:
                request = raw.to_request()
                schedules[request_id] = self.route_solver.solve(graph, request)
                if request.source == request.destination:
                    already_there.add(request_id)
            except TravelOptimizerError as e:
                if self.fail_fast:
                    raise
                self._logger.warning(
                    "Request failed",
                    extra={"request_id": request_id, "error": str(e)},
                )
                failures[request_id] = str(e)

        plan = TravelPlan(
            schedules=schedules,
            failures=failures,
            already_there=frozenset(already_there),
        )
        self._logger.info(
            "Travel options computed",
            extra={
                "requests": len(requests),
                "solved": len(schedules),
                "failed": len(failures),
            },
        )

        if output_path is not None:
            if self.result_writer is None:
                raise TravelOptimizerError(
                    "An output path was given but no result writer is configured"
                )
            self.result_writer.write(plan, output_path)

        return plan

    def format_plan(self, plan: TravelPlan) -> str:
        """Format a travel plan as human-readable text.

        Args:
            plan: The plan to render.

        Returns:
            One block per request, failures last.
        """
        lines = []
        for request_id, schedule in plan.schedules.items():
            lines.append(
                f"{request_id}: {schedule.criterion.value} = {schedule.value}"
            )
            if request_id in plan.already_there:
                lines.append("  Already at destination")
            elif schedule.is_empty:
                lines.append("  No route found")
            for leg in schedule.legs:
                lines.append(
                    f"  {leg.source} -> {leg.destination} [{leg.mode}] "
                    f"{format_time_of_day(leg.departure)}-"
                    f"{format_time_of_day(leg.arrival)}"
                )

        for request_id, error in plan.failures.items():
            lines.append(f"{request_id}: failed ({error})")

        return "\n".join(lines)
