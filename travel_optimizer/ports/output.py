"""Output port - Abstraction for externalizing batch results."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import TravelPlan


class ResultWriterPort(Protocol):
    """Port for writing a travel plan.

    Implementation: adapters/output/json_writer.py
    """

    def write(self, plan: TravelPlan, output_path: Path) -> Path:
        """Write the plan and return the path of the written file.

        Args:
            plan: Result mapping of a batch run.
            output_path: Destination file.

        Returns:
            Path to the written file.
        """
        ...
