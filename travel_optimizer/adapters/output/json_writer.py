"""JSON result writer adapter.

Externalizes a TravelPlan as a JSON document:

    {
      "schedules": {
        "<requestId>": {
          "routes": [{"source", "destination", "mode",
                      "departureTime", "arrivalTime"}, ...],
          "criteria": "time",
          "value": 60
        }
      },
      "failures": {"<requestId>": "<error message>"}
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from ...domain.errors import TravelOptimizerError
from ...domain.models import TravelPlan


@dataclass
class JsonResultWriter:
    """Result writer producing indented UTF-8 JSON.

    This adapter implements ResultWriterPort.
    """

    indent: int = 2
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def write(self, plan: TravelPlan, output_path: Path) -> Path:
        """Write ``plan`` to ``output_path``, creating parent directories.

        Raises:
            TravelOptimizerError: If the file cannot be written.
        """
        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with output_path.open("w", encoding="utf-8") as f:
                json.dump(plan.to_dict(), f, indent=self.indent)
                f.write("\n")
        except OSError as e:
            raise TravelOptimizerError(f"Failed to write {output_path}", cause=e)

        self._logger.info(
            "Travel plan written",
            extra={
                "path": str(output_path),
                "schedules": len(plan.schedules),
                "failures": len(plan.failures),
            },
        )
        return output_path
