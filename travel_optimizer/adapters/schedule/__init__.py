"""Schedule adapters - Implementations of graph-related ports.

Available implementations:
- CSVScheduleRepository: Loads legs and requests from CSV files
- BestFirstRouteSolver: Finds optimal itineraries with a best-first search
"""

from .best_first_solver import BestFirstRouteSolver
from .csv_repository import CSVScheduleRepository

__all__ = ["CSVScheduleRepository", "BestFirstRouteSolver"]
