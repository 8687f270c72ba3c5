"""Services layer - Application orchestration.

Available services:
- TravelOptimizerService: Computes optimal travel options for a batch
"""

from .travel_optimizer import TravelOptimizerService

__all__ = ["TravelOptimizerService"]
