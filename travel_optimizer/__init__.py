"""Top-level package for the Travel Optimizer project.

This package computes, for a batch of customer requests, the best
sequence of connecting transport legs between a source and a destination,
optimizing travel time, cost or number of hops.
"""

VERSION = "0.1.0"

__version__ = VERSION
