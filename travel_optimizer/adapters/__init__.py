"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Schedule storage (CSV files)
- Route solving (best-first search)
- Result output (JSON files)
- Caching systems (in-memory, null)
"""
