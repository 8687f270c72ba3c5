"""Output adapters - Implementations of the ResultWriterPort."""

from .json_writer import JsonResultWriter

__all__ = ["JsonResultWriter"]
