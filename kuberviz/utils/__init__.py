"""Utility functions for kuberviz."""

from kuberviz.utils.formatting import resource_text, small_float
from kuberviz.utils.resource_parser import parse_cpu, parse_memory

__all__ = [
    # Formatting
    "resource_text",
    "small_float",
    # Resource quantities
    "parse_cpu",
    "parse_memory",
]
