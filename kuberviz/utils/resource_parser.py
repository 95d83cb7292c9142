"""Resource parsing utilities for CPU and memory values.

Converts Kubernetes resource quantity strings into the units the layout
engine draws with:
- CPU: parsed to cores (float)
- Memory: parsed to Gi (gibibytes)

Unlike a lenient display parser, every function here raises
``ResourceParseError`` on malformed input so that the caller can record
the offending quantity instead of silently drawing a zero.
"""

from __future__ import annotations

import logging
import re

from kuberviz.models.errors import ResourceParseError

logger = logging.getLogger(__name__)

# Suffix divisors for parse_memory() to normalize to Gi.
_MEMORY_GI_DIVISORS: tuple[tuple[str, float], ...] = (
    ("Ki", 1024 * 1024.0),
    ("Mi", 1024.0),
    ("Gi", 1.0),
)
# Quantities without a recognized suffix share the Mi divisor.
_MEMORY_DEFAULT_DIVISOR = 1024.0
_CPU_MILLI_SUFFIX = "m"
_CPU_MILLI_DIVISOR = 1000.0
# Plain ASCII digits only: no sign, underscores or other Unicode digits.
_INTEGER_RE = re.compile(r"[0-9]+")


def _scaled_integer(number: str, divisor: float, value: object, kind: str) -> float:
    if not _INTEGER_RE.fullmatch(number):
        logger.error(f"failed to parse {kind} for value={value!r}, number={number!r}")
        raise ResourceParseError(value, kind)
    try:
        return int(number) / divisor
    except (OverflowError, ValueError) as exc:
        logger.error(f"{kind} quantity out of range for value={value!r}")
        raise ResourceParseError(value, kind) from exc


def parse_cpu(cpu_str: str) -> float:
    """Parse CPU string to cores (float).

    Handles:
    - Millicores: "500m" -> 0.5 cores
    - Integer: "4" -> 4.0 cores

    Args:
        cpu_str: CPU value as string (e.g., "100m", "2")

    Returns:
        CPU value in cores as float.

    Raises:
        ResourceParseError: If the numeric part is not a plain non-negative
            integer, or is too large to represent.
    """
    if not isinstance(cpu_str, str):
        raise ResourceParseError(cpu_str, "cpu")

    number = cpu_str.strip()
    divisor = 1.0
    if number.endswith(_CPU_MILLI_SUFFIX):
        number = number[: -len(_CPU_MILLI_SUFFIX)]
        divisor = _CPU_MILLI_DIVISOR

    return _scaled_integer(number, divisor, cpu_str, "cpu")


def parse_memory(memory_str: str) -> float:
    """Parse memory string to gibibytes (float).

    Handles:
    - Ki: "1048576Ki" -> 1.0
    - Mi: "512Mi" -> 0.5
    - Gi: "2Gi" -> 2.0
    - anything else is divided by 1024, the same as Mi

    Args:
        memory_str: Memory value as string (e.g., "512Mi", "1Gi")

    Returns:
        Memory value in Gi as float.

    Raises:
        ResourceParseError: If the numeric part is not a plain non-negative
            integer, or is too large to represent.
    """
    if not isinstance(memory_str, str):
        raise ResourceParseError(memory_str, "memory")

    number = memory_str.strip()
    divisor = _MEMORY_DEFAULT_DIVISOR
    for suffix, suffix_divisor in _MEMORY_GI_DIVISORS:
        if number.endswith(suffix):
            number = number[: -len(suffix)]
            divisor = suffix_divisor
            break

    return _scaled_integer(number, divisor, memory_str, "memory")
