"""Number formatting helpers for tooltip text."""

from __future__ import annotations


def small_float(value: float) -> str:
    """Render integers bare and everything else with two decimals.

    Examples:
        >>> small_float(4.0)
        '4'
        >>> small_float(0.5)
        '0.50'
    """
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def resource_text(cpu: float, memory: float) -> str:
    """Format a cpu/memory pair the way every tooltip shows it."""
    return f"cpu={small_float(cpu)}, mem={small_float(memory)}"
