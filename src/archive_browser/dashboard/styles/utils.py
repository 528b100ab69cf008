"""
Dashboard formatting helpers.
"""

from typing import Optional


def format_progress(current: int, total: int, percent: Optional[int]) -> str:
    """Progress text of a job, e.g. '42% (4.2K / 10K)'.

    Args:
        current: Units done
        total: Units expected, 0 when unknown
        percent: Precomputed percentage or None

    Returns:
        Display string, empty when nothing is known
    """
    if percent is None:
        return format_count(current) if current else ""
    return f"{percent}% ({format_count(current)} / {format_count(total)})"


def format_count(count: int) -> str:
    """1500000 -> '1.5M'"""
    if count >= 1_000_000:
        return f"{count / 1_000_000:.1f}M"
    elif count >= 1_000:
        return f"{count / 1_000:.1f}K"
    return str(count)
