"""
Vitality arithmetic.

Encounter results only ever add and average vitality. These helpers keep
every result inside [VITALITY_MIN, VITALITY_MAX] and report overflow instead
of wrapping around.
"""

from .constants import VITALITY_MAX


def checked_add(a: int, b: int) -> int:
    """
    Add two vitalities.

    Raises:
        OverflowError: if the sum exceeds VITALITY_MAX
    """
    total = a + b
    if total > VITALITY_MAX:
        raise OverflowError(f"Vitality overflow: {a} + {b} exceeds {VITALITY_MAX}")
    return total


def floor_half(a: int) -> int:
    """Half a vitality, rounded down"""
    return a // 2


def floor_midpoint(a: int, b: int) -> int:
    """
    Integer midpoint of two vitalities, rounded toward the smaller one.

    Computed as low + (high - low) // 2 so the intermediate value never
    leaves the vitality range.
    """
    low, high = min(a, b), max(a, b)
    return low + (high - low) // 2
