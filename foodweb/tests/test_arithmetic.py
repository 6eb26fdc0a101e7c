"""Tests for vitality arithmetic helpers."""

import pytest

from foodweb.arithmetic import checked_add, floor_half, floor_midpoint
from foodweb.constants import VITALITY_MAX


def test_checked_add():
    assert checked_add(10, 5) == 15
    assert checked_add(VITALITY_MAX - 1, 1) == VITALITY_MAX


def test_checked_add_overflow():
    with pytest.raises(OverflowError):
        checked_add(VITALITY_MAX, 1)


def test_floor_half():
    assert floor_half(4) == 2
    assert floor_half(5) == 2
    assert floor_half(1) == 0
    assert floor_half(0) == 0


def test_floor_midpoint_rounds_toward_smaller():
    assert floor_midpoint(10, 4) == 7
    assert floor_midpoint(4, 10) == 7
    assert floor_midpoint(4, 7) == 5
    assert floor_midpoint(7, 4) == 5
    assert floor_midpoint(3, 3) == 3


def test_floor_midpoint_at_range_limit():
    assert floor_midpoint(VITALITY_MAX, VITALITY_MAX) == VITALITY_MAX
    assert floor_midpoint(VITALITY_MAX, VITALITY_MAX - 1) == VITALITY_MAX - 1
