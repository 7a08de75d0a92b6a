"""The sorting strategy: small cases by hand, larger ones by cheapest insertion."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice

from .positions import (
    assign_index,
    do_cheapest_move,
    get_cost,
    get_target_position,
    shift_stack,
)
from .stacks import Stacks, is_sorted


def sort_three(stacks: Stacks) -> None:
    """Order the top three elements of a with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("sort_three needs at least three elements on stack a")
    first, second, third = (element.value for element in islice(stacks.a, 3))
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def _push_init(stacks: Stacks) -> None:
    size = len(stacks.a)
    assign_index(stacks)
    if size <= 3:
        sort_three(stacks)
        return
    half = size // 2
    while len(stacks.a) > 3:
        if stacks.a[0].index <= half:
            stacks.pb()
            if len(stacks.b) > 1 and stacks.b[0].index < half // 2:
                stacks.rb()
        elif len(stacks.a) > half:
            stacks.ra()
        else:
            stacks.pb()
    sort_three(stacks)


def sort(stacks: Stacks) -> None:
    """Sort stack a in place, recording the operations used."""
    size = len(stacks.a)
    if size == 2 and not is_sorted(stacks.a):
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size > 3:
        _push_init(stacks)
        while stacks.b:
            get_target_position(stacks)
            get_cost(stacks)
            do_cheapest_move(stacks)
        if not is_sorted(stacks.a):
            shift_stack(stacks)


def push_swap(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values`` (top first) onto stack a."""
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        sort(stacks)
    return stacks.operations