"""Ranking, positions, move costs and the cheapest-move step of the sorter."""

from __future__ import annotations

from collections import deque

from .parsing import INT_MIN
from .stacks import Element, Stacks


def assign_index(stacks: Stacks) -> None:
    """Give each element of stack a its rank by value, the smallest being 0.

    The largest value gets ``len(a) - 1`` and ranks are handed out downwards
    to 1; the smallest element keeps index 0. An element holding the lowest
    32-bit integer is never picked and so also keeps 0.
    """
    size = len(stacks.a)
    ranked = sorted(stacks.a, key=lambda element: element.value, reverse=True)
    for element, rank in zip(ranked, range(size - 1, 0, -1)):
        if element.value > INT_MIN:
            element.index = rank


def update_positions(stack: deque[Element]) -> None:
    """Store in each element its distance from the top of its stack."""
    for position, element in enumerate(stack):
        element.pos = position


def _target_position(a: deque[Element], b_index: int) -> int:
    above = [element for element in a if element.index > b_index]
    chosen = min(above or a, key=lambda element: element.index)
    return chosen.pos


def get_target_position(stacks: Stacks) -> None:
    """For each element of b, find the position in a it should be pushed on.

    The target is the element of a with the smallest index above the b
    element's index; when there is none, the element of a with the smallest
    index overall.
    """
    update_positions(stacks.a)
    update_positions(stacks.b)
    for element in stacks.b:
        element.target_pos = _target_position(stacks.a, element.index)


def _rotation_cost(position: int, size: int) -> int:
    if position > size // 2:
        return position - size
    return position


def get_cost(stacks: Stacks) -> None:
    """Compute, for each element of b, the rotations that bring it and its target up.

    A positive cost counts forward rotations, a negative one reverse rotations.
    """
    size_a = len(stacks.a)
    size_b = len(stacks.b)
    for element in stacks.b:
        element.cost_b = _rotation_cost(element.pos, size_b)
        element.cost_a = _rotation_cost(element.target_pos, size_a)


def do_cheapest_move(stacks: Stacks) -> None:
    """Bring the cheapest element of b and its target to the tops and push it to a."""
    if not stacks.b:
        raise ValueError("stack b is empty")
    cheapest = min(stacks.b, key=lambda element: abs(element.cost_a) + abs(element.cost_b))
    cost_a, cost_b = cheapest.cost_a, cheapest.cost_b

    while cost_a < 0 and cost_b < 0:
        stacks.rrr()
        cost_a += 1
        cost_b += 1
    while cost_a > 0 and cost_b > 0:
        stacks.rr()
        cost_a -= 1
        cost_b -= 1

    for _ in range(max(cost_a, 0)):
        stacks.ra()
    for _ in range(max(-cost_a, 0)):
        stacks.rra()
    for _ in range(max(cost_b, 0)):
        stacks.rb()
    for _ in range(max(-cost_b, 0)):
        stacks.rrb()

    stacks.pa()


def shift_stack(stacks: Stacks) -> None:
    """Rotate stack a, the short way round, until its lowest index is on top."""
    size = len(stacks.a)
    if not size:
        return
    lowest_pos = min(enumerate(stacks.a), key=lambda item: item[1].index)[0]
    if lowest_pos > size // 2:
        for _ in range(size - lowest_pos):
            stacks.rra()
    else:
        for _ in range(lowest_pos):
            stacks.ra()