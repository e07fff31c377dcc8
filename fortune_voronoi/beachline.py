"""Beach-line geometry and the sweep-dependent ordering of arcs.

The order of arcs changes with the sweep position, so every comparison takes
``sweep_y`` as an explicit argument.  :class:`BeachLine` stores the arcs in a
list kept in left-to-right order and searches it with :mod:`bisect` using a
key built from :func:`compare_arcs` for the current position.
"""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from functools import cmp_to_key, partial
from numbers import Real
from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence, Tuple, Union

from .geometry import Point, Site

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .model import Arc

Operand = Union["Arc", float]


def parabola_y(site: Site, x: float, sweep_y: float) -> float:
    """Height at ``x`` of the parabola with focus ``site`` and directrix ``sweep_y``."""

    height = site.y - sweep_y
    dx = x - site.x
    return dx * dx / (2.0 * height) + (site.y + sweep_y) * 0.5


def breakpoint_x(site1: Site, site2: Site, sweep_y: float) -> float:
    """x of the breakpoint with ``site1``'s arc on the left and ``site2``'s on the right."""

    x1, y1 = site1.x, site1.y
    x2, y2 = site2.x, site2.y
    if y1 == y2:
        return (x1 + x2) * 0.5
    if y1 == sweep_y:
        return x1
    if y2 == sweep_y:
        return x2

    z1 = 2.0 * (y1 - sweep_y)
    z2 = 2.0 * (y2 - sweep_y)
    a = 1.0 / z1 - 1.0 / z2
    b = -2.0 * (x1 / z1 - x2 / z2)
    c = (x1 * x1 + (y1 - sweep_y) * (y1 + sweep_y)) / z1 - (
        x2 * x2 + (y2 - sweep_y) * (y2 + sweep_y)
    ) / z2
    root = math.sqrt(max(b * b - 4.0 * a * c, 0.0))
    q = -0.5 * (b + math.copysign(root, b))
    if q == 0.0:
        return (x1 + x2) * 0.5
    lo, hi = sorted((q / a, c / q))
    # the lower (narrower) parabola wins between the roots
    return lo if y1 > y2 else hi


def breakpoint_point(site1: Site, site2: Site, sweep_y: float) -> Point:
    x = breakpoint_x(site1, site2, sweep_y)
    focus = site1 if site1.y >= site2.y else site2
    if focus.y == sweep_y:
        return x, math.inf
    return x, parabola_y(focus, x, sweep_y)


def _extent(operand: Operand, sweep_y: float) -> Tuple[float, float]:
    if isinstance(operand, Real):
        x = float(operand)
        return x, x
    return operand.left_x(sweep_y), operand.right_x(sweep_y)


def _sign(value: float) -> int:
    return (value > 0.0) - (value < 0.0)


def compare_arcs(lhs: Operand, rhs: Operand, sweep_y: float) -> int:
    """Three-way comparison of beach-line entries at sweep position ``sweep_y``.

    An operand is an arc or a bare x (query mode).  An arc covers
    ``[left_x, right_x)``; a query compares equal to the arc covering it.
    """

    lhs_query = isinstance(lhs, Real)
    rhs_query = isinstance(rhs, Real)
    if lhs_query and rhs_query:
        return _sign(float(lhs) - float(rhs))
    if lhs_query:
        lo, hi = _extent(rhs, sweep_y)
        x = float(lhs)
        if x < lo:
            return -1
        return 0 if x < hi else 1
    if rhs_query:
        return -compare_arcs(rhs, lhs, sweep_y)

    if lhs is rhs:
        return 0
    lhs_lo, lhs_hi = _extent(lhs, sweep_y)
    rhs_lo, rhs_hi = _extent(rhs, sweep_y)
    if lhs_lo != rhs_lo:
        return -1 if lhs_lo < rhs_lo else 1
    if lhs_hi != rhs_hi:
        return -1 if lhs_hi < rhs_hi else 1
    return 0


def arc_key(sweep_y: float):
    return cmp_to_key(partial(compare_arcs, sweep_y=sweep_y))


class BeachLine:
    """Arcs of the beach line in left-to-right order."""

    def __init__(self) -> None:
        self._arcs: List["Arc"] = []

    def __len__(self) -> int:
        return len(self._arcs)

    def __iter__(self) -> Iterator["Arc"]:
        return iter(self._arcs)

    def insert_first(self, arc: "Arc") -> None:
        if self._arcs:
            raise ValueError("beach line already holds arcs")
        self._arcs.append(arc)

    def locate(self, x: float, sweep_y: float) -> "Arc":
        """Return the arc directly above ``x``."""

        if not self._arcs:
            raise LookupError("beach line is empty")
        key = arc_key(sweep_y)
        idx = bisect_right(self._arcs, key(float(x)), key=key) - 1
        return self._arcs[max(idx, 0)]

    def index_of(self, arc: "Arc", sweep_y: float) -> int:
        key = arc_key(sweep_y)
        guess = bisect_left(self._arcs, key(arc), key=key)
        for idx in range(max(guess - 2, 0), min(guess + 3, len(self._arcs))):
            if self._arcs[idx] is arc:
                return idx
        # rounding near a vanishing arc can break the local order
        for idx, candidate in enumerate(self._arcs):
            if candidate is arc:
                return idx
        raise LookupError(f"arc for {arc.site!r} is not on the beach line")

    def neighbors(self, arc: "Arc", sweep_y: float) -> Tuple[Optional["Arc"], Optional["Arc"]]:
        idx = self.index_of(arc, sweep_y)
        left = self._arcs[idx - 1] if idx > 0 else None
        right = self._arcs[idx + 1] if idx + 1 < len(self._arcs) else None
        return left, right

    def replace(self, arc: "Arc", new_arcs: Sequence["Arc"], sweep_y: float) -> None:
        idx = self.index_of(arc, sweep_y)
        self._arcs[idx : idx + 1] = list(new_arcs)

    def remove(self, arc: "Arc", sweep_y: float) -> None:
        del self._arcs[self.index_of(arc, sweep_y)]

    def sites(self) -> List[Site]:
        return [arc.site for arc in self._arcs]

    def is_ordered(self, sweep_y: float) -> bool:
        return all(
            compare_arcs(left, right, sweep_y) <= 0
            for left, right in zip(self._arcs, self._arcs[1:])
        )


__all__ = [
    "BeachLine",
    "arc_key",
    "breakpoint_point",
    "breakpoint_x",
    "compare_arcs",
    "parabola_y",
]
