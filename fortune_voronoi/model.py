"""Core data structures shared by the sweep components."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

from .beachline import breakpoint_point, breakpoint_x
from .geometry import Point, Site

EdgeEnd = Literal["start", "end"]


@dataclass(eq=False)
class Edge:
    """Voronoi edge separating ``site1`` and ``site2``.

    ``start`` and ``end`` stay ``None`` while the edge is still traced by an
    active breakpoint.  Every edge returned by a finished sweep has both set.
    """

    site1: Site
    site2: Site
    start: Optional[Point] = None
    end: Optional[Point] = None

    @property
    def sites(self) -> Tuple[Site, Site]:
        return self.site1, self.site2

    @property
    def is_finished(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def length(self) -> float:
        if not self.is_finished:
            return math.inf
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])

    def seal(self, which: EdgeEnd, point: Point) -> None:
        setattr(self, which, (float(point[0]), float(point[1])))

    def __repr__(self) -> str:
        return (
            f"Edge(sites=({self.site1.index}, {self.site2.index}), "
            f"start={self.start!r}, end={self.end!r})"
        )


@dataclass(eq=False)
class BreakPoint:
    """Meeting point of ``site1``'s arc (left) and ``site2``'s arc (right).

    Hashing and equality are by instance: the same site pair can be traced by
    different breakpoints at different times.
    """

    site1: Site
    site2: Site
    edge: Edge
    seals: EdgeEnd = "end"

    def x(self, sweep_y: float) -> float:
        return breakpoint_x(self.site1, self.site2, sweep_y)

    def position(self, sweep_y: float) -> Point:
        return breakpoint_point(self.site1, self.site2, sweep_y)

    def finish(self, at) -> None:
        """Seal the owned edge at a point, or at the breakpoint's position on a sweep y."""

        if isinstance(at, (int, float)):
            at = self.position(float(at))
        self.edge.seal(self.seals, at)


@dataclass(eq=False)
class Arc:
    """Beach-line entry defined by ``site`` and bounded by up to two breakpoints."""

    site: Site
    left: Optional[BreakPoint] = None
    right: Optional[BreakPoint] = None
    pending: Optional["CircleEvent"] = field(default=None, repr=False)

    def left_x(self, sweep_y: float) -> float:
        if self.left is None:
            return -math.inf
        return self.left.x(sweep_y)

    def right_x(self, sweep_y: float) -> float:
        if self.right is None:
            return math.inf
        return self.right.x(sweep_y)


@dataclass(eq=False)
class SiteEvent:
    site: Site
    cancelled: bool = field(default=False, repr=False)

    @property
    def point(self) -> Point:
        return self.site.point


@dataclass(eq=False)
class CircleEvent:
    """Disappearance of ``arc`` when the sweep reaches the bottom of its circle."""

    arc: Arc
    point: Point
    center: Point
    cancelled: bool = field(default=False, repr=False)


__all__ = [
    "Arc",
    "BreakPoint",
    "CircleEvent",
    "Edge",
    "EdgeEnd",
    "SiteEvent",
]
