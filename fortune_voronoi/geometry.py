"""Planar primitives consumed by the sweep."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

Point = Tuple[float, float]

CLOCKWISE = -1
COLLINEAR = 0
COUNTER_CLOCKWISE = 1


@dataclass(frozen=True, eq=False)
class Site:
    """Input point of the diagram.

    Sites compare by identity: two sites may share coordinates and still be
    distinct cells.  ``index`` is the position in the caller's input.
    """

    x: float
    y: float
    index: int = -1

    @property
    def point(self) -> Point:
        return (self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Site({self.x!r}, {self.y!r}, index={self.index})"


def _vec2(a: Point, b: Point) -> Point:
    return b[0] - a[0], b[1] - a[1]


def _cross2(a: Point, b: Point) -> float:
    return a[0] * b[1] - a[1] * b[0]


def _midpoint2(a: Point, b: Point) -> Point:
    return (a[0] + b[0]) * 0.5, (a[1] + b[1]) * 0.5


def _rotate90(v: Point) -> Point:
    return -v[1], v[0]


def _as_point(p) -> Point:
    if isinstance(p, Site):
        return p.point
    return float(p[0]), float(p[1])


def orientation(a, b, c) -> int:
    """Return the turn direction of ``a -> b -> c``.

    ``COUNTER_CLOCKWISE`` (1), ``CLOCKWISE`` (-1) or ``COLLINEAR`` (0).
    """

    pa, pb, pc = _as_point(a), _as_point(b), _as_point(c)
    cross = _cross2(_vec2(pa, pb), _vec2(pa, pc))
    if cross > 0.0:
        return COUNTER_CLOCKWISE
    if cross < 0.0:
        return CLOCKWISE
    return COLLINEAR


def distance(a, b) -> float:
    pa, pb = _as_point(a), _as_point(b)
    return math.hypot(pb[0] - pa[0], pb[1] - pa[1])


def bisector_intersection(a1, b1, a2, b2) -> Optional[Point]:
    """Intersect the perpendicular bisector of ``a1-b1`` with that of ``a2-b2``.

    Returns ``None`` when the bisectors are parallel or either pair coincides.
    """

    p1, q1 = _as_point(a1), _as_point(b1)
    p2, q2 = _as_point(a2), _as_point(b2)
    anchor1, anchor2 = _midpoint2(p1, q1), _midpoint2(p2, q2)
    dir1 = _rotate90(_vec2(p1, q1))
    dir2 = _rotate90(_vec2(p2, q2))
    denom = _cross2(dir1, dir2)
    scale = max(abs(dir1[0]) + abs(dir1[1]), 1e-300) * max(abs(dir2[0]) + abs(dir2[1]), 1e-300)
    if abs(denom) <= 1e-12 * scale:
        return None
    diff = _vec2(anchor1, anchor2)
    t = _cross2(diff, dir2) / denom
    return anchor1[0] + t * dir1[0], anchor1[1] + t * dir1[1]


def circumcenter(a, b, c) -> Optional[Point]:
    """Center of the circle through three points, ``None`` if collinear."""

    pa, pb, pc = _as_point(a), _as_point(b), _as_point(c)
    d = 2.0 * (pa[0] * (pb[1] - pc[1]) + pb[0] * (pc[1] - pa[1]) + pc[0] * (pa[1] - pb[1]))
    if d == 0.0:
        return None
    sa = pa[0] ** 2 + pa[1] ** 2
    sb = pb[0] ** 2 + pb[1] ** 2
    sc = pc[0] ** 2 + pc[1] ** 2
    ux = (sa * (pb[1] - pc[1]) + sb * (pc[1] - pa[1]) + sc * (pa[1] - pb[1])) / d
    uy = (sa * (pc[0] - pb[0]) + sb * (pa[0] - pc[0]) + sc * (pb[0] - pa[0])) / d
    return ux, uy


__all__ = [
    "CLOCKWISE",
    "COLLINEAR",
    "COUNTER_CLOCKWISE",
    "Point",
    "Site",
    "bisector_intersection",
    "circumcenter",
    "distance",
    "orientation",
]
