"""Fortune's sweep-line construction of the planar Voronoi diagram."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Set

from .beachline import BeachLine
from .config import SweepOptions, get_default_options
from .events import EventQueue
from .geometry import CLOCKWISE, Site, bisector_intersection, distance, orientation
from .logging_utils import apply_debug_logging
from .model import Arc, BreakPoint, CircleEvent, Edge, SiteEvent
from .validate import build_sites

logger = logging.getLogger(__name__)


class FortuneSweep:
    """One run of the sweep over a fixed set of sites.

    All state belongs to the instance; independent instances can be used in
    parallel.  Call :meth:`run` once.
    """

    def __init__(self, sites: Sequence[Site], options: Optional[SweepOptions] = None):
        self.options = options or get_default_options()
        self.sites = list(sites)
        self.sweep_y = math.inf
        self.top_y = math.inf
        self.bottom_y = -math.inf
        self.events = EventQueue()
        self.beachline = BeachLine()
        self.breakpoints: Set[BreakPoint] = set()
        self.edges: List[Edge] = []
        self.circle_events_scheduled = 0
        self._done = False

    def _init_bounds(self) -> None:
        ys = [site.y for site in self.sites]
        margin = float(self.options.margin)
        self.top_y = max(ys) + margin
        self.bottom_y = min(ys) - margin
        self.sweep_y = self.top_y

    def run(self) -> List[Edge]:
        if self._done:
            raise RuntimeError("FortuneSweep.run() may only be called once")
        self._done = True
        if not self.sites:
            return self.edges

        self._init_bounds()
        for site in self.sites:
            self.events.push(SiteEvent(site))

        while self.events:
            event = self.events.pop()
            self.sweep_y = event.point[1]
            if isinstance(event, SiteEvent):
                self.handle_site_event(event)
            else:
                self.handle_circle_event(event)

        if self.sweep_y < self.bottom_y:
            # a vertex was found below the bottom bound; seal past it
            self.bottom_y = self.sweep_y - float(self.options.margin)
        self.sweep_y = self.bottom_y
        for bp in self.breakpoints:
            bp.finish(self.bottom_y)
        self.breakpoints.clear()
        return self.edges

    def handle_site_event(self, event: SiteEvent) -> None:
        site = event.site
        if not len(self.beachline):
            self.beachline.insert_first(Arc(site))
            return

        above = self.beachline.locate(site.x, self.sweep_y)
        self._drop_pending(above)

        if above.site.y == site.y:
            self._split_on_top_line(above, site)
            return

        edge = Edge(above.site, site)
        self.edges.append(edge)
        left_bp = BreakPoint(above.site, site, edge, seals="start")
        right_bp = BreakPoint(site, above.site, edge, seals="end")
        self.breakpoints.update((left_bp, right_bp))

        left = Arc(above.site, above.left, left_bp)
        center = Arc(site, left_bp, right_bp)
        right = Arc(above.site, right_bp, above.right)
        self.beachline.replace(above, (left, center, right), self.sweep_y)

        self.check_circle_event(left)
        self.check_circle_event(right)

    def _split_on_top_line(self, above: Arc, site: Site) -> None:
        # ``above`` is a vertical ray here; split it in two instead of three
        mid_x = (above.site.x + site.x) * 0.5
        if site.x >= above.site.x:
            edge = Edge(above.site, site, start=(mid_x, self.top_y))
            bp = BreakPoint(above.site, site, edge)
            arcs = (Arc(above.site, above.left, bp), Arc(site, bp, above.right))
        else:
            edge = Edge(site, above.site, start=(mid_x, self.top_y))
            bp = BreakPoint(site, above.site, edge)
            arcs = (Arc(site, above.left, bp), Arc(above.site, bp, above.right))
        self.edges.append(edge)
        self.breakpoints.add(bp)
        self.beachline.replace(above, arcs, self.sweep_y)

    def handle_circle_event(self, event: CircleEvent) -> None:
        arc = event.arc
        left, right = self.beachline.neighbors(arc, self.sweep_y)
        for neighbor in (left, right):
            if neighbor is not None:
                self._drop_pending(neighbor)

        self.beachline.remove(arc, self.sweep_y)
        arc.pending = None
        for bp in (arc.left, arc.right):
            bp.finish(event.center)
            self.breakpoints.discard(bp)

        edge = Edge(arc.left.site1, arc.right.site2, start=event.center)
        # an arc with both breakpoints always has both neighbours; an edge
        # here could never be sealed, so it is dropped rather than left open
        if left is None or right is None:
            logger.warning("Circle event at %s removed an outer arc; edge not emitted", event.center)
            return

        self.edges.append(edge)
        bp = BreakPoint(edge.site1, edge.site2, edge)
        self.breakpoints.add(bp)
        left.right = bp
        right.left = bp

        self.check_circle_event(left)
        self.check_circle_event(right)

    def check_circle_event(self, arc: Arc) -> None:
        left_bp, right_bp = arc.left, arc.right
        if left_bp is None or right_bp is None:
            return
        if orientation(left_bp.site1, arc.site, right_bp.site2) != CLOCKWISE:
            return

        center = bisector_intersection(left_bp.site1, left_bp.site2, right_bp.site1, right_bp.site2)
        if center is None:
            return
        radius = distance(arc.site, center)
        event = CircleEvent(arc, (center[0], center[1] - radius), center)
        arc.pending = event
        self.events.push(event)
        self.circle_events_scheduled += 1

    def _drop_pending(self, arc: Arc) -> None:
        if arc.pending is not None:
            self.events.cancel(arc.pending)
            arc.pending = None


def compute_voronoi(points, options: Optional[SweepOptions] = None) -> List[Edge]:
    """Return the Voronoi edges of ``points`` in creation order.

    ``points`` is a sequence of ``(x, y)`` pairs or an ``(N, 2)`` array.
    Unbounded edges are cut where their breakpoint meets the final sweep
    line, ``options.margin`` below the lowest site.
    """

    options = options or get_default_options()
    sites = build_sites(points, options)
    logger.info("Computing Voronoi diagram for %d site(s)", len(sites))
    sweep = FortuneSweep(sites, options)
    edges = sweep.run()
    logger.info(
        "Voronoi diagram finished: %d edge(s), %d circle event(s) scheduled",
        len(edges),
        sweep.circle_events_scheduled,
    )
    return edges


apply_debug_logging(globals(), logger=logger, skip={"FortuneSweep._init_bounds", "FortuneSweep._drop_pending"})
