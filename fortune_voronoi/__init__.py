from .geometry import (
    CLOCKWISE,
    COLLINEAR,
    COUNTER_CLOCKWISE,
    Point,
    Site,
    bisector_intersection,
    circumcenter,
    distance,
    orientation,
)
from .model import Arc, BreakPoint, CircleEvent, Edge, SiteEvent
from .beachline import BeachLine, breakpoint_x, compare_arcs
from .events import EventQueue
from .config import SweepOptions, get_default_options, set_default_options
from .validate import ValidationError, build_sites, parse_sites_text
from .sweep import FortuneSweep, compute_voronoi
from .utils import bounding_box, edge_site_indices, edges_to_array, voronoi_vertices

__all__ = [
    'CLOCKWISE',
    'COLLINEAR',
    'COUNTER_CLOCKWISE',
    'Point',
    'Site',
    'bisector_intersection',
    'circumcenter',
    'distance',
    'orientation',
    'Arc',
    'BreakPoint',
    'CircleEvent',
    'Edge',
    'SiteEvent',
    'BeachLine',
    'breakpoint_x',
    'compare_arcs',
    'EventQueue',
    'SweepOptions',
    'get_default_options',
    'set_default_options',
    'ValidationError',
    'build_sites',
    'parse_sites_text',
    'FortuneSweep',
    'compute_voronoi',
    'bounding_box',
    'edge_site_indices',
    'edges_to_array',
    'voronoi_vertices',
]
