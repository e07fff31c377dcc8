"""Helpers for consuming sweep output."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from .geometry import Point
from .model import Edge

logger = logging.getLogger(__name__)


def edges_to_array(edges: Sequence[Edge]) -> np.ndarray:
    """Stack finished edges into an ``(M, 2, 2)`` array of ``[start, end]`` pairs."""

    if not edges:
        return np.empty((0, 2, 2), dtype=float)
    unfinished = [idx for idx, edge in enumerate(edges) if not edge.is_finished]
    if unfinished:
        raise ValueError(f"edges {unfinished[:5]} are not finished")
    return np.array([[edge.start, edge.end] for edge in edges], dtype=float)


def edge_site_indices(edges: Sequence[Edge]) -> np.ndarray:
    """Input indices of the two sites each edge separates, shape ``(M, 2)``."""

    if not edges:
        return np.empty((0, 2), dtype=int)
    return np.array([[edge.site1.index, edge.site2.index] for edge in edges], dtype=int)


def _close_pairs(points: np.ndarray, tol: float) -> Tuple[np.ndarray, np.ndarray]:
    """Index pairs of rows of ``points`` at most ``tol`` apart.

    Rows are sorted by x and compared against neighbours ``shift`` places
    ahead; once no pair at some shift is within ``tol`` in x, no pair further
    apart can be either.
    """

    order = np.argsort(points[:, 0], kind="stable")
    ordered = points[order]
    firsts: List[np.ndarray] = []
    seconds: List[np.ndarray] = []
    for shift in range(1, len(ordered)):
        delta = ordered[shift:] - ordered[:-shift]
        in_window = delta[:, 0] <= tol
        if not in_window.any():
            break
        close = np.nonzero(in_window & (np.hypot(delta[:, 0], delta[:, 1]) <= tol))[0]
        firsts.append(order[close])
        seconds.append(order[close + shift])
    if not firsts:
        empty = np.empty(0, dtype=np.intp)
        return empty, empty
    return np.concatenate(firsts), np.concatenate(seconds)


def voronoi_vertices(edges: Sequence[Edge], tol: float = 1e-9) -> List[Point]:
    """Distinct Voronoi vertices: endpoints shared by at least three edges.

    Endpoints chained together by gaps of at most ``tol`` form one vertex,
    represented by their mean.  Vertices come out in order of their first
    endpoint in ``edges``.
    """

    if not edges:
        return []
    endpoints = edges_to_array(edges).reshape(-1, 2)
    count = len(endpoints)
    first, second = _close_pairs(endpoints, tol)

    # every endpoint ends up labelled with the smallest index in its group
    labels = np.arange(count)
    while first.size:
        low = np.minimum(labels[first], labels[second])
        if np.array_equal(labels[first], low) and np.array_equal(labels[second], low):
            break
        np.minimum.at(labels, first, low)
        np.minimum.at(labels, second, low)

    owners = np.arange(count) // 2
    label_owner = np.unique(np.column_stack((labels, owners)), axis=0)
    groups, owner_counts = np.unique(label_owner[:, 0], return_counts=True)
    shared = groups[owner_counts >= 3]

    sizes = np.bincount(labels, minlength=count)
    sum_x = np.bincount(labels, weights=endpoints[:, 0], minlength=count)
    sum_y = np.bincount(labels, weights=endpoints[:, 1], minlength=count)
    vertices: List[Point] = [
        (float(sum_x[label] / sizes[label]), float(sum_y[label] / sizes[label])) for label in shared
    ]
    logger.debug("Found %d Voronoi vertices among %d edges", len(vertices), len(edges))
    return vertices


def bounding_box(edges: Sequence[Edge]) -> Tuple[float, float, float, float]:
    """``(min_x, min_y, max_x, max_y)`` over all edge endpoints."""

    if not edges:
        raise ValueError("bounding_box requires at least one edge")
    pts = edges_to_array(edges).reshape(-1, 2)
    min_x, min_y = pts.min(axis=0)
    max_x, max_y = pts.max(axis=0)
    return float(min_x), float(min_y), float(max_x), float(max_y)


__all__ = ["bounding_box", "edge_site_indices", "edges_to_array", "voronoi_vertices"]
