from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np

from .config import SweepOptions
from .geometry import Site

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    pass


def coerce_points(points) -> np.ndarray:
    """Return ``points`` as a finite ``(N, 2)`` float array."""

    if isinstance(points, np.ndarray):
        raw = points
    else:
        raw = list(points)
        if not raw:
            return np.empty((0, 2), dtype=float)
        raw = [tuple(p) if isinstance(p, Site) else p for p in raw]
    try:
        arr = np.asarray(raw, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"sites must be numeric (x, y) pairs: {exc}") from exc
    if arr.size == 0:
        return np.empty((0, 2), dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValidationError(f"expected an (N, 2) collection of sites, got shape {arr.shape}")
    bad = ~np.isfinite(arr).all(axis=1)
    if bad.any():
        idx = int(np.flatnonzero(bad)[0])
        raise ValidationError(f"site {idx} has non-finite coordinates {tuple(arr[idx])}")
    return arr


def validate_options(options: SweepOptions) -> None:
    if not isinstance(options.margin, (int, float)) or not math.isfinite(options.margin):
        raise ValidationError(f"margin must be a finite number (got {options.margin!r})")
    if options.margin <= 0:
        raise ValidationError(f"margin must be positive (got {options.margin})")


def build_sites(points, options: SweepOptions) -> List[Site]:
    """Validate ``points`` and wrap them as :class:`Site` objects.

    Each site keeps the index it had in ``points``.
    """

    validate_options(options)
    arr = coerce_points(points)
    sites = [Site(float(x), float(y), idx) for idx, (x, y) in enumerate(arr.tolist())]
    if options.merge_duplicates and len(sites) > 1:
        sites = _drop_duplicates(sites)
    return sites


def _drop_duplicates(sites: Sequence[Site]) -> List[Site]:
    seen: Dict[Tuple[float, float], Site] = {}
    kept: List[Site] = []
    dropped: List[int] = []
    for site in sites:
        key = site.point
        if key in seen:
            dropped.append(site.index)
            continue
        seen[key] = site
        kept.append(site)
    if dropped:
        logger.warning(
            "Ignoring %d duplicate site(s) at input indices %s", len(dropped), _preview(dropped)
        )
    return kept


def _preview(values: Iterable[int], limit: int = 10) -> str:
    values = list(values)
    head = ", ".join(str(v) for v in values[:limit])
    return f"[{head}{', ...' if len(values) > limit else ''}]"


def parse_sites_text(text: str) -> List[Tuple[float, float]]:
    """Parse ``x y`` or ``x,y`` pairs, one per line; ``#`` starts a comment."""

    points: List[Tuple[float, float]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        body = line.split("#", 1)[0].strip()
        if not body:
            continue
        parts = body.replace(",", " ").split()
        if len(parts) != 2:
            raise ValidationError(f"[line {lineno}] expected two coordinates, got {len(parts)}")
        try:
            x, y = float(parts[0]), float(parts[1])
        except ValueError as exc:
            raise ValidationError(f"[line {lineno}] invalid coordinate: {exc}") from exc
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValidationError(f"[line {lineno}] coordinates must be finite")
        points.append((x, y))
    return points


__all__ = [
    "ValidationError",
    "build_sites",
    "coerce_points",
    "parse_sites_text",
    "validate_options",
]
