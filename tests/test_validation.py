import math

import numpy as np
import pytest

from fortune_voronoi import Site, SweepOptions, ValidationError, build_sites, compute_voronoi, parse_sites_text
from fortune_voronoi.validate import coerce_points


def test_build_sites_keeps_input_indices():
    sites = build_sites([(1, 2), (3.5, -1)], SweepOptions())
    assert [(s.x, s.y, s.index) for s in sites] == [(1.0, 2.0, 0), (3.5, -1.0, 1)]
    assert all(isinstance(s, Site) for s in sites)


def test_build_sites_accepts_arrays_and_sites():
    arr = np.array([[0.0, 0.0], [1.0, 1.0]])
    assert len(build_sites(arr, SweepOptions())) == 2
    assert len(build_sites([Site(0, 0), Site(2, 2)], SweepOptions())) == 2


def test_duplicates_keep_first_occurrence():
    sites = build_sites([(0, 0), (1, 1), (0, 0)], SweepOptions())
    assert [s.index for s in sites] == [0, 1]
    kept = build_sites([(0, 0), (1, 1), (0, 0)], SweepOptions(merge_duplicates=False))
    assert [s.index for s in kept] == [0, 1, 2]


@pytest.mark.parametrize(
    'points, message_part',
    [
        ([(0.0, math.nan)], 'non-finite'),
        ([(math.inf, 1.0)], 'non-finite'),
        ([(1.0, 2.0, 3.0)], 'expected an (N, 2)'),
        ([1.0, 2.0], 'expected an (N, 2)'),
        ([('a', 'b')], 'numeric'),
    ],
)
def test_invalid_points_raise(points, message_part):
    with pytest.raises(ValidationError) as exc:
        coerce_points(points)
    assert message_part in str(exc.value)


@pytest.mark.parametrize('margin', [0.0, -1.0, math.inf])
def test_margin_must_be_positive_and_finite(margin):
    with pytest.raises(ValidationError):
        compute_voronoi([(0, 0), (1, 1)], SweepOptions(margin=margin))


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        compute_voronoi([(0.0, math.nan), (1.0, 1.0)])


def test_parse_sites_text():
    text = """
# sites
0 0
2.5, 1   # trailing comment

-1 -3
"""
    assert parse_sites_text(text) == [(0.0, 0.0), (2.5, 1.0), (-1.0, -3.0)]


@pytest.mark.parametrize(
    'text, message_part',
    [
        ('0 0\n1 2 3\n', '[line 2]'),
        ('0 zero\n', 'invalid coordinate'),
        ('1 nan\n', 'finite'),
    ],
)
def test_parse_sites_text_errors(text, message_part):
    with pytest.raises(ValidationError) as exc:
        parse_sites_text(text)
    assert message_part in str(exc.value)
