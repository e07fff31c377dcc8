"""Configuration helpers for sweep runs."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class SweepOptions:
    """Options for a single sweep.

    ``margin`` is the distance between the extreme sites and the sentinel
    sweep positions; unfinished edges are sealed ``margin`` below the lowest
    site.  With ``merge_duplicates`` sites sharing exact coordinates are
    collapsed to their first occurrence.
    """

    margin: float = 1.0
    merge_duplicates: bool = True


_DEFAULT_OPTIONS = SweepOptions()


def get_default_options() -> SweepOptions:
    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_default_options(options: SweepOptions) -> None:
    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = copy.deepcopy(options)


__all__ = ["SweepOptions", "get_default_options", "set_default_options"]
