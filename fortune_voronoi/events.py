"""Priority queue of sweep events with cancellation by identity."""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import List, Set, Tuple, Union

from .model import CircleEvent, SiteEvent

logger = logging.getLogger(__name__)

Event = Union[SiteEvent, CircleEvent]

_SITE_RANK = 0
_CIRCLE_RANK = 1


def event_key(event: Event) -> Tuple[float, float, int]:
    """Sweep order: y descending, then x ascending, then site events first."""

    x, y = event.point
    rank = _SITE_RANK if isinstance(event, SiteEvent) else _CIRCLE_RANK
    return (-y, x, rank)


class EventQueue:
    """Binary heap of pending events.

    Cancelled events are only flagged and get discarded when they reach the
    top of the heap, which keeps ``cancel`` O(1).  Equal keys pop in
    insertion order.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, float, int, int, Event]] = []
        self._counter = itertools.count()
        self._pending: Set[Event] = set()

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)

    def __contains__(self, event: object) -> bool:
        return event in self._pending

    def push(self, event: Event) -> None:
        if event.cancelled:
            raise ValueError("cannot schedule a cancelled event")
        heapq.heappush(self._heap, (*event_key(event), next(self._counter), event))
        self._pending.add(event)

    def pop(self) -> Event:
        while self._heap:
            event = heapq.heappop(self._heap)[-1]
            if event.cancelled:
                continue
            self._pending.discard(event)
            return event
        raise IndexError("pop from an empty event queue")

    def cancel(self, event: Event) -> bool:
        """Withdraw a scheduled event; returns ``False`` if it was not pending."""

        if event not in self._pending:
            return False
        event.cancelled = True
        self._pending.discard(event)
        logger.debug("Cancelled false event at %s", event.point)
        return True


__all__ = ["Event", "EventQueue", "event_key"]
