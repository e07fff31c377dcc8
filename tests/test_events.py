import pytest

from fortune_voronoi import Arc, CircleEvent, EventQueue, Site, SiteEvent


def _site_event(x, y):
    return SiteEvent(Site(float(x), float(y)))


def _circle_event(x, y):
    return CircleEvent(Arc(Site(0.0, 10.0)), (float(x), float(y)), (float(x), float(y) + 1.0))


def _drain(queue):
    out = []
    while queue:
        out.append(queue.pop())
    return out


def test_pops_in_descending_y():
    queue = EventQueue()
    for y in (0, 5, 2):
        queue.push(_site_event(0, y))
    assert [event.point[1] for event in _drain(queue)] == [5.0, 2.0, 0.0]


def test_equal_y_pops_in_ascending_x():
    queue = EventQueue()
    queue.push(_site_event(3, 1))
    queue.push(_site_event(1, 1))
    assert [event.point[0] for event in _drain(queue)] == [1.0, 3.0]


def test_site_event_before_circle_event_at_same_point():
    queue = EventQueue()
    circle = _circle_event(1, 1)
    site = _site_event(1, 1)
    queue.push(circle)
    queue.push(site)
    assert _drain(queue) == [site, circle]


def test_identical_keys_keep_insertion_order():
    queue = EventQueue()
    first = _circle_event(0, 0)
    second = _circle_event(0, 0)
    queue.push(first)
    queue.push(second)
    assert _drain(queue) == [first, second]


def test_cancelled_event_is_skipped():
    queue = EventQueue()
    keep = _site_event(0, 0)
    drop = _circle_event(0, 3)
    queue.push(keep)
    queue.push(drop)
    assert len(queue) == 2

    assert queue.cancel(drop)
    assert drop not in queue
    assert len(queue) == 1
    assert queue.pop() is keep
    assert not queue
    with pytest.raises(IndexError):
        queue.pop()


def test_cancel_unknown_event_is_noop():
    queue = EventQueue()
    event = _circle_event(0, 0)
    assert not queue.cancel(event)
    queue.push(event)
    assert queue.pop() is event
    assert not queue.cancel(event)


def test_cannot_push_cancelled_event():
    queue = EventQueue()
    event = _circle_event(0, 0)
    queue.push(event)
    queue.cancel(event)
    with pytest.raises(ValueError):
        queue.push(event)
