import pytest
from core.ring import RingQueue, Cursor


def filled(capacity, values):
    q = RingQueue[int](capacity)
    for v in values:
        q.push_back(v)
    return q


def test_begin_equals_end_on_empty():
    q = RingQueue[int](4)
    assert q.begin() == q.end()
    assert not (q.begin() != q.end())


def test_begin_differs_from_end_when_not_empty():
    q = filled(4, [1])
    assert q.begin() != q.end()
    assert not (q.begin() == q.end())


def test_end_offset_is_size():
    q = filled(4, [1, 2, 3])
    assert q.begin().offset() == 0
    assert q.end().offset() == 3


def test_walk_begin_to_end():
    q = filled(7, range(1, 9))
    out = []
    it = q.begin()
    while it != q.end():
        out.append(it.deref())
        it.advance()
    assert out == [2, 3, 4, 5, 6, 7, 8]


def test_advance_returns_same_cursor():
    q = filled(4, [1, 2])
    it = q.begin()
    assert it.advance() is it
    assert it.offset() == 1
    assert it.deref() == 2


def test_post_advance_returns_previous_position():
    q = filled(4, [1, 2])
    it = q.begin()
    prev = it.post_advance()
    assert prev is not it
    assert prev.offset() == 0
    assert prev.deref() == 1
    assert it.offset() == 1
    assert it.deref() == 2


def test_advance_past_end_is_not_checked():
    q = filled(2, [1])
    it = q.begin()
    it.advance().advance().advance()
    assert it.offset() == 3


def test_deref_out_of_range_asserts():
    q = filled(3, [1, 2])
    with pytest.raises(AssertionError):
        q.end().deref()


def test_deref_on_empty_asserts():
    q = RingQueue[int](3)
    with pytest.raises(AssertionError):
        q.begin().deref()


def test_store_writes_through():
    q = filled(3, [1, 2, 3, 4])
    it = q.begin()
    it.advance()
    it.store(30)
    assert list(q) == [2, 30, 4]


def test_store_out_of_range_asserts():
    q = filled(3, [1])
    with pytest.raises(AssertionError):
        q.end().store(9)


def test_repeated_deref_is_stable():
    q = filled(3, [1, 2, 3, 4])
    it = q.begin().advance()
    assert [it.deref() for _ in range(5)] == [3] * 5


def test_equality_reflexive_symmetric_transitive():
    q = filled(4, [1, 2, 3])
    a = q.begin()
    b = q.begin()
    c = Cursor(q, 0)
    assert a == a
    assert a == b and b == a
    assert b == c and a == c


def test_equality_requires_same_queue():
    q1 = filled(4, [1, 2])
    q2 = filled(4, [1, 2])
    assert q1.begin() != q2.begin()
    assert not (q1.begin() == q2.begin())


def test_equality_compares_without_assigning():
    q = filled(4, [1, 2, 3])
    a = q.begin()
    b = q.end()
    assert not (a == b)
    assert a.offset() == 0
    assert b.offset() == 3


def test_compare_with_other_type():
    q = filled(4, [1])
    assert q.begin() != 0
    assert not (q.begin() == "begin")


def test_cursor_is_unhashable():
    q = filled(4, [1])
    with pytest.raises(TypeError):
        hash(q.begin())


# A cursor re-resolves against the queue's current start on every access,
# so holding one across a mutation shifts which element it names.

def test_cursor_held_across_pop_shifts_forward():
    q = filled(4, [1, 2, 3])
    it = q.begin()
    assert it.deref() == 1
    q.pop_front()
    assert it.deref() == 2


def test_cursor_held_across_full_push_shifts_forward():
    q = filled(3, [1, 2, 3])
    it = q.begin().advance()
    assert it.deref() == 2
    q.push_back(4)
    assert it.deref() == 3


def test_end_captured_before_pop_runs_past_size():
    q = filled(4, [1, 2, 3])
    stale_end = q.end()
    q.pop_front()
    assert stale_end != q.end()
    with pytest.raises(AssertionError):
        stale_end.deref()


@pytest.mark.parametrize("mutations, offset, expected", [
    ([], 1, 2),
    (["pop"], 1, 3),
    (["pop", "pop"], 0, 3),
    (["push"], 1, 3),
    (["push", "push"], 0, 3),
    (["pop", "push"], 1, 3),
    (["push", "pop"], 1, 4),
    (["pop", "pop", "push", "push"], 2, 5),
])
def test_aliasing_orderings(mutations, offset, expected):
    q = filled(3, [1, 2, 3])
    it = Cursor(q, offset)
    pushed = 4
    for m in mutations:
        if m == "pop":
            q.pop_front()
        else:
            q.push_back(pushed)
            pushed += 1
    # Same offset, current window
    assert it.deref() == expected
    assert it.deref() == list(q)[offset]


def test_negative_offset_rejected():
    q = filled(4, [1, 2, 3, 4, 5])
    q.pop_front()
    with pytest.raises(ValueError):
        Cursor(q, -1)
    assert list(q) == [3, 4, 5]


def test_ne_defers_to_eq():
    q = filled(4, [1, 2])
    a = q.begin()
    b = q.begin().advance()
    assert (a != b) is (not (a == b))
    assert a.__ne__(object()) is NotImplemented
