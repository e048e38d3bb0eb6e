"""Tests for IdentityAllocator."""
from __future__ import annotations

import pytest

from trigger_fsm import MAX_IDENTITY, IdentityAllocator, IdentityExhaustedError


def test_starts_at_zero_and_increments():
    """Fresh allocator issues 0, 1, 2 in order."""
    ids = IdentityAllocator()

    assert [ids.next(), ids.next(), ids.next()] == [0, 1, 2]


def test_peek_does_not_consume():
    """Peek reports the next identity without allocating it."""
    ids = IdentityAllocator(start=5)

    assert ids.peek == 5
    assert ids.peek == 5
    assert ids.next() == 5
    assert ids.peek == 6


def test_default_limit_is_unsigned_32_bit():
    """The default limit is the 32-bit unsigned maximum."""
    ids = IdentityAllocator()

    assert ids.limit == MAX_IDENTITY == 2**32 - 1


def test_exhaustion_raises():
    """Limit is the last identity issued; the call after it fails."""
    ids = IdentityAllocator(limit=2)
    issued = [ids.next() for _ in range(3)]

    with pytest.raises(IdentityExhaustedError) as excinfo:
        ids.next()

    assert issued == [0, 1, 2]
    assert excinfo.value.limit == 2


def test_exhaustion_is_sticky():
    """A failed allocation does not advance the counter past the limit."""
    ids = IdentityAllocator(start=MAX_IDENTITY)
    assert ids.next() == MAX_IDENTITY

    for _ in range(2):
        with pytest.raises(IdentityExhaustedError):
            ids.next()


def test_reset_rewinds():
    """Reset makes the allocator start over from 0."""
    ids = IdentityAllocator()
    ids.next()
    ids.next()

    ids.reset()

    assert ids.next() == 0


def test_negative_start_rejected():
    """A negative start is refused."""
    with pytest.raises(ValueError):
        IdentityAllocator(start=-1)


def test_reset_to_negative_rejected():
    """Reset refuses a negative start and keeps the current counter."""
    ids = IdentityAllocator()
    ids.next()

    with pytest.raises(ValueError):
        ids.reset(-1)

    assert ids.next() == 1


def test_allocators_are_independent():
    """Two allocators number their kinds separately."""
    states = IdentityAllocator()
    events = IdentityAllocator()
    states.next()
    states.next()

    assert events.next() == 0
    assert states.next() == 2
