"""Identity allocation for states and events."""
from __future__ import annotations

from trigger_fsm.types import Identity, IdentityExhaustedError

MAX_IDENTITY = 2**32 - 1


class IdentityAllocator:
    """Issues strictly increasing identities, never reusing one.

    Each kind of object (states, events) draws from its own allocator, so
    identities are unique within a kind only.
    """

    def __init__(self, start: int = 0, limit: int = MAX_IDENTITY) -> None:
        if start < 0:
            raise ValueError("start must be non-negative")
        self._next = start
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def peek(self) -> Identity:
        return self._next

    def next(self) -> Identity:
        if self._next > self._limit:
            raise IdentityExhaustedError(
                self._limit,
                f"Identity allocator exhausted after {self._limit}",
            )
        identity = self._next
        self._next += 1
        return identity

    def reset(self, start: int = 0) -> None:
        """Rewind the counter. Only safe when no issued identity is still in use."""
        if start < 0:
            raise ValueError("start must be non-negative")
        self._next = start


state_ids = IdentityAllocator()
event_ids = IdentityAllocator()
