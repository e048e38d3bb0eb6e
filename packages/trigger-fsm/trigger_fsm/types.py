"""Shared type aliases, result codes and errors for trigger-fsm."""
from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Callable

Identity = int


class Result(IntEnum):
    """Outcome of ``Fsm.execute``. ``SUCCESS`` is 0."""

    SUCCESS = 0
    # The current state has no transition for this trigger, or every
    # transition for it was guarded off.
    NO_MATCHING_TRIGGER = 1
    # The machine has not been initialized. Call init().
    NOT_INITIALIZED = 2


class IdentityExhaustedError(OverflowError):
    """Raised when an identity allocator has no identities left."""

    def __init__(self, limit: int, message: str) -> None:
        self.limit = limit
        super().__init__(message)


class TransitionError(ValueError):
    """Raised when a transition row cannot be registered."""


if TYPE_CHECKING:
    from trigger_fsm.components import Event, State

Guard = Callable[[], bool]
Action = Callable[["Event"], None]
Hook = Callable[[], None]
DebugFn = Callable[["State", "State", "Event"], None]
