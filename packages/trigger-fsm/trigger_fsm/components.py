"""State, Event and Transition records."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from trigger_fsm.identity import IdentityAllocator, event_ids, state_ids
from trigger_fsm.types import Action, Guard, Hook, Identity, TransitionError


class State:
    """A node of the machine. Equal to another State iff identities match.

    Subclass to attach modeled data. Enter and exit hooks are optional and
    are replaced as a whole by the setters; pass ``None`` to remove one.
    """

    def __init__(self, *, allocator: IdentityAllocator | None = None) -> None:
        self._identity = (allocator or state_ids).next()
        self._enter: Hook | None = None
        self._exit: Hook | None = None

    @property
    def identity(self) -> Identity:
        return self._identity

    def set_enter_hook(self, hook: Hook | None) -> None:
        self._enter = hook

    def set_exit_hook(self, hook: Hook | None) -> None:
        self._exit = hook

    def invoke_enter(self) -> None:
        if self._enter is not None:
            self._enter()

    def invoke_exit(self) -> None:
        if self._exit is not None:
            self._exit()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self._identity == other._identity

    def __hash__(self) -> int:
        return hash((State, self._identity))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(identity={self._identity})"


class Event:
    """A trigger. The engine only looks at its identity.

    Subclasses may carry payload for transition actions; they must call
    ``super().__init__()`` so an identity is allocated.
    """

    def __init__(self, *, allocator: IdentityAllocator | None = None) -> None:
        self._identity = (allocator or event_ids).next()

    @property
    def identity(self) -> Identity:
        return self._identity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self._identity == other._identity

    def __hash__(self) -> int:
        return hash((Event, self._identity))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(identity={self._identity})"


@dataclass(frozen=True, slots=True)
class Transition:
    """One row of the transition table.

    The transition fires when ``trigger`` (matched by identity) is dispatched
    while the machine is in ``from_state`` and ``guard`` is absent or true.
    """

    from_state: State
    to_state: State
    trigger: Event
    guard: Guard | None = None
    action: Action | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.from_state, State):
            raise TransitionError(f"from_state must be a State, got {self.from_state!r}")
        if not isinstance(self.to_state, State):
            raise TransitionError(f"to_state must be a State, got {self.to_state!r}")
        if not isinstance(self.trigger, Event):
            raise TransitionError(f"trigger must be an Event, got {self.trigger!r}")
        if self.guard is not None and not callable(self.guard):
            raise TransitionError(f"guard must be callable or None, got {self.guard!r}")
        if self.action is not None and not callable(self.action):
            raise TransitionError(f"action must be callable or None, got {self.action!r}")

    @classmethod
    def of(cls, row: Any) -> Transition:
        """Build a Transition from a table row.

        ``row`` is either a Transition (returned as is) or a tuple
        ``(from_state, to_state, trigger[, guard[, action]])``.
        """
        if isinstance(row, Transition):
            return row
        if not isinstance(row, tuple) or not 3 <= len(row) <= 5:
            raise TransitionError(
                f"Transition row must be a Transition or a 3 to 5 item tuple, got {row!r}"
            )
        return cls(*row)
