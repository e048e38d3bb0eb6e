"""TransitionTable - transitions grouped by their from-state."""
from __future__ import annotations

from typing import Iterable, Iterator

from trigger_fsm.components import State, Transition
from trigger_fsm.types import Identity


class TransitionTable:
    """Append-only mapping of from-state identity to its ordered transitions."""

    def __init__(self) -> None:
        self._by_state: dict[Identity, list[Transition]] = {}
        self._count = 0

    def add(self, transition: Transition) -> None:
        key = transition.from_state.identity
        self._by_state.setdefault(key, []).append(transition)
        self._count += 1

    def extend(self, transitions: Iterable[Transition]) -> None:
        for transition in transitions:
            self.add(transition)

    def for_state(self, state: State) -> tuple[Transition, ...]:
        """Transitions leaving ``state`` in registration order."""
        return tuple(self._by_state.get(state.identity, ()))

    def __contains__(self, state: object) -> bool:
        return isinstance(state, State) and state.identity in self._by_state

    def __iter__(self) -> Iterator[Transition]:
        for transitions in self._by_state.values():
            yield from transitions

    def __len__(self) -> int:
        return self._count
