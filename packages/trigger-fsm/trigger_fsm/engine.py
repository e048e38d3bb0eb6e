"""Fsm - transition registration and trigger dispatch."""
from __future__ import annotations

import logging
from typing import Any, Iterable

from trigger_fsm.components import Event, State, Transition
from trigger_fsm.config import FsmConfig
from trigger_fsm.pseudo import PseudoStates, default_pseudo_states
from trigger_fsm.table import TransitionTable
from trigger_fsm.types import DebugFn, Result

log = logging.getLogger(__name__)


class Fsm:
    """A reactive finite state machine.

    The machine does nothing until ``execute`` is called with a trigger. Only
    the outgoing transitions of the current state are considered, in the
    order they were registered. A transition matches when its trigger has
    the same identity as the dispatched one; the first match whose guard is
    absent or true fires, and no other transition fires for that dispatch.

    Firing a transition runs, in order: the action (with the trigger), the
    exit hook of the from-state, the state change, the enter hook of the
    to-state, and the debug hook.
    """

    def __init__(
        self,
        pseudo: PseudoStates | None = None,
        config: FsmConfig | None = None,
    ) -> None:
        self._pseudo = pseudo or default_pseudo_states()
        self._config = config or FsmConfig()
        self._table = TransitionTable()
        self._current: State = self._pseudo.initial
        self._initialized: bool = False
        self._debug_fn: DebugFn | None = None

    @property
    def initial(self) -> State:
        return self._pseudo.initial

    @property
    def final(self) -> State:
        return self._pseudo.final

    @property
    def config(self) -> FsmConfig:
        return self._config

    @property
    def transitions(self) -> TransitionTable:
        return self._table

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def state(self) -> State:
        return self._current

    def is_initial(self) -> bool:
        return self._current.identity == self._pseudo.initial.identity

    def is_final(self) -> bool:
        return self._current.identity == self._pseudo.final.identity

    def init(self) -> None:
        """Move to the Initial pseudo-state. Has no effect once initialized."""
        if self._initialized:
            return
        self._current = self._pseudo.initial
        self._initialized = True
        log.debug("%s: initialized", self._config.name)

    def reset(self) -> None:
        """Rewind to Initial and mark uninitialized. Registered transitions are kept."""
        self._current = self._pseudo.initial
        self._initialized = False
        log.debug("%s: reset", self._config.name)

    def add_transitions(self, transitions: Iterable[Transition | tuple[Any, ...]]) -> None:
        """Register transitions. Rows may be Transitions or tuples (see ``Transition.of``).

        Every row is validated before any is added, so a malformed row leaves
        the table untouched.
        """
        rows = [Transition.of(row) for row in transitions]
        self._table.extend(rows)

    def add_debug_fn(self, fn: DebugFn | None) -> None:
        """Install a hook called with (from_state, to_state, trigger) on every fired transition.

        Pass ``None`` to disable it.
        """
        self._debug_fn = fn

    def execute(self, trigger: Event) -> Result:
        """Dispatch one trigger and report how it was handled.

        Returns SUCCESS whenever a transition from the current state matched
        the trigger, even if every such transition was blocked by its guard;
        NO_MATCHING_TRIGGER when none matched; NOT_INITIALIZED before init().
        """
        if not self._initialized:
            log.debug("%s: %r dispatched before init()", self._config.name, trigger)
            return Result.NOT_INITIALIZED

        result = Result.NO_MATCHING_TRIGGER
        for transition in self._table.for_state(self._current):
            if transition.trigger.identity != trigger.identity:
                continue
            result = Result.SUCCESS

            if transition.guard is not None and not transition.guard():
                log.debug(
                    "%s: guard blocked %d -> %d on %r",
                    self._config.name,
                    transition.from_state.identity,
                    transition.to_state.identity,
                    trigger,
                )
                continue

            if transition.action is not None:
                transition.action(trigger)

            transition.from_state.invoke_exit()
            self._current = transition.to_state
            transition.to_state.invoke_enter()

            log.debug(
                "%s: %d -> %d on %r",
                self._config.name,
                transition.from_state.identity,
                transition.to_state.identity,
                trigger,
            )
            if self._debug_fn is not None:
                self._debug_fn(transition.from_state, transition.to_state, trigger)
            break

        if result is Result.NO_MATCHING_TRIGGER and self._config.log_unmatched:
            log.debug(
                "%s: no transition for %r in state %d",
                self._config.name,
                trigger,
                self._current.identity,
            )
        return result
