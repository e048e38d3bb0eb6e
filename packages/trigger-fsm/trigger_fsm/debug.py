"""Debug hook that reports fired transitions through logging."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from trigger_fsm.types import DebugFn

if TYPE_CHECKING:
    from trigger_fsm.components import Event, State


def log_transitions(
    logger: logging.Logger | None = None, level: int = logging.DEBUG
) -> DebugFn:
    """Return a debug hook for ``Fsm.add_debug_fn`` that logs each state change."""
    target = logger or logging.getLogger(__name__)

    def debug_fn(from_state: State, to_state: State, trigger: Event) -> None:
        target.log(
            level,
            "changed from %d to %d with trigger %d",
            from_state.identity,
            to_state.identity,
            trigger.identity,
        )

    return debug_fn
