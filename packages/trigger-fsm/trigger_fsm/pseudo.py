"""Initial and Final pseudo-states."""
from __future__ import annotations

import atexit
import logging
from dataclasses import dataclass

from trigger_fsm.components import State
from trigger_fsm.identity import IdentityAllocator, state_ids

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PseudoStates:
    """The reserved start and end states of a machine."""

    initial: State
    final: State

    @classmethod
    def create(cls, allocator: IdentityAllocator | None = None) -> PseudoStates:
        # Initial is allocated before Final: identities 0 and 1 on a fresh allocator.
        allocator = allocator or state_ids
        initial = State(allocator=allocator)
        final = State(allocator=allocator)
        return cls(initial=initial, final=final)


_default: PseudoStates | None = PseudoStates.create()


def default_pseudo_states() -> PseudoStates:
    """Return the process-wide pair shared by every ``Fsm()`` built without one."""
    global _default
    if _default is None:
        _default = PseudoStates.create()
        log.debug(
            "recreated default pseudo-states initial=%d final=%d",
            _default.initial.identity,
            _default.final.identity,
        )
    return _default


def release_default_pseudo_states() -> None:
    """Drop the process-wide pair. Registered to run at interpreter exit."""
    global _default
    _default = None


atexit.register(release_default_pseudo_states)
