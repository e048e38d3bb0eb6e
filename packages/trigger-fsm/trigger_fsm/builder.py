"""Factory for machines with their own pseudo-states."""
from __future__ import annotations

from typing import Any, Iterable

from trigger_fsm.components import Transition
from trigger_fsm.config import FsmConfig
from trigger_fsm.engine import Fsm
from trigger_fsm.identity import IdentityAllocator
from trigger_fsm.pseudo import PseudoStates
from trigger_fsm.types import DebugFn


def make_machine(
    transitions: Iterable[Transition | tuple[Any, ...]] = (),
    *,
    allocator: IdentityAllocator | None = None,
    config: FsmConfig | None = None,
    debug_fn: DebugFn | None = None,
) -> tuple[Fsm, PseudoStates]:
    """Build an uninitialized Fsm with a fresh Initial/Final pair.

    The pair is returned alongside the machine so transitions can be written
    against it. Machines built here share no state with each other.
    """
    pseudo = PseudoStates.create(allocator)
    fsm = Fsm(pseudo, config)
    fsm.add_transitions(transitions)
    fsm.add_debug_fn(debug_fn)
    return fsm, pseudo
