"""trigger-fsm - A reactive finite state machine core."""
from __future__ import annotations

from trigger_fsm.builder import make_machine
from trigger_fsm.components import Event, State, Transition
from trigger_fsm.config import FsmConfig
from trigger_fsm.debug import log_transitions
from trigger_fsm.engine import Fsm
from trigger_fsm.identity import MAX_IDENTITY, IdentityAllocator, event_ids, state_ids
from trigger_fsm.pseudo import (
    PseudoStates,
    default_pseudo_states,
    release_default_pseudo_states,
)
from trigger_fsm.table import TransitionTable
from trigger_fsm.types import IdentityExhaustedError, Result, TransitionError

__all__ = [
    "Fsm",
    "FsmConfig",
    "State",
    "Event",
    "Transition",
    "TransitionTable",
    "Result",
    "PseudoStates",
    "default_pseudo_states",
    "release_default_pseudo_states",
    "IdentityAllocator",
    "MAX_IDENTITY",
    "state_ids",
    "event_ids",
    "IdentityExhaustedError",
    "TransitionError",
    "log_transitions",
    "make_machine",
]
