"""Fsm configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FsmConfig:
    """Immutable configuration for an ``Fsm``.

    Attributes:
        name: Label identifying the machine in log records.
        log_unmatched: Emit a DEBUG record when a trigger is not recognized
            in the current state.
    """

    name: str = "fsm"
    log_unmatched: bool = True
