"""Sample -- a two-transition machine with hooks, a guard and a debug hook.

    Initial --a / action1--> stateA --[guard2] b / action2--> Final

Demonstrates:
- Creating states and events
- Enter and exit hooks on a state
- Registering transitions as table rows
- Logging every state change with log_transitions()

Run: python examples/sample.py
"""

import logging

from trigger_fsm import Event, Fsm, State, log_transitions


def action1(event: Event) -> None:
    print(f"perform custom action 1 with event ID: {event.identity}")


def guard2() -> bool:
    return True


def action2(event: Event) -> None:
    print(f"perform custom action 2 with event ID: {event.identity}")


def main() -> int:
    event_a = Event()
    event_b = Event()

    state_a = State()
    state_a.set_enter_hook(lambda: print("entering stateA"))
    state_a.set_exit_hook(lambda: print("exiting stateA"))

    fsm = Fsm()
    fsm.add_debug_fn(log_transitions())
    fsm.add_transitions([
        # from state  , to state , trigger, guard , action
        (fsm.initial, state_a  , event_a, None  , action1),
        (state_a    , fsm.final, event_b, guard2, action2),
    ])
    fsm.init()
    assert fsm.is_initial()

    fsm.execute(event_a)
    assert fsm.state == state_a

    fsm.execute(event_b)
    assert fsm.state.identity == fsm.final.identity
    assert fsm.is_final()

    fsm.reset()
    assert fsm.is_initial()
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    raise SystemExit(main())
