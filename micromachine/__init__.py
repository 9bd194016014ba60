"""micromachine: a minimal finite state machine

A machine holds one current state and a table of named events. Each event maps
the source states it is valid from to the state it leads to. Triggering an
event moves the machine and then notifies the callbacks observing the new state.

Responsibilities:
    - Current state tracking
    - Event registration
    - Event triggering
    - State entry and catch-all callbacks
    - Introspection of events and states

Cross-cutting Concerns:
    Thread Safety:
        - Not thread-safe; guard a shared machine with an external lock
        - Callbacks run synchronously on the triggering thread

    Error Handling:
        - Structured error hierarchy rooted at MachineError
        - Failed triggers never change the state
        - Callback exceptions propagate unchanged

    Logging:
        - Standard library logging under the "micromachine" namespace
        - No handlers are installed by the package
"""

from micromachine.core.errors import (
    EventAlreadyRegisteredError,
    InvalidEventError,
    InvalidStateError,
    MachineError,
    TransitionError,
)
from micromachine.core.machine import Machine
from micromachine.interfaces.types import Callback, EventID, StateID, Transitions

__version__ = "0.1.0"

__all__ = [
    "Callback",
    "EventAlreadyRegisteredError",
    "EventID",
    "InvalidEventError",
    "InvalidStateError",
    "Machine",
    "MachineError",
    "StateID",
    "TransitionError",
    "Transitions",
]
