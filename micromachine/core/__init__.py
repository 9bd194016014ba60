"""Core components of the machine: the machine itself, its callbacks and errors."""

from micromachine.core.callbacks import CallbackManager
from micromachine.core.errors import (
    EventAlreadyRegisteredError,
    InvalidEventError,
    InvalidStateError,
    MachineError,
    TransitionError,
)
from micromachine.core.machine import Machine

__all__ = [
    "CallbackManager",
    "EventAlreadyRegisteredError",
    "InvalidEventError",
    "InvalidStateError",
    "Machine",
    "MachineError",
    "TransitionError",
]
