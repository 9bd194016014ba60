# micromachine/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, Optional

from micromachine.interfaces.types import EventID, StateID


class MachineError(Exception):
    """
    Base exception class for errors raised by the state machine.

    :param message: Human readable description of the failure.
    :param details: Optional extra context about the failure.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EventAlreadyRegisteredError(MachineError):
    """
    Raised when an event name is registered a second time. The existing
    transitions for the event are left untouched.
    """

    def __init__(self, event: EventID, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"Event '{event}' is already registered", details)
        self.event = event


class TransitionError(MachineError):
    """
    Raised when an event cannot be triggered. The machine's state is unchanged.
    """

    def __init__(self, message: str, event: EventID, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details)
        self.event = event


class InvalidEventError(TransitionError):
    """
    Raised when the triggered event was never registered.
    """

    def __init__(self, event: EventID, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"Invalid event '{event}'", event, details)


class InvalidStateError(TransitionError):
    """
    Raised when the event is registered but has no transition out of the
    current state.
    """

    def __init__(self, event: EventID, state: StateID, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"Event '{event}' cannot be triggered from state '{state}'", event, details)
        self.state = state
