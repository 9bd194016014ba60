# micromachine/core/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Dict, Optional, Set

from micromachine.core.callbacks import CallbackManager
from micromachine.core.errors import EventAlreadyRegisteredError, InvalidEventError, InvalidStateError
from micromachine.interfaces.types import Callback, EventID, StateID, Transitions

logger = logging.getLogger(__name__)


class Machine:
    """
    A flat finite state machine. Events are registered with the source states
    they are valid from and the state each one leads to; triggering an event
    moves the machine and notifies the callbacks observing the new state.

    The machine is not thread-safe. Callbacks run synchronously on the caller's
    thread and may themselves trigger further events on the same machine.
    """

    def __init__(self, initial_state: StateID) -> None:
        """
        :param initial_state: The state in which this machine begins.
        """
        self._state = initial_state
        self._events: Dict[EventID, Transitions] = {}
        self._callbacks = CallbackManager()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state!r}, events={len(self._events)})"

    @property
    def state(self) -> StateID:
        """Get the current state."""
        return self._state

    def events(self) -> Set[EventID]:
        """Return the names of all registered events."""
        return set(self._events)

    def states(self) -> Set[StateID]:
        """
        Return every known state: the current one, plus each source and
        destination named by a registered event.
        """
        states = {self._state}
        for transitions in self._events.values():
            states.update(transitions.keys())
            states.update(transitions.values())
        return states

    def triggerable_events(self) -> Set[EventID]:
        """Return the registered events that have a transition out of the current state."""
        return {event for event, transitions in self._events.items() if self._state in transitions}

    def can_trigger(self, event: EventID) -> bool:
        """Check whether ``event`` can be triggered from the current state."""
        transitions = self._events.get(event)
        return transitions is not None and self._state in transitions

    def transitions_for(self, event: EventID) -> Transitions:
        """
        Return a copy of the source -> destination mapping registered for ``event``.

        :raises InvalidEventError: If the event was never registered.
        """
        if event not in self._events:
            raise InvalidEventError(event)
        return dict(self._events[event])

    def when(self, event: EventID, transitions: Transitions) -> None:
        """
        Register an event along with the transitions it performs.

        States are not declared up front; any state named here becomes known
        to the machine.

        :param event: Name of the event.
        :param transitions: Mapping of source state to destination state.
        :raises EventAlreadyRegisteredError: If the event already exists. The
            existing transitions are kept and ``transitions`` is discarded.
        """
        if event in self._events:
            raise EventAlreadyRegisteredError(event, {"transitions": dict(self._events[event])})

        self._events[event] = dict(transitions)
        logger.debug(f"Registered event '{event}' with transitions {self._events[event]}")

    def on(self, state: StateID, callback: Callback) -> None:
        """
        Run ``callback`` every time the machine enters ``state``. Callbacks for
        the same state run in the order they were added.

        :param state: Destination state to observe.
        :param callback: Callable receiving the name of the triggering event.
        """
        self._callbacks.register(state, callback)
        logger.debug(f"Registered callback {callback!r} for state '{state}'")

    def on_any(self, callback: Optional[Callback]) -> None:
        """
        Run ``callback`` after every successful transition, once the
        state-specific callbacks are done. Only one such callback is kept;
        setting another replaces it, and ``None`` removes it.
        """
        self._callbacks.register_any(callback)

    def trigger(self, event: EventID) -> None:
        """
        Fire an event against the current state.

        The new state is set before any callback runs, so callbacks observe it
        through :attr:`state`. Exceptions raised by callbacks propagate to the
        caller; the transition itself is not undone.

        :param event: Name of the event to fire.
        :raises InvalidEventError: If the event was never registered.
        :raises InvalidStateError: If the event has no transition from the current state.
        """
        transitions = self._events.get(event)
        if transitions is None:
            logger.debug(f"Rejected unknown event '{event}' in state '{self._state}'")
            raise InvalidEventError(event)

        if self._state not in transitions:
            logger.debug(f"Rejected event '{event}' in state '{self._state}'")
            raise InvalidStateError(event, self._state, {"valid_states": list(transitions)})

        source = self._state
        self._state = transitions[source]
        logger.debug(f"Event '{event}' moved machine from '{source}' to '{self._state}'")

        self._callbacks.dispatch(self._state, event)

    def try_trigger(self, event: EventID) -> bool:
        """
        Like :meth:`trigger`, but report an impossible transition by returning
        False instead of raising.

        :return: True if the transition happened.
        """
        if not self.can_trigger(event):
            logger.debug(f"Event '{event}' not triggerable from state '{self._state}'")
            return False
        self.trigger(event)
        return True
