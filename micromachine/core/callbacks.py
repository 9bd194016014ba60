# micromachine/core/callbacks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from micromachine.interfaces.types import Callback, EventID, StateID

logger = logging.getLogger(__name__)


class CallbackManager:
    """
    Holds the callbacks observing a machine: an ordered list per destination
    state, plus a single slot for a callback that fires on every transition.
    """

    def __init__(self) -> None:
        self._callbacks: Dict[StateID, List[Callback]] = {}
        self._any: Optional[Callback] = None

    def register(self, state: StateID, callback: Callback) -> None:
        """
        Append a callback to run whenever the machine enters ``state``.

        :param state: Destination state to observe.
        :param callback: Callable receiving the triggering event name.
        """
        self._callbacks.setdefault(state, []).append(callback)

    def register_any(self, callback: Optional[Callback]) -> None:
        """
        Set the catch-all callback, replacing any previous one. ``None`` clears it.
        """
        self._any = callback

    def callbacks_for(self, state: StateID) -> List[Callback]:
        """Return a copy of the callbacks registered for ``state``."""
        return list(self._callbacks.get(state, ()))

    @property
    def any_callback(self) -> Optional[Callback]:
        """The catch-all callback, if one is set."""
        return self._any

    def dispatch(self, state: StateID, event: EventID) -> None:
        """
        Run the callbacks for an entry into ``state``, then the catch-all callback.

        The list for ``state`` is read once up front; callbacks added while
        dispatching apply from the next entry. Exceptions from a callback are
        logged and re-raised, and the remaining callbacks are skipped.

        :param state: The state that was just entered.
        :param event: The event that caused the transition.
        """
        for callback in tuple(self._callbacks.get(state, ())):
            _CallbackInvoker.invoke(callback, state, event)

        if self._any is not None:
            _CallbackInvoker.invoke(self._any, state, event)


class _CallbackInvoker:
    """
    Internal helper calling a single callback and reporting its failure.
    """

    @staticmethod
    def invoke(callback: Callback, state: StateID, event: EventID) -> None:
        try:
            callback(event)
        except Exception:
            logger.exception(f"Callback {callback!r} failed on entering state '{state}' via event '{event}'")
            raise
