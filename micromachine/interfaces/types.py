# micromachine/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Callable, Dict

StateID = str
EventID = str

# Source state -> destination state, for a single event
Transitions = Dict[StateID, StateID]

# Callback Types
Callback = Callable[[EventID], None]
