# micromachine/tests/integration/test_machine_integration.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Integration tests driving a machine through a complete workflow using the
public package API.
"""

import logging
from typing import List

import pytest

import micromachine
from micromachine import InvalidStateError, Machine, TransitionError


class AuditTrail:
    """Catch-all observer recording every transition with the resulting state."""

    def __init__(self, machine: Machine) -> None:
        self.machine = machine
        self.entries: List[str] = []
        self.logger = logging.getLogger("micromachine.test.audit")

    def __call__(self, event: str) -> None:
        entry = f"{event} -> {self.machine.state}"
        self.logger.info(entry)
        self.entries.append(entry)


@pytest.fixture
def document_machine() -> Machine:
    machine = Machine("draft")
    machine.when("submit", {"draft": "review", "rejected": "review"})
    machine.when("approve", {"review": "published"})
    machine.when("reject", {"review": "rejected"})
    machine.when("archive", {"published": "archived", "rejected": "archived"})
    return machine


def test_public_api_exports() -> None:
    """Test that the package root exposes the machine and its errors."""
    assert micromachine.Machine is Machine
    assert issubclass(micromachine.InvalidEventError, TransitionError)
    assert issubclass(micromachine.EventAlreadyRegisteredError, micromachine.MachineError)
    assert micromachine.__version__


def test_document_workflow(document_machine: Machine, caplog) -> None:
    """Test a review workflow with per-state notifications and an audit trail."""
    notifications = []
    audit = AuditTrail(document_machine)
    document_machine.on("review", lambda e: notifications.append(f"reviewer notified ({e})"))
    document_machine.on("rejected", lambda e: notifications.append("author notified"))
    document_machine.on_any(audit)

    with caplog.at_level(logging.INFO, logger="micromachine.test.audit"):
        for event in ["submit", "reject", "submit", "approve", "archive"]:
            assert event in document_machine.triggerable_events()
            document_machine.trigger(event)

    assert document_machine.state == "archived"
    assert document_machine.triggerable_events() == set()
    assert notifications == [
        "reviewer notified (submit)",
        "author notified",
        "reviewer notified (submit)",
    ]
    assert audit.entries == [
        "submit -> review",
        "reject -> rejected",
        "submit -> review",
        "approve -> published",
        "archive -> archived",
    ]
    assert "approve -> published" in caplog.text


def test_terminal_state_rejects_everything(document_machine: Machine) -> None:
    """Test that once archived, every registered event is refused."""
    for event in ["submit", "approve", "archive"]:
        document_machine.trigger(event)

    for event in document_machine.events():
        with pytest.raises(InvalidStateError):
            document_machine.trigger(event)
    assert document_machine.state == "archived"


def test_states_grow_with_registration() -> None:
    """Test that the known states are introduced purely by event registration."""
    machine = Machine("off")
    assert machine.states() == {"off"}

    machine.when("power", {"off": "on", "on": "off"})
    assert machine.states() == {"off", "on"}

    machine.when("fault", {"on": "broken"})
    assert machine.states() == {"off", "on", "broken"}

    machine.trigger("power")
    machine.trigger("fault")
    assert machine.state == "broken"
    assert machine.triggerable_events() == set()
