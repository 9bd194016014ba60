# micromachine/tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from micromachine.core.machine import Machine


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def order_machine() -> Machine:
    """A machine with pending/confirmed/ignored states, starting at pending."""
    machine = Machine("pending")
    machine.when("confirm", {"pending": "confirmed"})
    machine.when("ignore", {"pending": "ignored"})
    machine.when("reset", {"confirmed": "pending", "ignored": "pending"})
    return machine
