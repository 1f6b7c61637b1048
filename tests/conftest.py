# ABOUTME: Shared test fixtures for the forecast widget test suite.
# ABOUTME: Provides a ready-made three-slot payload in the forecast API wire format.

import pytest

from tests.payloads import SLOT_EVENING, SLOT_MORNING, SLOT_NIGHT, make_payload


@pytest.fixture
def three_slot_payload() -> dict:
    return make_payload(SLOT_MORNING, SLOT_EVENING, SLOT_NIGHT, update_time="2025-12-11 05:00:00")
