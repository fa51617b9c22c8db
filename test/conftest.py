"""
Test Configuration and Fixtures

This module provides:
- Test log directory setup (must happen before application imports)
- Settings with the confirmation delay switched off for fast runs
- Engine factory wired with in-memory outcome logs
- ScriptedRandom for deterministic customer workers

Architecture:
- Unit tests (test/**/unit/): single-threaded or small thread fan-outs
- Integration tests (test/**/integration/): full driver runs with worker threads
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# loguru_io_config reads TEST_LOG_DIR and settings at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # A developer's shell overrides must not change the scenario under test
    for key in list(os.environ):
        if key.startswith('THEATRE_SIM_'):
            del os.environ[key]


_early_setup_test_environment()

from collections import deque  # noqa: E402
from collections.abc import Callable  # noqa: E402
import random  # noqa: E402
import threading  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402
from src.service.theatre_booking.app.command.customer_booking_use_case import (  # noqa: E402
    CustomerBookingUseCase,
)
from src.service.theatre_booking.app.reservation_engine import ReservationEngine  # noqa: E402
from src.service.theatre_booking.driven_adapter.state.in_memory_outcome_log import (  # noqa: E402
    InMemoryOutcomeLog,
)


class ScriptedRandom(random.Random):
    """Random source that always picks the given theatre, seat count and delay."""

    def __init__(self, *, theatre_index: int = 0, seat_count: int = 1, delay_ms: int = 0) -> None:
        super().__init__(0)
        self.theatre_index = theatre_index
        self._randint_values = deque([seat_count, delay_ms])

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        return self.theatre_index

    def randint(self, a: int, b: int) -> int:
        value = self._randint_values.popleft()
        assert a <= value <= b, f'scripted value {value} outside {a}..{b}'
        return value


@pytest.fixture
def instant_settings() -> Settings:
    """Default scenario without the confirmation delay."""
    return Settings(CONFIRMATION_DELAY_MIN_MS=0, CONFIRMATION_DELAY_MAX_MS=0)


@pytest.fixture
def engine_factory() -> Callable[..., ReservationEngine]:
    def _create(*, theatre_count: int = 3, seats_per_theatre: int = 20) -> ReservationEngine:
        return ReservationEngine.create(
            theatre_count=theatre_count,
            seats_per_theatre=seats_per_theatre,
            success_log=InMemoryOutcomeLog(),
            fail_log=InMemoryOutcomeLog(),
        )

    return _create


@pytest.fixture
def interrupt() -> threading.Event:
    return threading.Event()


@pytest.fixture
def scripted_rng() -> type[ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture
def booking_use_case_factory(
    interrupt: threading.Event,
) -> Callable[[ReservationEngine, Settings], CustomerBookingUseCase]:
    def _create(engine: ReservationEngine, settings: Settings) -> CustomerBookingUseCase:
        return CustomerBookingUseCase(engine=engine, settings=settings, interrupt=interrupt)

    return _create
