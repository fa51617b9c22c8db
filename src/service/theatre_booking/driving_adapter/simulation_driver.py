"""
Simulation Driver

Launches one booking worker per customer on a thread pool sized to the
customer count, waits for them within the overall deadline, and collects the
logs into a SimulationReport.
"""

from collections.abc import Callable
from functools import partial
import random
import threading

import anyio
import anyio.to_thread

from src.platform.config.core_setting import Settings
from src.platform.logging.loguru_io import Logger
from src.service.theatre_booking.app.command.customer_booking_use_case import (
    CustomerBookingUseCase,
)
from src.service.theatre_booking.app.dto import BookingOutcome, SimulationReport
from src.service.theatre_booking.app.reservation_engine import ReservationEngine
from src.service.theatre_booking.domain.reservation_audit import audit_success_records


RngFactory = Callable[[int], random.Random]


def default_rng_factory(customer_id: int) -> random.Random:
    """Independent, OS-seeded generator per customer."""
    return random.Random()


class SimulationDriver:
    def __init__(
        self,
        *,
        engine: ReservationEngine,
        booking_use_case: CustomerBookingUseCase,
        settings: Settings,
        interrupt: threading.Event,
        rng_factory: RngFactory = default_rng_factory,
    ) -> None:
        self.engine = engine
        self.booking_use_case = booking_use_case
        self.settings = settings
        self.interrupt = interrupt
        self.rng_factory = rng_factory

    @Logger.io(truncate_content=True)
    async def run(self) -> SimulationReport:
        customer_count = self.settings.CUSTOMER_COUNT
        limiter = anyio.CapacityLimiter(customer_count)
        outcomes: list[BookingOutcome] = []

        Logger.base.info(
            f'[DRIVER] {customer_count} customers, {len(self.engine.theatres)} theatres, '
            f'{self.engine.total_capacity} seats'
        )

        with anyio.move_on_after(self.settings.AWAIT_DEADLINE_SECONDS) as scope:
            async with anyio.create_task_group() as tg:
                for customer_id in range(1, customer_count + 1):
                    tg.start_soon(self._run_customer, customer_id, limiter, outcomes)

        if scope.cancelled_caught:
            # Wake workers still in their confirmation delay; they record and exit
            self.interrupt.set()
            Logger.base.info(
                f'[DRIVER] Deadline of {self.settings.AWAIT_DEADLINE_SECONDS}s passed with '
                f'{customer_count - len(outcomes)} customers unfinished, reporting what was logged'
            )

        report = SimulationReport(
            customer_count=customer_count,
            successes=tuple(self.engine.success_log.snapshot()),
            failures=tuple(self.engine.fail_log.snapshot()),
            outcomes=tuple(outcomes),
            timed_out=scope.cancelled_caught,
        )
        self._audit(report)
        return report

    async def _run_customer(
        self, customer_id: int, limiter: anyio.CapacityLimiter, outcomes: list[BookingOutcome]
    ) -> None:
        rng = self.rng_factory(customer_id)
        outcome = await anyio.to_thread.run_sync(
            partial(self.booking_use_case.execute, customer_id=customer_id, rng=rng),
            abandon_on_cancel=True,
            limiter=limiter,
        )
        outcomes.append(outcome)

    def _audit(self, report: SimulationReport) -> None:
        result = audit_success_records(
            report.successes,
            theatre_count=len(self.engine.theatres),
            seats_per_theatre=self.settings.SEATS_PER_THEATRE,
        )
        if not result.is_clean:
            Logger.base.error(
                f'[DRIVER] Allocation audit failed: double booked {result.double_booked}, '
                f'out of range {result.out_of_range}, unordered {result.unordered}'
            )
        Logger.base.info(
            f'[DRIVER] {len(report.successes)} customers seated '
            f'({report.reserved_seat_total} seats), {len(report.failures)} turned away'
        )
