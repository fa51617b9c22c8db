"""
Customer Booking Use Case - one customer's single booking attempt
"""

import random
import threading

from src.platform.config.core_setting import Settings
from src.platform.logging.loguru_io import Logger
from src.service.theatre_booking.app.dto import BookingOutcome
from src.service.theatre_booking.app.reservation_engine import ReservationEngine
from src.service.theatre_booking.domain.value_object.success_record import SuccessRecord


class CustomerBookingUseCase:
    """
    Customer Booking Use Case

    Flow:
    1. Pick a theatre uniformly at random
    2. Pick a seat count uniformly from the configured range (1..3 by default)
    3. Reserve that many seats in the theatre (all or nothing)
    4. Nothing free → record the customer in the fail log
    5. Otherwise wait out the confirmation delay, then record the success

    Runs on a worker thread. Seats are never handed back once step 3 succeeds:
    an interrupted confirmation still records the success, and the interrupt
    flag stays set so the rest of the run winds down promptly.

    Dependencies:
    - engine: theatres + shared logs
    - settings: request size and delay ranges
    - interrupt: raised by the driver when the overall deadline passes
    """

    def __init__(
        self,
        *,
        engine: ReservationEngine,
        settings: Settings,
        interrupt: threading.Event,
    ) -> None:
        self.engine = engine
        self.settings = settings
        self.interrupt = interrupt

    @Logger.io
    def execute(self, *, customer_id: int, rng: random.Random) -> BookingOutcome:
        theatre = self.engine.theatres[rng.randrange(len(self.engine.theatres))]
        count = rng.randint(
            self.settings.MIN_SEATS_PER_REQUEST, self.settings.MAX_SEATS_PER_REQUEST
        )

        seat_numbers = theatre.reserve_seats(count=count)
        if not seat_numbers:
            self.engine.record_failure(customer_id)
            Logger.base.debug(
                f'[CUSTOMER] {customer_id} could not get {count} seats in theatre {theatre.number}'
            )
            return BookingOutcome(
                customer_id=customer_id, theatre_number=theatre.number, requested_count=count
            )

        delay_ms = rng.randint(
            self.settings.CONFIRMATION_DELAY_MIN_MS, self.settings.CONFIRMATION_DELAY_MAX_MS
        )
        interrupted = self.interrupt.wait(delay_ms / 1000)
        if interrupted:
            Logger.base.debug(
                f'[CUSTOMER] {customer_id} confirmation interrupted, keeping seats {seat_numbers}'
            )

        self.engine.record_success(
            SuccessRecord(
                customer_id=customer_id,
                theatre_number=theatre.number,
                seat_numbers=seat_numbers,
            )
        )
        return BookingOutcome(
            customer_id=customer_id,
            theatre_number=theatre.number,
            requested_count=count,
            seat_numbers=tuple(seat_numbers),
            interrupted=interrupted,
        )
