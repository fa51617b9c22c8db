import attrs

from src.service.theatre_booking.app.dto.booking_outcome import BookingOutcome
from src.service.theatre_booking.domain.value_object.success_record import SuccessRecord


@attrs.frozen
class SimulationReport:
    """
    Result of one simulation run.

    successes / failures are snapshots of the two shared logs taken after the
    await; outcomes only contains workers that finished before the deadline.
    """

    customer_count: int
    successes: tuple[SuccessRecord, ...]
    failures: tuple[int, ...]
    outcomes: tuple[BookingOutcome, ...] = ()
    timed_out: bool = False

    @property
    def reserved_seat_total(self) -> int:
        return sum(len(record.seat_numbers) for record in self.successes)
