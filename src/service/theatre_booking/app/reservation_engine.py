"""
Reservation Engine

The shared state every customer worker races against: the theatres plus the
success and failure logs.
"""

import attrs

from src.service.theatre_booking.app.interface.i_outcome_log import IOutcomeLog
from src.service.theatre_booking.domain.aggregate.theatre_aggregate import (
    DEFAULT_SEATS_PER_THEATRE,
    TheatreAggregate,
)
from src.service.theatre_booking.domain.value_object.success_record import SuccessRecord


@attrs.define(eq=False)
class ReservationEngine:
    theatres: tuple[TheatreAggregate, ...] = attrs.field(converter=tuple)
    success_log: IOutcomeLog[SuccessRecord]
    fail_log: IOutcomeLog[int]

    @classmethod
    def create(
        cls,
        *,
        theatre_count: int,
        success_log: IOutcomeLog[SuccessRecord],
        fail_log: IOutcomeLog[int],
        seats_per_theatre: int = DEFAULT_SEATS_PER_THEATRE,
    ) -> 'ReservationEngine':
        theatres = [
            TheatreAggregate.create(number=number, seat_count=seats_per_theatre)
            for number in range(1, theatre_count + 1)
        ]
        return cls(theatres=theatres, success_log=success_log, fail_log=fail_log)

    @property
    def total_capacity(self) -> int:
        return sum(theatre.capacity for theatre in self.theatres)

    def record_success(self, record: SuccessRecord) -> None:
        self.success_log.append(record)

    def record_failure(self, customer_id: int) -> None:
        self.fail_log.append(customer_id)
