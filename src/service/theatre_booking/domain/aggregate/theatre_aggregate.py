"""
Theatre Aggregate

Owns a fixed, ordered set of seats and exposes one bulk operation:
reserve N seats or nothing.
"""

import threading

import attrs

from src.platform.exception.exceptions import SeatCountOutOfRangeError
from src.platform.logging.loguru_io import Logger
from src.service.theatre_booking.domain.entity.seat_entity import SeatEntity


DEFAULT_SEATS_PER_THEATRE = 20


@attrs.define(eq=False)
class TheatreAggregate:
    number: int = attrs.field(validator=attrs.validators.gt(0))
    seats: tuple[SeatEntity, ...] = attrs.field(converter=tuple)
    _lock: threading.Lock = attrs.field(factory=threading.Lock, init=False, repr=False)

    @classmethod
    def create(
        cls, *, number: int, seat_count: int = DEFAULT_SEATS_PER_THEATRE
    ) -> 'TheatreAggregate':
        return cls(
            number=number,
            seats=[SeatEntity(number=seat_no) for seat_no in range(1, seat_count + 1)],
        )

    @property
    def capacity(self) -> int:
        return len(self.seats)

    def reserve_seats(self, *, count: int) -> list[int]:
        """
        Reserve exactly `count` seats, lowest numbers first, or none at all.

        The theatre lock is held for the whole walk, so no other caller can
        observe a half-completed grab or a rollback in progress.

        Returns:
            Seat numbers taken, ascending; an empty list when fewer than
            `count` seats are free (seat states are then unchanged).

        Raises:
            SeatCountOutOfRangeError: count outside 1..capacity
        """
        if not 1 <= count <= self.capacity:
            raise SeatCountOutOfRangeError(count=count, capacity=self.capacity)

        with self._lock:
            taken: list[SeatEntity] = []
            for seat in self.seats:
                if not seat.try_reserve():
                    continue
                taken.append(seat)
                if len(taken) == count:
                    break

            if len(taken) < count:
                for seat in taken:
                    seat.release()
                Logger.base.debug(
                    f'[THEATRE] Theatre {self.number}: {count} seats requested, '
                    f'only {len(taken)} free, rolled back'
                )
                return []

            return [seat.number for seat in taken]

    def available_seat_count(self) -> int:
        with self._lock:
            return sum(1 for seat in self.seats if not seat.reserved)

    def reserved_seat_numbers(self) -> list[int]:
        with self._lock:
            return [seat.number for seat in self.seats if seat.reserved]
