"""
Reservation Audit

Checks a set of success records against the allocation invariants:
no seat handed out twice, every seat in range, every seat list ascending.
"""

from collections import defaultdict
from collections.abc import Iterable

import attrs

from src.service.theatre_booking.domain.value_object.success_record import SuccessRecord


@attrs.frozen
class AuditResult:
    double_booked: dict[tuple[int, int], list[int]]  # (theatre, seat) -> customer ids
    out_of_range: list[SuccessRecord]
    unordered: list[SuccessRecord]

    @property
    def is_clean(self) -> bool:
        return not (self.double_booked or self.out_of_range or self.unordered)


def audit_success_records(
    records: Iterable[SuccessRecord], *, theatre_count: int, seats_per_theatre: int
) -> AuditResult:
    holders: dict[tuple[int, int], list[int]] = defaultdict(list)
    out_of_range: list[SuccessRecord] = []
    unordered: list[SuccessRecord] = []

    for record in records:
        seats = record.seat_numbers
        if not 1 <= record.theatre_number <= theatre_count or any(
            not 1 <= seat <= seats_per_theatre for seat in seats
        ):
            out_of_range.append(record)
        if any(a >= b for a, b in zip(seats, seats[1:])):
            unordered.append(record)
        for seat in seats:
            holders[(record.theatre_number, seat)].append(record.customer_id)

    return AuditResult(
        double_booked={key: ids for key, ids in holders.items() if len(ids) > 1},
        out_of_range=out_of_range,
        unordered=unordered,
    )
