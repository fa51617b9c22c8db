import attrs


def _to_seat_tuple(seat_numbers: list[int] | tuple[int, ...]) -> tuple[int, ...]:
    return tuple(seat_numbers)


@attrs.frozen
class SuccessRecord:
    """One satisfied customer: who, where, and which seats (in the order taken)."""

    customer_id: int
    theatre_number: int
    seat_numbers: tuple[int, ...] = attrs.field(converter=_to_seat_tuple)

    def render(self) -> str:
        seats = ', '.join(str(seat) for seat in self.seat_numbers)
        return (
            f'Customer {self.customer_id:2d} successfully reserved Seat No. {seats} '
            f'in Theatre {self.theatre_number}'
        )
