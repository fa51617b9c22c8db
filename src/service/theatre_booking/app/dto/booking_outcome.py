import attrs


@attrs.frozen
class BookingOutcome:
    customer_id: int
    theatre_number: int
    requested_count: int
    seat_numbers: tuple[int, ...] = ()
    interrupted: bool = False  # confirmation sleep was cut short

    @property
    def succeeded(self) -> bool:
        return bool(self.seat_numbers)
