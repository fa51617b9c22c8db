class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainError(CustomBaseError):
    """Out-of-contract use of a domain object (programmer misuse)."""


class SeatCountOutOfRangeError(DomainError):
    def __init__(self, *, count: int, capacity: int) -> None:
        self.count = count
        self.capacity = capacity
        super().__init__(f'Seat count {count} out of range 1..{capacity}')


class ConfigurationError(CustomBaseError):
    pass
