import threading

import attrs


@attrs.define(eq=False)
class SeatEntity:
    """
    Smallest unit of allocation.

    A seat is its own unit of atomicity: try_reserve and release are mutually
    exclusive for a given seat. The owning theatre is the only legitimate caller.
    """

    number: int = attrs.field(validator=attrs.validators.gt(0))
    _reserved: bool = attrs.field(default=False, alias='reserved')
    _lock: threading.Lock = attrs.field(factory=threading.Lock, init=False, repr=False)

    @property
    def reserved(self) -> bool:
        return self._reserved

    def try_reserve(self) -> bool:
        """Reserve the seat if free. False means somebody already holds it."""
        with self._lock:
            if self._reserved:
                return False
            self._reserved = True
            return True

    def release(self) -> None:
        """Unconditionally free the seat; only used to roll back an unpublished grab."""
        with self._lock:
            self._reserved = False
