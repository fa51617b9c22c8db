from src.service.theatre_booking.app.dto.booking_outcome import BookingOutcome
from src.service.theatre_booking.app.dto.simulation_report import SimulationReport


__all__ = ['BookingOutcome', 'SimulationReport']
