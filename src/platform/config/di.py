"""
https://python-dependency-injector.ets-labs.org/index.html
"""

import threading

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.theatre_booking.app.command.customer_booking_use_case import (
    CustomerBookingUseCase,
)
from src.service.theatre_booking.app.reservation_engine import ReservationEngine
from src.service.theatre_booking.driven_adapter.state.in_memory_outcome_log import (
    InMemoryOutcomeLog,
)
from src.service.theatre_booking.driving_adapter.simulation_driver import SimulationDriver


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Raised by the driver when the await deadline passes
    interrupt_event = providers.Singleton(threading.Event)

    # Shared sinks
    success_log = providers.Singleton(InMemoryOutcomeLog)
    fail_log = providers.Singleton(InMemoryOutcomeLog)

    reservation_engine = providers.Singleton(
        ReservationEngine.create,
        theatre_count=config_service.provided.THEATRE_COUNT,
        seats_per_theatre=config_service.provided.SEATS_PER_THEATRE,
        success_log=success_log,
        fail_log=fail_log,
    )

    # Use cases
    customer_booking_use_case = providers.Factory(
        CustomerBookingUseCase,
        engine=reservation_engine,
        settings=config_service,
        interrupt=interrupt_event,
    )

    simulation_driver = providers.Factory(
        SimulationDriver,
        engine=reservation_engine,
        booking_use_case=customer_booking_use_case,
        settings=config_service,
        interrupt=interrupt_event,
    )


container = Container()
