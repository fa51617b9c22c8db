"""
Theatre Booking Simulator - Main Entry

Runs the default scenario (100 customers against three 20-seat theatres)
and prints the booking report to standard output.
"""

import sys

import anyio

from src.platform.config.di import container
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.service.theatre_booking.app.dto import SimulationReport
from src.service.theatre_booking.driving_adapter.report_printer import print_report


async def main() -> SimulationReport:
    driver = container.simulation_driver()
    report = await driver.run()
    print_report(report)
    return report


def cli() -> None:
    try:
        anyio.run(main)
    except* CustomBaseError as eg:
        # Worker failures arrive wrapped in the task group's ExceptionGroup
        for e in eg.exceptions:
            Logger.base.error(f'[MAIN] {type(e).__name__}: {e}')
        sys.exit(1)


if __name__ == '__main__':
    cli()
