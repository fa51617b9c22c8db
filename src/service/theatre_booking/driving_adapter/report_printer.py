import sys
from typing import TextIO

from src.service.theatre_booking.app.dto import SimulationReport


FAILURE_PREFIX = 'Customers unable to reserve seats: '


def render_report_lines(report: SimulationReport) -> list[str]:
    lines = [record.render() for record in report.successes]
    if report.failures:
        lines.append(FAILURE_PREFIX + ', '.join(str(customer) for customer in report.failures))
    return lines


def print_report(report: SimulationReport, *, stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in render_report_lines(report):
        print(line, file=out)
