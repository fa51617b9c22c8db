"""
BDD Step Definitions for Theatre Reservation

Customers run one after another through CustomerBookingUseCase against a
single theatre, so results are deterministic.
"""

from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when


@pytest.fixture
def context() -> dict[str, Any]:
    """Shared test context for storing state between steps"""
    return {'next_customer_id': 1}


def _book(context: dict[str, Any], seat_count: int, scripted_rng) -> Any:
    customer_id = context['next_customer_id']
    context['next_customer_id'] += 1
    outcome = context['use_case'].execute(
        customer_id=customer_id, rng=scripted_rng(theatre_index=0, seat_count=seat_count)
    )
    context['last_outcome'] = outcome
    return outcome


# =============================================================================
# Given
# =============================================================================
@given(parsers.parse('an empty theatre with {seat_count:d} seats'))
def empty_theatre(
    context: dict[str, Any],
    seat_count: int,
    engine_factory,
    booking_use_case_factory,
    instant_settings,
) -> None:
    engine = engine_factory(theatre_count=1, seats_per_theatre=seat_count)
    context['engine'] = engine
    context['theatre'] = engine.theatres[0]
    context['use_case'] = booking_use_case_factory(engine, instant_settings)


@given(parsers.parse('seats {first:d} to {last:d} are already reserved'))
def seats_already_reserved(context: dict[str, Any], first: int, last: int) -> None:
    for number in range(first, last + 1):
        assert context['theatre'].seats[number - 1].try_reserve()


# =============================================================================
# When
# =============================================================================
@when(parsers.parse('a customer requests {seat_count:d} seats'))
def customer_requests(context: dict[str, Any], seat_count: int, scripted_rng) -> None:
    _book(context, seat_count, scripted_rng)


@when(parsers.parse('{customers:d} customers each request {seat_count:d} seats one after another'))
def customers_request_in_turn(
    context: dict[str, Any], customers: int, seat_count: int, scripted_rng
) -> None:
    for _ in range(customers):
        _book(context, seat_count, scripted_rng)


# =============================================================================
# Then
# =============================================================================
@then(parsers.parse('that customer is given seats "{seats}"'))
def customer_given_seats(context: dict[str, Any], seats: str) -> None:
    outcome = context['last_outcome']
    assert ', '.join(str(seat) for seat in outcome.seat_numbers) == seats
    assert context['engine'].success_log.snapshot()[-1].customer_id == outcome.customer_id


@then(
    parsers.parse(
        'customers {first:d} to {last:d} are seated in consecutive blocks of {size:d} from seat 1'
    )
)
def customers_seated_in_blocks(context: dict[str, Any], first: int, last: int, size: int) -> None:
    records = {r.customer_id: r for r in context['engine'].success_log.snapshot()}
    for index, customer_id in enumerate(range(first, last + 1)):
        start = index * size + 1
        assert records[customer_id].seat_numbers == tuple(range(start, start + size))


@then(parsers.parse('customer {customer_id:d} is turned away'))
def customer_turned_away(context: dict[str, Any], customer_id: int) -> None:
    assert customer_id in context['engine'].fail_log.snapshot()


@then('that customer is turned away')
def last_customer_turned_away(context: dict[str, Any]) -> None:
    outcome = context['last_outcome']
    assert not outcome.succeeded
    assert context['engine'].fail_log.snapshot()[-1] == outcome.customer_id


@then(parsers.parse('the theatre has {free:d} free seats'))
def theatre_free_seats(context: dict[str, Any], free: int) -> None:
    assert context['theatre'].available_seat_count() == free


@then(parsers.parse('seats {first:d} to {last:d} are still reserved'))
def seats_still_reserved(context: dict[str, Any], first: int, last: int) -> None:
    seats = context['theatre'].seats
    assert all(seats[n - 1].reserved for n in range(first, last + 1))


@then(parsers.parse('seats {first:d} to {last:d} are still free'))
def seats_still_free(context: dict[str, Any], first: int, last: int) -> None:
    seats = context['theatre'].seats
    assert not any(seats[n - 1].reserved for n in range(first, last + 1))
