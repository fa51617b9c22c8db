from pytest_bdd import scenarios


scenarios('theatre_reservation.feature')
