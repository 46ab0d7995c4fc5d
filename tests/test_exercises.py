import io

import pytest

from estudos.exercises import (
    TotalTooLarge,
    book_hotel,
    contador,
    distribute_work,
    soma,
    soma_limitada,
)


def test_soma():
    assert soma(1, 1) == 2


@pytest.mark.parametrize("a,b", [(0, 0), (3, 4), (-2, 7), (100, -50)])
def test_soma_is_commutative(a, b):
    assert soma(a, b) == soma(b, a)


def test_soma_limitada_rejects_large_totals():
    with pytest.raises(TotalTooLarge, match="Total maior que 10"):
        soma_limitada(10, 10)


@pytest.mark.parametrize("x,y", [(4, 5), (5, 5), (0, 0), (-3, 2)])
def test_soma_limitada_matches_soma_within_limit(x, y):
    assert soma_limitada(x, y) == soma(x, y)


def test_contador_writes_numbered_lines():
    out = io.StringIO()
    contador("a", count=3, delay=0, out=out)
    assert out.getvalue().splitlines() == ["a: 0", "a: 1", "a: 2"]


def test_contador_default_count():
    out = io.StringIO()
    contador("b", delay=0, out=out)
    assert len(out.getvalue().splitlines()) == 10


def test_distribute_work_delivers_each_value_once():
    out = io.StringIO()
    received = distribute_work(["A", "B", "C"], range(1, 20), delay=0, out=out)
    assert set(received) == {"A", "B", "C"}
    delivered = sorted(v for values in received.values() for v in values)
    assert delivered == list(range(1, 20))
    assert len(out.getvalue().splitlines()) == 19


def test_distribute_work_output_format():
    out = io.StringIO()
    distribute_work(["Solo"], [7, 8], delay=0, out=out)
    assert out.getvalue().splitlines() == ["Worker Solo recebeu 7", "Worker Solo recebeu 8"]


def test_book_hotel_times_out():
    assert book_hotel(timeout=0.01, booking_time=0.05) == "Hotel is full"


def test_book_hotel_reserves_before_deadline():
    assert book_hotel(timeout=0.05, booking_time=0.01) == "Room reserved with sucess"