from __future__ import annotations

from side_effects.generators import NumberSource


def test_number_stays_within_inclusive_bounds() -> None:
    source = NumberSource(seed=3)

    values = {source.number(1, 3) for _ in range(200)}

    assert values == {1, 2, 3}


def test_reversed_bounds_are_swapped() -> None:
    source = NumberSource(seed=3)

    for _ in range(50):
        assert 10 <= source.number(20, 10) <= 20


def test_equal_bounds_return_the_bound() -> None:
    assert NumberSource().number(-4, -4) == -4


def test_same_seed_gives_same_sequence() -> None:
    first = NumberSource(seed=42)
    second = NumberSource(seed=42)

    assert [first.number(0, 1000) for _ in range(5)] == [second.number(0, 1000) for _ in range(5)]
    assert first.unit() == second.unit()


def test_unit_is_half_open_interval() -> None:
    source = NumberSource(seed=9)

    for _ in range(100):
        value = source.unit()
        assert 0.0 <= value < 1.0
