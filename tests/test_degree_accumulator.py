import pytest

from frame_timing.degree_accumulator import DEGREE_PERIOD, DegreeAccumulator


def test_fresh_accumulator_starts_at_zero_with_full_budget() -> None:
    acc = DegreeAccumulator()
    assert acc.angle_degrees == 0.0
    assert acc.degree_budget == DEGREE_PERIOD


def test_one_degree_period_advances_exactly_one_degree() -> None:
    acc = DegreeAccumulator()
    assert acc.advance(DEGREE_PERIOD) == 1
    assert acc.angle_degrees == 1.0
    assert acc.degree_budget == pytest.approx(DEGREE_PERIOD)


def test_large_step_carries_multiple_degrees_in_one_call() -> None:
    acc = DegreeAccumulator()
    assert acc.advance(10 * DEGREE_PERIOD) == 10
    assert acc.angle_degrees == 10.0
    assert 0.0 <= acc.degree_budget < DEGREE_PERIOD + 1e-9


def test_partial_step_keeps_remainder_for_next_tick() -> None:
    acc = DegreeAccumulator()
    assert acc.advance(0.01) == 3
    assert acc.angle_degrees == 3.0
    assert acc.degree_budget == pytest.approx(4 * DEGREE_PERIOD - 0.01)

    # 余量足够再推进 1 度
    assert acc.advance(0.0011112) == 1
    assert acc.angle_degrees == 4.0


def test_zero_step_does_not_move_needle() -> None:
    acc = DegreeAccumulator()
    assert acc.advance(0.0) == 0
    assert acc.angle_degrees == 0.0
    assert acc.degree_budget == DEGREE_PERIOD


def test_angle_wraps_to_zero_instead_of_360() -> None:
    acc = DegreeAccumulator(angle_degrees=359.0)
    acc.advance(DEGREE_PERIOD)
    assert acc.angle_degrees == 0.0


def test_wrap_inside_multi_degree_carry() -> None:
    acc = DegreeAccumulator(angle_degrees=355.0)
    assert acc.advance(10 * DEGREE_PERIOD) == 10
    assert acc.angle_degrees == 5.0


def test_angle_stays_in_range_over_many_ticks() -> None:
    acc = DegreeAccumulator()
    for _ in range(1000):
        acc.advance(1 / 120)
        assert 0.0 <= acc.angle_degrees < 360.0
        assert acc.degree_budget < DEGREE_PERIOD + 1e-9


def test_full_revolution_takes_about_one_second() -> None:
    acc = DegreeAccumulator()
    total = 0
    for _ in range(120):
        total += acc.advance(1 / 120)
    # 360 * 0.0027778 ≈ 1.00001 秒
    assert total in (359, 360)
