from datetime import datetime, time, timezone

from src.erp_dashboard.erp_dashboard.attendance.calculator.standard_calculator import StandardPunctualityCalculator


def test_minutes_late_and_early_are_clamped():
    calc = StandardPunctualityCalculator()

    assert calc.minutes_late(datetime(2025, 1, 1, 9, 15), time(9, 0)) == 15
    assert calc.minutes_late(datetime(2025, 1, 1, 8, 45), time(9, 0)) == 0
    assert calc.minutes_early(datetime(2025, 1, 1, 16, 50), time(17, 0)) == 10
    assert calc.minutes_early(datetime(2025, 1, 1, 18, 0), time(17, 0)) == 0


def test_partial_minutes_are_floored():
    calc = StandardPunctualityCalculator()

    assert calc.minutes_late(datetime(2025, 1, 1, 9, 0, 59), time(9, 0)) == 0
    assert calc.minutes_late(datetime(2025, 1, 1, 9, 1, 30), time(9, 0)) == 1


def test_missing_timestamps_give_zero():
    calc = StandardPunctualityCalculator()

    assert calc.minutes_late(None, time(9, 0)) == 0
    assert calc.minutes_early(None, time(17, 0)) == 0
    assert calc.working_hours(datetime(2025, 1, 1, 9, 0), None) == 0


def test_working_hours_rounded_and_never_negative():
    calc = StandardPunctualityCalculator()

    assert calc.working_hours(datetime(2025, 1, 1, 9, 15), datetime(2025, 1, 1, 16, 50)) == 7.58
    assert calc.working_hours(datetime(2025, 1, 1, 17, 0), datetime(2025, 1, 1, 9, 0)) == 0


def test_wall_clock_is_used_without_timezone_conversion():
    calc = StandardPunctualityCalculator()
    check_in = datetime(2025, 1, 1, 9, 10, tzinfo=timezone.utc)

    assert calc.minutes_late(check_in, time(9, 0)) == 10
