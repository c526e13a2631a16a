"""
Unit tests for the soft schedule filters.

Thresholds are "at least half" except:
- days off (exact count of free Monday-Friday days)
- hybrid delivery (needs both kinds present)
"""

import unittest

from schedulegen.filters import DEFAULT_FILTERS, get_active_days, meets_filter_criteria
from schedulegen.model import ScheduleFilters
from tests.helpers import meeting, section


def on(**kwargs) -> ScheduleFilters:
    return ScheduleFilters(is_enabled=True, **kwargs)


class TestDisabled(unittest.TestCase):
    def test_disabled_accepts_everything(self) -> None:
        s = section("A", "100", "10000", meeting("Saturday", "06:00", "07:00"), meeting("Sunday", "22:00", "23:00"))
        self.assertTrue(meets_filter_criteria([s], DEFAULT_FILTERS))
        self.assertTrue(meets_filter_criteria([s], ScheduleFilters(is_enabled=False, days_off="oneDay")))

    def test_enabled_with_any_accepts(self) -> None:
        s = section("A", "100", "10000", meeting("Monday", "09:00", "10:00"), meeting("Tuesday", "09:00", "10:00"))
        self.assertTrue(meets_filter_criteria([s], on()))


class TestDaysOff(unittest.TestCase):
    def setUp(self) -> None:
        a = section("A", "100", "10000", meeting("Monday", "09:00", "10:00"), meeting("Wednesday", "09:00", "10:00"))
        b = section("B", "200", "20000", meeting("Friday", "09:00", "10:00"), meeting("Monday", "11:00", "12:00"))
        self.mwf = [a, b]

    def test_two_days_off(self) -> None:
        self.assertEqual(get_active_days(self.mwf), {"Monday", "Wednesday", "Friday"})
        self.assertTrue(meets_filter_criteria(self.mwf, on(days_off="twoDays")))
        self.assertFalse(meets_filter_criteria(self.mwf, on(days_off="oneDay")))

    def test_weekend_meetings_do_not_count(self) -> None:
        c = section("C", "300", "30000", meeting("Saturday", "09:00", "10:00"), meeting("Sunday", "09:00", "10:00"))
        self.assertTrue(meets_filter_criteria(self.mwf + [c], on(days_off="twoDays")))

    def test_one_day_off(self) -> None:
        c = section("C", "300", "30000", meeting("Tuesday", "09:00", "10:00"), meeting("Tuesday", "13:00", "14:00"))
        self.assertTrue(meets_filter_criteria(self.mwf + [c], on(days_off="oneDay")))
        self.assertFalse(meets_filter_criteria(self.mwf + [c], on(days_off="twoDays")))


class TestDeliveryMode(unittest.TestCase):
    def setUp(self) -> None:
        self.half = [
            section("A", "100", "10000", meeting("Monday", "09:00", "10:00", "Online"), meeting("Tuesday", "09:00", "10:00")),
        ]
        self.mostly_online = [
            section("A", "100", "10000", meeting("Monday", "09:00", "10:00", "Online"), meeting("Tuesday", "09:00", "10:00", "Online")),
            section("B", "200", "20000", meeting("Wednesday", "09:00", "10:00", "Online"), meeting("Thursday", "09:00", "10:00")),
        ]
        self.all_in_person = [
            section("A", "100", "10000", meeting("Monday", "09:00", "10:00"), meeting("Tuesday", "09:00", "10:00")),
        ]

    def test_online_majority(self) -> None:
        self.assertTrue(meets_filter_criteria(self.half, on(delivery_mode="online")))
        self.assertTrue(meets_filter_criteria(self.mostly_online, on(delivery_mode="online")))
        self.assertFalse(meets_filter_criteria(self.all_in_person, on(delivery_mode="online")))

    def test_in_person_majority(self) -> None:
        self.assertTrue(meets_filter_criteria(self.half, on(delivery_mode="inPerson")))
        self.assertFalse(meets_filter_criteria(self.mostly_online, on(delivery_mode="inPerson")))
        self.assertTrue(meets_filter_criteria(self.all_in_person, on(delivery_mode="inPerson")))

    def test_hybrid_needs_both(self) -> None:
        self.assertTrue(meets_filter_criteria(self.half, on(delivery_mode="hybrid")))
        self.assertFalse(meets_filter_criteria(self.all_in_person, on(delivery_mode="hybrid")))


class TestTimeOfDay(unittest.TestCase):
    def test_morning_band_is_half_open(self) -> None:
        # 08:00 counts as morning, 12:00 does not
        s = section("A", "100", "10000", meeting("Monday", "08:00", "09:00"), meeting("Tuesday", "12:00", "13:00"))
        self.assertTrue(meets_filter_criteria([s], on(time_of_day="morning")))
        self.assertTrue(meets_filter_criteria([s], on(time_of_day="afternoon")))
        self.assertFalse(meets_filter_criteria([s], on(time_of_day="evening")))

    def test_evening_majority(self) -> None:
        a = section("A", "100", "10000", meeting("Monday", "18:00", "19:00"), meeting("Tuesday", "20:59", "21:30"))
        b = section("B", "200", "20000", meeting("Wednesday", "21:00", "22:00"), meeting("Thursday", "07:59", "09:00"))
        self.assertTrue(meets_filter_criteria([a, b], on(time_of_day="evening")))
        self.assertFalse(meets_filter_criteria([a, b], on(time_of_day="morning")))


class TestCompactness(unittest.TestCase):
    def test_no_multi_meeting_day_passes(self) -> None:
        s = section("A", "100", "10000", meeting("Monday", "08:00", "09:00"), meeting("Tuesday", "12:00", "13:00"))
        self.assertTrue(meets_filter_criteria([s], on(schedule_compactness="compact")))
        self.assertTrue(meets_filter_criteria([s], on(schedule_compactness="spread")))

    def test_compact_gap_limit(self) -> None:
        a = section("A", "100", "10000", meeting("Monday", "09:00", "10:00"), meeting("Tuesday", "09:00", "10:00"))
        # 2h gap on Monday is still compact
        b = section("B", "200", "20000", meeting("Monday", "12:00", "13:00"), meeting("Friday", "09:00", "10:00"))
        self.assertTrue(meets_filter_criteria([a, b], on(schedule_compactness="compact")))
        self.assertTrue(meets_filter_criteria([a, b], on(schedule_compactness="spread")))

        c = section("C", "300", "30000", meeting("Monday", "12:01", "13:00"), meeting("Friday", "09:00", "10:00"))
        self.assertFalse(meets_filter_criteria([a, c], on(schedule_compactness="compact")))

    def test_spread_needs_hour_gaps(self) -> None:
        a = section("A", "100", "10000", meeting("Monday", "09:00", "10:00"), meeting("Tuesday", "09:00", "10:00"))
        b = section("B", "200", "20000", meeting("Monday", "10:30", "11:30"), meeting("Friday", "09:00", "10:00"))
        self.assertFalse(meets_filter_criteria([a, b], on(schedule_compactness="spread")))
        self.assertTrue(meets_filter_criteria([a, b], on(schedule_compactness="compact")))

    def test_half_of_days_is_enough(self) -> None:
        # Monday back-to-back (not spread), Tuesday 3h apart (spread)
        a = section("A", "100", "10000", meeting("Monday", "09:00", "10:00"), meeting("Tuesday", "09:00", "10:00"))
        b = section("B", "200", "20000", meeting("Monday", "10:00", "11:00"), meeting("Tuesday", "13:00", "14:00"))
        self.assertTrue(meets_filter_criteria([a, b], on(schedule_compactness="spread")))
        self.assertTrue(meets_filter_criteria([a, b], on(schedule_compactness="compact")))

    def test_all_checks_must_pass(self) -> None:
        a = section("A", "100", "10000", meeting("Monday", "09:00", "10:00"), meeting("Wednesday", "09:00", "10:00"))
        b = section("B", "200", "20000", meeting("Friday", "09:00", "10:00"), meeting("Monday", "11:00", "12:00"))
        self.assertTrue(meets_filter_criteria([a, b], on(days_off="twoDays", time_of_day="morning")))
        self.assertFalse(meets_filter_criteria([a, b], on(days_off="twoDays", time_of_day="evening")))


if __name__ == "__main__":
    unittest.main()
