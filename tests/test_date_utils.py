import unittest
from datetime import date, datetime
import pytz
from utils.date_utils import day_bounds, days_between, range_bounds, to_calendar_day, to_timestamp, today

class TestDateUtils(unittest.TestCase):
    """Test calendar-day helpers"""

    def test_to_calendar_day(self):
        self.assertEqual(to_calendar_day(datetime(2024, 5, 8, 23, 59)), date(2024, 5, 8))
        self.assertEqual(to_calendar_day(date(2024, 5, 8)), date(2024, 5, 8))
        self.assertEqual(to_calendar_day('2024-05-08T10:00:00'), date(2024, 5, 8))

    def test_to_calendar_day_rejects_other_types(self):
        with self.assertRaises(TypeError):
            to_calendar_day(20240508)

    def test_to_timestamp(self):
        self.assertEqual(to_timestamp(date(2024, 5, 8)), datetime(2024, 5, 8, 0, 0))
        self.assertEqual(to_timestamp('2024-05-08 07:15'), datetime(2024, 5, 8, 7, 15))

    def test_aware_values_convert_to_zone(self):
        late_utc = pytz.utc.localize(datetime(2024, 5, 8, 22, 30))

        self.assertEqual(to_timestamp(late_utc, 'Europe/Moscow'), datetime(2024, 5, 9, 1, 30))
        self.assertEqual(to_calendar_day(late_utc, 'Europe/Moscow'), date(2024, 5, 9))
        self.assertEqual(to_calendar_day('2024-05-08T22:30:00+00:00', 'Europe/Moscow'), date(2024, 5, 9))
        self.assertEqual(to_timestamp(late_utc), datetime(2024, 5, 8, 22, 30))

    def test_naive_values_are_taken_as_local(self):
        self.assertEqual(to_timestamp(datetime(2024, 5, 8, 22, 30), 'Europe/Moscow'), datetime(2024, 5, 8, 22, 30))

    def test_day_bounds(self):
        start, end = day_bounds(date(2024, 2, 29))
        self.assertEqual(start, datetime(2024, 2, 29))
        self.assertEqual(end, datetime(2024, 3, 1))

    def test_range_bounds_widen_to_whole_days(self):
        lower, upper = range_bounds(datetime(2024, 5, 1, 15, 0), date(2024, 5, 3))
        self.assertEqual(lower, datetime(2024, 5, 1))
        self.assertEqual(upper, datetime(2024, 5, 4))

        self.assertEqual(range_bounds(None, None), (None, None))

    def test_days_between(self):
        self.assertEqual(days_between(date(2024, 5, 1), date(2024, 5, 2)), 1)
        self.assertEqual(days_between(date(2024, 5, 2), date(2024, 5, 1)), -1)
        self.assertEqual(days_between(date(2023, 12, 31), date(2024, 1, 1)), 1)

    def test_today_in_zone(self):
        self.assertIsInstance(today('Europe/Moscow'), date)

if __name__ == '__main__':
    unittest.main()
