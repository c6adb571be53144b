import unittest
from datetime import date, datetime
from tests.test_config import BaseTestCase
from services.summary_service import DailySummaryService
from utils.exceptions import NotFoundError

DAY = date(2024, 5, 8)

class TestDailySummary(BaseTestCase):
    """Test cases for the daily rollup"""

    def setUp(self):
        super().setUp()
        self.service = DailySummaryService(self.store)
        self.user = self.create_user()

    def test_empty_day_only_has_goal(self):
        summary = self.service.get_daily_summary(self.user.id, DAY)

        self.assertEqual(summary.date, DAY)
        self.assertEqual(summary.steps, 0)
        self.assertEqual(summary.calories_consumed, 0)
        self.assertEqual(summary.calories_burned, 0)
        self.assertEqual(summary.workouts_count, 0)
        self.assertEqual(summary.active_minutes, 0)
        self.assertEqual(summary.calories_goal, 2694)

    def test_full_day(self):
        chicken = self.food_item('Chicken Breast')
        rice = self.food_item('Brown Rice')

        self.store.upsert_activity_log({
            'user_id': self.user.id, 'date': DAY, 'steps': 8500, 'active_minutes': 40, 'calories_burned': 320
        })
        self.store.log_food({'user_id': self.user.id, 'food_item_id': chicken.id, 'quantity': 150,
                             'meal_type': 'lunch', 'date': datetime(2024, 5, 8, 12, 0)})
        self.store.log_food({'user_id': self.user.id, 'food_item_id': rice.id, 'quantity': 200,
                             'meal_type': 'dinner', 'date': datetime(2024, 5, 8, 23, 45)})
        self.store.log_exercise({'user_id': self.user.id, 'exercise_name': 'Running',
                                 'date': datetime(2024, 5, 8, 6, 30)})
        self.store.log_exercise({'user_id': self.user.id, 'exercise_name': 'Squats',
                                 'date': datetime(2024, 5, 8, 18, 0)})

        summary = self.service.get_daily_summary(self.user.id, DAY)

        self.assertEqual(summary.steps, 8500)
        self.assertEqual(summary.active_minutes, 40)
        self.assertEqual(summary.calories_burned, 320)
        self.assertEqual(summary.workouts_count, 2)
        self.assertAlmostEqual(summary.calories_consumed, 247.5 + 222)
        self.assertAlmostEqual(summary.protein_consumed, 46.5 + 5.2)
        self.assertAlmostEqual(summary.net_calories, 469.5 - 320)

    def test_other_days_are_excluded(self):
        apple = self.food_item('Apple')
        self.store.log_food({'user_id': self.user.id, 'food_item_id': apple.id, 'quantity': 100,
                             'meal_type': 'snack', 'date': datetime(2024, 5, 7, 23, 59)})
        self.store.log_exercise({'user_id': self.user.id, 'exercise_name': 'Yoga',
                                 'date': datetime(2024, 5, 9, 0, 0)})
        self.store.upsert_activity_log({'user_id': self.user.id, 'date': date(2024, 5, 9), 'steps': 100})

        summary = self.service.get_daily_summary(self.user.id, DAY)
        self.assertEqual(summary.calories_consumed, 0)
        self.assertEqual(summary.workouts_count, 0)
        self.assertEqual(summary.steps, 0)

    def test_other_users_are_excluded(self):
        other = self.create_user(name='Sam')
        self.store.upsert_activity_log({'user_id': other.id, 'date': DAY, 'steps': 5000})

        self.assertEqual(self.service.get_daily_summary(self.user.id, DAY).steps, 0)

    def test_goal_follows_profile_edits(self):
        self.store.update_user(self.user.id, {'goal': 'weight_loss'})
        self.assertEqual(self.service.get_daily_summary(self.user.id, DAY).calories_goal, 2194)

    def test_timestamp_argument_uses_its_day(self):
        self.store.upsert_activity_log({'user_id': self.user.id, 'date': DAY, 'steps': 1234})
        summary = self.service.get_daily_summary(self.user.id, datetime(2024, 5, 8, 21, 15))
        self.assertEqual(summary.steps, 1234)

    def test_unknown_user(self):
        with self.assertRaises(NotFoundError):
            self.service.get_daily_summary(999, DAY)

    def test_to_dict(self):
        data = self.service.get_daily_summary(self.user.id, DAY).to_dict()
        self.assertEqual(data['date'], '2024-05-08')
        self.assertEqual(data['calories_goal'], 2694)
        self.assertEqual(data['net_calories'], 0)

if __name__ == '__main__':
    unittest.main()
