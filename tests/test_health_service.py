import unittest
from datetime import date, datetime
from tests.test_config import BaseTestCase
from services.health_service import HealthService
from services.progress_service import ProgressService
from services.summary_service import DailySummaryService
from utils.exceptions import NotFoundError
from utils.profile_context import ProfileContext

class TestHealthService(BaseTestCase):
    """Test cases for the UI-facing service scoped to the active profile"""

    def setUp(self):
        super().setUp()
        self.context = ProfileContext()
        self.service = HealthService(
            self.store,
            self.context,
            summary_service=DailySummaryService(self.store),
            progress_service=ProgressService(self.store, today=lambda: date(2024, 5, 10))
        )

    def test_create_user_activates_profile(self):
        user = self.service.create_user(self.make_profile())

        self.assertEqual(self.context.user_id, user.id)
        self.assertEqual(self.service.get_current_user().id, user.id)

    def test_current_user_falls_back_to_latest_profile(self):
        user = self.create_user()

        self.assertFalse(self.context.is_set)
        self.assertEqual(self.service.get_current_user().id, user.id)
        self.assertEqual(self.context.user_id, user.id)

    def test_active_profile_wins_over_latest(self):
        first = self.service.create_user(self.make_profile(name='First'))
        self.create_user(name='Second')

        self.assertEqual(self.service.get_current_user().id, first.id)

    def test_no_profile(self):
        self.assertIsNone(self.service.get_current_user())
        with self.assertRaises(NotFoundError):
            self.service.log_exercise({'exercise_name': 'Running'})

    def test_logging_goes_to_active_profile(self):
        user = self.service.create_user(self.make_profile())
        other = self.create_user(name='Sam')
        apple = self.food_item('Apple')

        self.service.log_exercise({'exercise_name': 'Running', 'date': datetime(2024, 5, 10, 7, 0)})
        self.service.log_activity({'date': date(2024, 5, 10), 'steps': 4200})
        self.service.log_food({'food_item_id': apple.id, 'quantity': 200, 'meal_type': 'snack',
                               'date': datetime(2024, 5, 10, 15, 0)})

        self.assertEqual(len(self.store.get_exercise_logs(user.id)), 1)
        self.assertEqual(self.store.get_exercise_logs(other.id), [])
        self.assertEqual(self.service.get_streak().current_streak, 1)
        self.assertEqual(len(self.service.get_activity_logs()), 1)
        self.assertAlmostEqual(self.service.get_food_logs(date(2024, 5, 10))[0].calories, 104)

        summary = self.service.get_daily_summary()
        self.assertEqual(summary.date, date(2024, 5, 10))
        self.assertEqual(summary.steps, 4200)
        self.assertEqual(summary.workouts_count, 1)

        progress = self.service.get_progress('week')
        self.assertEqual(progress.steps_series[-1], 4200)

    def test_profile_metrics(self):
        self.service.create_user(self.make_profile())
        metrics = self.service.get_profile_metrics()

        self.assertEqual(metrics['bmr'], 1738)
        self.assertEqual(metrics['tdee'], 2694)
        self.assertEqual(metrics['calorie_goal'], 2694)
        self.assertEqual(metrics['bmi'], 24.7)
        self.assertEqual(metrics['bmi_category'], 'Normal')
        self.assertEqual(metrics['protein_goal_g'], 128)

    def test_update_user_changes_goal(self):
        self.service.create_user(self.make_profile())
        self.service.update_user({'goal': 'muscle_gain'})

        self.assertEqual(self.service.get_profile_metrics()['calorie_goal'], 2994)
        self.assertEqual(self.service.get_profile_metrics()['protein_goal_g'], 160)

    def test_calorie_balance_for_day(self):
        self.service.create_user(self.make_profile())
        apple = self.food_item('Apple')
        self.service.log_food({'food_item_id': apple.id, 'quantity': 200, 'meal_type': 'snack',
                               'date': datetime(2024, 5, 10, 15, 0)})
        self.service.log_activity({'date': date(2024, 5, 10), 'steps': 3000, 'calories_burned': 100})

        balance = self.service.get_calorie_balance()

        self.assertAlmostEqual(balance['net_calories'], 4)
        self.assertAlmostEqual(balance['remaining_calories'], 2690)
        self.assertFalse(balance['over_target'])

    def test_estimate_exercise_calories(self):
        self.service.create_user(self.make_profile())
        self.assertEqual(self.service.estimate_exercise_calories('cycling', 45), 480)

    def test_search_food_items(self):
        names = [item.name for item in self.service.search_food_items('yog')]
        self.assertEqual(names, ['Greek Yogurt'])

class TestProfileContext(unittest.TestCase):

    def test_activate_and_clear(self):
        context = ProfileContext()
        self.assertFalse(context.is_set)

        context.activate(3)
        self.assertEqual(context.user_id, 3)

        context.clear()
        self.assertFalse(context.is_set)

if __name__ == '__main__':
    unittest.main()
