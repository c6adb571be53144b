import logging
from typing import Dict, List, Optional
from models.activity_log import ActivityLog
from models.exercise_log import ExerciseLog
from models.food_item import FoodItem
from models.food_log import FoodLog
from models.streak import Streak
from models.summary import DailySummary, FoodLogEntry, ProgressReport
from models.user_profile import UserProfile
from services.progress_service import ProgressService
from services.store_service import EntityStore
from services.summary_service import DailySummaryService
from utils.date_utils import DateLike
from utils.exceptions import NotFoundError
from utils.health_utils import HealthCalculator
from utils.profile_context import ProfileContext

logger = logging.getLogger(__name__)

class HealthService:
    """Data-access API offered to the UI, scoped to the active profile"""

    def __init__(self, store: EntityStore, context: ProfileContext,
                 summary_service: DailySummaryService = None,
                 progress_service: ProgressService = None):
        self.store = store
        self.context = context
        self.summary_service = summary_service or DailySummaryService(store)
        self.progress_service = progress_service or ProgressService(store)

    # Profile

    def create_user(self, profile: Dict) -> UserProfile:
        """Create a profile and make it the active one"""
        user_profile = self.store.create_user(profile)
        self.context.activate(user_profile.id)
        return user_profile

    def get_current_user(self) -> Optional[UserProfile]:
        """The active profile, falling back to the most recently created one"""
        if self.context.is_set:
            user_profile = self.store.get_user(self.context.user_id)
            if user_profile:
                return user_profile
            logger.warning(f"Active profile {self.context.user_id} no longer exists")
            self.context.clear()

        user_profile = self.store.get_current_user()
        if user_profile:
            self.context.activate(user_profile.id)
        return user_profile

    def update_user(self, updates: Dict) -> UserProfile:
        return self.store.update_user(self._active_user_id(), updates)

    def _active_user_id(self) -> int:
        user_profile = self.get_current_user()
        if not user_profile:
            raise NotFoundError('UserProfile', 'current')
        return user_profile.id

    def get_profile_metrics(self) -> Dict:
        """Display numbers derived from the active profile"""
        user_profile = self.get_current_user()
        if not user_profile:
            raise NotFoundError('UserProfile', 'current')

        bmr = HealthCalculator.calculate_bmr(
            user_profile.weight_kg, user_profile.height_cm, user_profile.age, user_profile.gender
        )
        tdee = HealthCalculator.calculate_tdee(bmr, user_profile.activity_level)
        bmi, bmi_category = HealthCalculator.calculate_bmi(user_profile.weight_kg, user_profile.height_cm)

        return {
            'bmr': bmr,
            'tdee': tdee,
            'calorie_goal': HealthCalculator.calculate_calorie_goal(tdee, user_profile.goal),
            'bmi': bmi,
            'bmi_category': bmi_category,
            'protein_goal_g': HealthCalculator.calculate_protein_goal(user_profile.weight_kg, user_profile.goal),
        }

    def estimate_exercise_calories(self, exercise_type: str, duration_min: float) -> int:
        """Calories for an exercise at the active profile's weight"""
        user_profile = self.get_current_user()
        if not user_profile:
            raise NotFoundError('UserProfile', 'current')
        return HealthCalculator.estimate_calories_burned(user_profile.weight_kg, duration_min, exercise_type)

    # Logging

    def log_activity(self, entry: Dict) -> ActivityLog:
        return self.store.upsert_activity_log({**entry, 'user_id': self._active_user_id()})

    upsert_activity_log = log_activity

    def log_exercise(self, entry: Dict) -> ExerciseLog:
        return self.store.append_exercise_log({**entry, 'user_id': self._active_user_id()})

    def log_food(self, entry: Dict) -> FoodLog:
        return self.store.append_food_log({**entry, 'user_id': self._active_user_id()})

    def search_food_items(self, text: str) -> List[FoodItem]:
        return self.store.search_food_items(text)

    # Reads

    def get_streak(self) -> Optional[Streak]:
        return self.store.get_streak(self._active_user_id())

    def get_exercise_logs(self, start: DateLike = None, end: DateLike = None) -> List[ExerciseLog]:
        return self.store.get_exercise_logs(self._active_user_id(), start, end)

    def get_activity_logs(self, start: DateLike = None, end: DateLike = None) -> List[ActivityLog]:
        return self.store.get_activity_logs(self._active_user_id(), start, end)

    def get_food_logs(self, day: DateLike) -> List[FoodLogEntry]:
        return self.store.get_food_logs_for_date(self._active_user_id(), day)

    def get_daily_summary(self, day: DateLike = None) -> DailySummary:
        """Summary for a day; defaults to today"""
        if day is None:
            day = self.progress_service.today()
        return self.summary_service.get_daily_summary(self._active_user_id(), day)

    def get_calorie_balance(self, day: DateLike = None) -> Dict:
        """Net intake for a day against the active profile's calorie goal"""
        summary = self.get_daily_summary(day)
        return HealthCalculator.calorie_balance(
            summary.calories_consumed, summary.calories_burned, summary.calories_goal
        )

    def get_progress(self, window='week') -> ProgressReport:
        return self.progress_service.get_time_series(self._active_user_id(), window)
