import logging
from models.summary import DailySummary
from services.store_service import EntityStore
from utils.date_utils import DateLike
from utils.exceptions import NotFoundError
from utils.health_utils import HealthCalculator

logger = logging.getLogger(__name__)

class DailySummaryService:
    def __init__(self, store: EntityStore):
        """Initialize summary service with the entity store"""
        self.store = store

    def get_daily_summary(self, user_id: int, target_date: DateLike) -> DailySummary:
        """
        Roll up one calendar day for a user

        Args:
            user_id: User ID
            target_date: Day to summarise; a time-of-day component is ignored

        Returns:
            DailySummary with activity, nutrition and workout totals and the
            calorie goal computed from the current profile
        """
        day = self.store.local_day(target_date)

        user_profile = self.store.get_user(user_id)
        if not user_profile:
            raise NotFoundError('UserProfile', user_id)

        activity_log = self.store.get_activity_log(user_id, day)
        food_logs = self.store.get_food_logs_for_date(user_id, day)
        exercise_logs = self.store.get_exercise_logs(user_id, day, day)

        summary = DailySummary(
            date=day,
            steps=activity_log.steps if activity_log else 0,
            calories_consumed=sum(log.calories for log in food_logs),
            calories_burned=activity_log.calories_burned if activity_log else 0,
            calories_goal=HealthCalculator.calorie_goal_for_profile(user_profile),
            workouts_count=len(exercise_logs),
            active_minutes=activity_log.active_minutes if activity_log else 0,
            protein_consumed=sum(log.protein for log in food_logs),
            carbs_consumed=sum(log.carbs for log in food_logs),
            fats_consumed=sum(log.fats for log in food_logs),
        )

        logger.debug(f"Daily summary for user {user_id} on {day}: {summary}")
        return summary
