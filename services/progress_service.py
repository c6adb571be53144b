import logging
from datetime import timedelta
from functools import partial
from typing import Callable
from models.choices import ProgressWindow
from models.summary import ProgressPoint, ProgressReport
from services.store_service import EntityStore
from utils.date_utils import DateLike, today as current_day
from utils.exceptions import ValidationError
from utils.health_utils import round_half_up

logger = logging.getLogger(__name__)

class ProgressService:
    def __init__(self, store: EntityStore, today: Callable = None):
        """Initialize progress service with the entity store and a "today" source"""
        self.store = store
        self.today = today or partial(current_day, store.timezone_name)

    def get_time_series(self, user_id: int, window='week', today: DateLike = None) -> ProgressReport:
        """
        Per-day steps and workout counts over a trailing window

        Args:
            user_id: User ID
            window: 'week' (7 days), 'month' (30 days), a ProgressWindow or 7/30
            today: Last day of the window; defaults to the configured clock

        Returns:
            ProgressReport with exactly window_days points, oldest first
        """
        days = self._window_days(window)
        end_date = self.store.local_day(today) if today is not None else self.today()
        start_date = end_date - timedelta(days=days - 1)

        activity_logs = self.store.get_activity_logs(user_id, start_date, end_date)
        exercise_logs = self.store.get_exercise_logs(user_id, start_date, end_date)

        steps_by_day = {log.date: log.steps for log in activity_logs}
        workouts_by_day = {}
        for log in exercise_logs:
            log_day = log.date.date()
            workouts_by_day[log_day] = workouts_by_day.get(log_day, 0) + 1

        points = []
        for offset in range(days):
            day = start_date + timedelta(days=offset)
            points.append(ProgressPoint(
                day=day,
                steps=steps_by_day.get(day, 0),
                workouts=workouts_by_day.get(day, 0)
            ))

        total_steps = sum(log.steps for log in activity_logs)
        avg_steps = round_half_up(total_steps / len(activity_logs)) if activity_logs else 0

        report = ProgressReport(
            window_days=days,
            start_date=start_date,
            end_date=end_date,
            points=points,
            total_workouts=len(exercise_logs),
            total_steps=total_steps,
            avg_steps=avg_steps,
            total_active_minutes=sum(log.active_minutes for log in activity_logs)
        )

        logger.debug(f"Progress for user {user_id}: {days} days ending {end_date}")
        return report

    @staticmethod
    def _window_days(window) -> int:
        if isinstance(window, str):
            try:
                return ProgressWindow[window].value
            except KeyError:
                raise ValidationError('window', "must be 'week' or 'month'")
        try:
            return ProgressWindow(window).value
        except ValueError:
            raise ValidationError('window', "must be 7 or 30 days")
