import logging
from datetime import date
from typing import NamedTuple, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from models.streak import Streak
from utils.date_utils import DateLike, days_between, to_calendar_day
from utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class StreakState(NamedTuple):
    current_streak: int
    longest_streak: int
    last_workout_date: Optional[date]


def next_streak_state(state: StreakState, workout_date: DateLike) -> Optional[StreakState]:
    """
    Apply one workout to a streak state

    Args:
        state: Current (current_streak, longest_streak, last_workout_date)
        workout_date: Day or timestamp of the logged workout

    Returns:
        The new state, or None when the workout falls on last_workout_date
    """
    workout_day = to_calendar_day(workout_date)

    if state.last_workout_date is None:
        current = 1
    else:
        days_diff = days_between(to_calendar_day(state.last_workout_date), workout_day)
        if days_diff == 0:
            return None
        elif days_diff == 1:
            current = state.current_streak + 1
        else:
            # Gaps and backdated logs both restart the streak
            current = 1

    return StreakState(current, max(state.longest_streak, current), workout_day)


class StreakTracker:
    """Sole writer of the streaks table"""

    def record_workout(self, session: Session, user_id: int, workout_date: DateLike) -> Streak:
        """
        Advance the user's streak for a workout, inside the caller's transaction

        Args:
            session: Open session of the exercise-log write
            user_id: Owner of the workout
            workout_date: Day or timestamp of the workout

        Returns:
            The Streak row after the update
        """
        streak = session.execute(
            select(Streak).where(Streak.user_id == user_id).with_for_update()
        ).scalar_one_or_none()
        if streak is None:
            raise NotFoundError('Streak for user', user_id)

        state = StreakState(streak.current_streak, streak.longest_streak, streak.last_workout_date)
        new_state = next_streak_state(state, workout_date)
        if new_state is None:
            logger.info(f"Workout on {to_calendar_day(workout_date)} already counted for user {user_id}")
            return streak

        streak.current_streak = new_state.current_streak
        streak.longest_streak = new_state.longest_streak
        streak.last_workout_date = new_state.last_workout_date
        session.flush()

        logger.info(f"Streak for user {user_id}: current={streak.current_streak}, longest={streak.longest_streak}")
        return streak
