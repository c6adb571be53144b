# Models package
from .user_profile import UserProfile
from .exercise_log import ExerciseLog
from .activity_log import ActivityLog
from .food_item import FoodItem
from .food_log import FoodLog
from .streak import Streak
from .summary import DailySummary, FoodLogEntry, ProgressPoint, ProgressReport

__all__ = [
    'UserProfile', 'ExerciseLog', 'ActivityLog', 'FoodItem', 'FoodLog', 'Streak',
    'DailySummary', 'FoodLogEntry', 'ProgressPoint', 'ProgressReport'
]
