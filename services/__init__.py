# Services package
from .streak_service import StreakTracker
from .store_service import EntityStore
from .summary_service import DailySummaryService
from .progress_service import ProgressService
from .health_service import HealthService

__all__ = ['StreakTracker', 'EntityStore', 'DailySummaryService', 'ProgressService', 'HealthService']
