import logging
from config.settings import Config
from database.connection import Database
from services.health_service import HealthService
from services.progress_service import ProgressService
from services.store_service import EntityStore
from services.streak_service import StreakTracker
from services.summary_service import DailySummaryService
from utils.profile_context import ProfileContext

logger = logging.getLogger(__name__)

class FitnessTrackerApp:
    """Everything the UI needs, built once at process start"""

    def __init__(self, config, database: Database):
        self.config = config
        self.database = database
        self.context = ProfileContext()

        self.store = EntityStore(
            database,
            streak_tracker=StreakTracker(),
            timezone_name=config.TIMEZONE
        )
        self.summary_service = DailySummaryService(self.store)
        self.progress_service = ProgressService(self.store)
        self.health_service = HealthService(
            self.store,
            self.context,
            summary_service=self.summary_service,
            progress_service=self.progress_service
        )

    def close(self):
        self.database.dispose()
        logger.info("Fitness tracker stopped")

def create_app(config=Config):
    """Create and configure the fitness tracker"""
    # Validate configuration
    config.validate()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Initialize database
    database = Database(config.DATABASE_URL, echo=config.SQL_ECHO)
    database.init()

    app = FitnessTrackerApp(config, database)

    if config.SEED_FOOD_CATALOG:
        app.store.seed_food_items()

    logger.info("Fitness tracker started")
    return app
