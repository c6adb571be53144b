import os
import pytz
from dotenv import load_dotenv

load_dotenv()

class Config:
    # Database
    DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///fitness_tracker.db')
    SQL_ECHO = os.getenv('SQL_ECHO', 'False').lower() == 'true'

    # Food catalog seeding on startup
    SEED_FOOD_CATALOG = os.getenv('SEED_FOOD_CATALOG', 'True').lower() == 'true'

    # Clock used for "today"
    TIMEZONE = os.getenv('TIMEZONE', 'UTC')

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    @classmethod
    def validate(cls):
        """Validate that all required settings are present and usable"""
        problems = []

        if not getattr(cls, 'DATABASE_URL', None):
            problems.append('DATABASE_URL is required')

        timezone_name = getattr(cls, 'TIMEZONE', None)
        if timezone_name not in pytz.all_timezones_set:
            problems.append(f"TIMEZONE '{timezone_name}' is not a known timezone")

        if problems:
            raise ValueError(f"Invalid configuration: {'; '.join(problems)}")

        return True
