import unittest
import os
import sys
from datetime import datetime

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database.connection import Database
from services.store_service import EntityStore

FIXED_NOW = datetime(2024, 5, 10, 9, 30)

class TestConfig:
    """Test configuration"""
    DATABASE_URL = 'sqlite://'
    SQL_ECHO = False
    SEED_FOOD_CATALOG = True
    TIMEZONE = 'UTC'
    LOG_LEVEL = 'WARNING'
    DEBUG = False
    TESTING = True

    @classmethod
    def validate(cls):
        return True

class BaseTestCase(unittest.TestCase):
    """Base test case with a fresh in-memory database per test"""

    def setUp(self):
        """Set up test fixtures"""
        self.database = Database(TestConfig.DATABASE_URL)
        self.database.init()
        self.store = EntityStore(self.database, clock=lambda: FIXED_NOW)
        self.store.seed_food_items()

    def tearDown(self):
        """Clean up after tests"""
        self.database.dispose()

    def make_profile(self, **overrides):
        profile = {
            'name': 'Alex',
            'age': 30,
            'gender': 'male',
            'height': 180,
            'weight': 80,
            'fitness_level': 'intermediate',
            'goal': 'maintenance',
            'activity_level': 'moderately_active',
        }
        profile.update(overrides)
        return profile

    def create_user(self, **overrides):
        return self.store.create_user(self.make_profile(**overrides))

    def food_item(self, name):
        return next(item for item in self.store.search_food_items(name) if item.name == name)
