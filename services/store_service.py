import logging
import math
from datetime import date, datetime
from functools import partial
from typing import Callable, Dict, Iterable, List, Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from database.connection import Database
from data.food_catalog import COMMON_FOODS
from models.activity_log import ActivityLog
from models.choices import ActivityLevel, FitnessLevel, Gender, Goal, LogKind, LogSource, MealType
from models.exercise_log import ExerciseLog
from models.food_item import FoodItem
from models.food_log import FoodLog
from models.streak import Streak
from models.summary import FoodLogEntry
from models.user_profile import UserProfile
from services.streak_service import StreakTracker
from utils.date_utils import DateLike, now, range_bounds, to_calendar_day, to_timestamp
from utils.exceptions import ConstraintViolation, NotFoundError, ValidationError
from utils.health_utils import HealthCalculator

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 20

# Names the UI forms use -> column names
FIELD_ALIASES = {
    'height': 'height_cm',
    'weight': 'weight_kg',
    'duration': 'duration_min',
    'distance': 'distance_km',
    'quantity': 'quantity_g',
}

PROFILE_CHOICES = {
    'gender': Gender,
    'fitness_level': FitnessLevel,
    'goal': Goal,
    'activity_level': ActivityLevel,
}
PROFILE_NUMBERS = ('age', 'height_cm', 'weight_kg')


def _normalize_fields(entry: Dict) -> Dict:
    return {FIELD_ALIASES.get(key, key): value for key, value in entry.items()}


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _require(data: Dict, field: str):
    value = data.get(field)
    if _is_missing(value):
        raise ValidationError(field, "is required")
    return value


def _choice(field: str, value, choices) -> str:
    try:
        return choices(getattr(value, 'value', value)).value
    except ValueError:
        allowed = ', '.join(choice.value for choice in choices)
        raise ValidationError(field, f"must be one of: {allowed}")


def _text(field: str, value) -> str:
    if not isinstance(value, str):
        raise ValidationError(field, "must be text")
    return value.strip()


def _number(field: str, value, positive: bool = False):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field, "must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(field, "must be a finite number")
    if positive and value <= 0:
        raise ValidationError(field, "must be greater than zero")
    if value < 0:
        raise ValidationError(field, "must not be negative")
    return value


def _date_value(field: str, value, convert, timezone_name: str):
    try:
        return convert(value, timezone_name)
    except (TypeError, ValueError):
        raise ValidationError(field, "must be a date, datetime or ISO 8601 string")


class EntityStore:
    """CRUD over profiles, logs, food items and streaks"""

    def __init__(self, database: Database, streak_tracker: StreakTracker = None,
                 clock: Callable[[], datetime] = None, timezone_name: str = 'UTC'):
        self.db = database
        self.streak_tracker = streak_tracker or StreakTracker()
        self.timezone_name = timezone_name
        self.clock = clock or partial(now, timezone_name)

    def local_day(self, value, field: str = 'date') -> date:
        """Calendar day of value in the store's zone; bad input is a ValidationError"""
        return _date_value(field, value, to_calendar_day, self.timezone_name)

    def _timestamp(self, value, field: str = 'date') -> datetime:
        return _date_value(field, value, to_timestamp, self.timezone_name)

    def _entry_time(self, data: Dict):
        value = data.get('date')
        return self.clock() if _is_missing(value) else value

    def _range_bounds(self, start: DateLike, end: DateLike):
        try:
            return range_bounds(start, end, self.timezone_name)
        except (TypeError, ValueError):
            raise ValidationError('date', "range bounds must be dates, datetimes or ISO 8601 strings")

    # User operations

    def _validate_profile(self, data: Dict, partial_update: bool = False) -> Dict:
        values = {}
        for field in ('name',) + PROFILE_NUMBERS + tuple(PROFILE_CHOICES):
            if partial_update and field not in data:
                continue
            value = _require(data, field)
            if field in PROFILE_CHOICES:
                value = _choice(field, value, PROFILE_CHOICES[field])
            elif field in PROFILE_NUMBERS:
                value = _number(field, value, positive=True)
            else:
                value = _text(field, value)
            values[field] = value
        return values

    def _require_user(self, session, user_id: int) -> UserProfile:
        if user_id is None:
            raise ValidationError('user_id', "is required")
        user = session.get(UserProfile, user_id)
        if user is None:
            raise NotFoundError('UserProfile', user_id)
        return user

    def create_user(self, profile: Dict) -> UserProfile:
        """Create a profile together with its empty streak"""
        values = self._validate_profile(_normalize_fields(profile))
        try:
            with self.db.session_scope() as session:
                user = UserProfile(**values)
                session.add(user)
                session.flush()

                session.add(Streak(user_id=user.id, current_streak=0, longest_streak=0, last_workout_date=None))
                session.flush()
                session.refresh(user)
        except IntegrityError as e:
            logger.error(f"Error creating user profile: {str(e)}")
            raise ConstraintViolation(str(e.orig)) from e

        logger.info(f"Created user profile {user.id} ({user.name})")
        return user

    def get_user(self, user_id: int) -> Optional[UserProfile]:
        """Get user profile by ID"""
        with self.db.session_scope() as session:
            return session.get(UserProfile, user_id)

    def get_current_user(self) -> Optional[UserProfile]:
        """Most recently created profile"""
        with self.db.session_scope() as session:
            return session.execute(
                select(UserProfile)
                .order_by(UserProfile.created_at.desc(), UserProfile.id.desc())
                .limit(1)
            ).scalar_one_or_none()

    def update_user(self, user_id: int, updates: Dict) -> UserProfile:
        """Update user profile with given data"""
        data = {key: value for key, value in _normalize_fields(updates).items()
                if key not in ('id', 'created_at')}
        values = self._validate_profile(data, partial_update=True)

        with self.db.session_scope() as session:
            user = self._require_user(session, user_id)
            for key, value in values.items():
                setattr(user, key, value)

        logger.info(f"Updated user profile {user_id}: {values}")
        return user

    # Activity operations

    def upsert_activity_log(self, entry: Dict) -> ActivityLog:
        """Write the activity row for (user_id, date), replacing any existing one"""
        data = _normalize_fields(entry)
        user_id = _require(data, 'user_id')
        day = self.local_day(self._entry_time(data))
        steps = _number('steps', data.get('steps') or 0)
        active_minutes = _number('active_minutes', data.get('active_minutes') or 0)

        distance_km = data.get('distance_km')
        if distance_km is None:
            distance_km = HealthCalculator.estimate_distance_km(steps)
        calories_burned = data.get('calories_burned')
        if calories_burned is None:
            calories_burned = HealthCalculator.estimate_active_calories(active_minutes)

        values = {
            'steps': steps,
            'active_minutes': active_minutes,
            'distance_km': _number('distance_km', distance_km),
            'calories_burned': _number('calories_burned', calories_burned),
            'source': _choice('source', data.get('source') or LogSource.manual, LogSource),
        }

        try:
            with self.db.session_scope() as session:
                self._require_user(session, user_id)
                activity_log = session.execute(
                    select(ActivityLog)
                    .where(ActivityLog.user_id == user_id)
                    .where(ActivityLog.date == day)
                ).scalar_one_or_none()

                if activity_log is None:
                    activity_log = ActivityLog(user_id=user_id, date=day, **values)
                    session.add(activity_log)
                else:
                    for key, value in values.items():
                        setattr(activity_log, key, value)
                session.flush()
        except IntegrityError as e:
            logger.error(f"Error logging activity: {str(e)}")
            raise ConstraintViolation(str(e.orig)) from e

        logger.info(f"Logged activity for user {user_id} on {day}: {steps} steps")
        return activity_log

    log_activity = upsert_activity_log

    def get_activity_log(self, user_id: int, day: DateLike) -> Optional[ActivityLog]:
        """Get the activity row for one calendar day"""
        with self.db.session_scope() as session:
            return session.execute(
                select(ActivityLog)
                .where(ActivityLog.user_id == user_id)
                .where(ActivityLog.date == self.local_day(day))
            ).scalar_one_or_none()

    # Exercise operations

    def append_exercise_log(self, entry: Dict) -> ExerciseLog:
        """Insert a workout and advance the user's streak in the same transaction"""
        data = _normalize_fields(entry)
        user_id = _require(data, 'user_id')
        values = {
            'exercise_name': _text('exercise_name', _require(data, 'exercise_name')),
            'sets': _number('sets', data.get('sets') or 0),
            'reps': _number('reps', data.get('reps') or 0),
            'weight_kg': _number('weight_kg', data.get('weight_kg') or 0),
            'duration_min': _number('duration_min', data.get('duration_min') or 0),
            'date': self._timestamp(self._entry_time(data)),
            'source': _choice('source', data.get('source') or LogSource.manual, LogSource),
        }

        try:
            with self.db.session_scope() as session:
                self._require_user(session, user_id)
                exercise_log = ExerciseLog(user_id=user_id, **values)
                session.add(exercise_log)
                session.flush()

                self.streak_tracker.record_workout(session, user_id, exercise_log.date)
        except IntegrityError as e:
            logger.error(f"Error logging exercise: {str(e)}")
            raise ConstraintViolation(str(e.orig)) from e

        logger.info(f"Logged exercise for user {user_id}: {exercise_log.exercise_name}")
        return exercise_log

    log_exercise = append_exercise_log

    # Food operations

    def append_food_log(self, entry: Dict) -> FoodLog:
        """Insert a food log referencing an existing food item"""
        data = _normalize_fields(entry)
        user_id = _require(data, 'user_id')
        food_item_id = _require(data, 'food_item_id')
        values = {
            'quantity_g': _number('quantity_g', _require(data, 'quantity_g'), positive=True),
            'meal_type': _choice('meal_type', _require(data, 'meal_type'), MealType),
            'date': self._timestamp(self._entry_time(data)),
        }

        try:
            with self.db.session_scope() as session:
                self._require_user(session, user_id)
                if session.get(FoodItem, food_item_id) is None:
                    raise NotFoundError('FoodItem', food_item_id)

                food_log = FoodLog(user_id=user_id, food_item_id=food_item_id, **values)
                session.add(food_log)
                session.flush()
        except IntegrityError as e:
            logger.error(f"Error logging food: {str(e)}")
            raise ConstraintViolation(str(e.orig)) from e

        logger.info(f"Logged food for user {user_id}: item {food_item_id}, {values['quantity_g']}g")
        return food_log

    log_food = append_food_log

    def search_food_items(self, text: str) -> List[FoodItem]:
        """Case-insensitive substring search on food names"""
        with self.db.session_scope() as session:
            return list(session.execute(
                select(FoodItem)
                .where(FoodItem.name.icontains(text or '', autoescape=True))
                .order_by(FoodItem.id)
                .limit(SEARCH_LIMIT)
            ).scalars())

    def get_all_food_items(self) -> List[FoodItem]:
        with self.db.session_scope() as session:
            return list(session.execute(select(FoodItem).order_by(FoodItem.name)).scalars())

    def _food_item_values(self, item: Dict) -> Dict:
        values = {'name': _text('name', _require(item, 'name'))}
        for field in ('calories_per_100g', 'protein', 'carbs', 'fats'):
            values[field] = _number(field, item.get(field) or 0)
        return values

    def add_food_item(self, item: Dict) -> FoodItem:
        """Insert a food item; a duplicate name is a ConstraintViolation"""
        values = self._food_item_values(item)
        try:
            with self.db.session_scope() as session:
                food_item = FoodItem(**values)
                session.add(food_item)
                session.flush()
        except IntegrityError as e:
            logger.error(f"Error adding food item {values['name']}: {str(e)}")
            raise ConstraintViolation(f"Food item '{values['name']}' already exists") from e

        logger.info(f"Added food item {food_item.id}: {food_item.name}")
        return food_item

    def seed_food_items(self, catalog: Iterable[Dict] = None) -> int:
        """Insert catalog items whose names are not yet present; returns the number inserted"""
        items = [self._food_item_values(item) for item in (COMMON_FOODS if catalog is None else catalog)]

        with self.db.session_scope() as session:
            existing = set(session.execute(select(FoodItem.name)).scalars())
            inserted = 0
            for values in items:
                if values['name'] in existing:
                    continue
                session.add(FoodItem(**values))
                existing.add(values['name'])
                inserted += 1

        if inserted:
            logger.info(f"Seeded {inserted} food items")
        return inserted

    # Log queries

    def query_logs(self, kind, user_id: int, start: DateLike = None, end: DateLike = None) -> list:
        """
        Logs of one kind for a user, most recent first

        Args:
            kind: 'exercise', 'activity' or 'food'
            user_id: Owner of the logs
            start: Optional first calendar day, inclusive
            end: Optional last calendar day, inclusive

        Returns:
            List of ExerciseLog, ActivityLog or FoodLog rows
        """
        kind = LogKind(_choice('kind', kind, LogKind))
        model = {
            LogKind.exercise: ExerciseLog,
            LogKind.activity: ActivityLog,
            LogKind.food: FoodLog,
        }[kind]

        query = select(model).where(model.user_id == user_id)
        if model is ActivityLog:
            # Stored per calendar day already
            if start is not None:
                query = query.where(model.date >= self.local_day(start))
            if end is not None:
                query = query.where(model.date <= self.local_day(end))
        else:
            lower, upper = self._range_bounds(start, end)
            if lower is not None:
                query = query.where(model.date >= lower)
            if upper is not None:
                query = query.where(model.date < upper)

        with self.db.session_scope() as session:
            return list(session.execute(query.order_by(model.date.desc(), model.id.desc())).scalars())

    def get_exercise_logs(self, user_id: int, start: DateLike = None, end: DateLike = None) -> List[ExerciseLog]:
        return self.query_logs(LogKind.exercise, user_id, start, end)

    def get_activity_logs(self, user_id: int, start: DateLike = None, end: DateLike = None) -> List[ActivityLog]:
        return self.query_logs(LogKind.activity, user_id, start, end)

    def get_food_log_entries(self, user_id: int, start: DateLike = None, end: DateLike = None) -> List[FoodLogEntry]:
        """Food logs joined with their items, nutrition scaled to the logged quantity"""
        lower, upper = self._range_bounds(start, end)
        query = (select(FoodLog, FoodItem)
                 .join(FoodItem, FoodLog.food_item_id == FoodItem.id)
                 .where(FoodLog.user_id == user_id))
        if lower is not None:
            query = query.where(FoodLog.date >= lower)
        if upper is not None:
            query = query.where(FoodLog.date < upper)

        with self.db.session_scope() as session:
            rows = session.execute(query.order_by(FoodLog.date.desc(), FoodLog.id.desc())).all()

        entries = []
        for food_log, food_item in rows:
            nutrition = HealthCalculator.scale_nutrition(food_item, food_log.quantity_g)
            entries.append(FoodLogEntry(
                id=food_log.id,
                user_id=food_log.user_id,
                food_item_id=food_item.id,
                food_name=food_item.name,
                quantity_g=food_log.quantity_g,
                meal_type=food_log.meal_type,
                date=food_log.date,
                **nutrition
            ))
        return entries

    def get_food_logs_for_date(self, user_id: int, day: DateLike) -> List[FoodLogEntry]:
        """Get food logs for a specific calendar day"""
        return self.get_food_log_entries(user_id, day, day)

    # Streak operations

    def get_streak(self, user_id: int) -> Optional[Streak]:
        with self.db.session_scope() as session:
            return session.execute(select(Streak).where(Streak.user_id == user_id)).scalar_one_or_none()
