from enum import Enum

class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"

class FitnessLevel(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"

class Goal(str, Enum):
    weight_loss = "weight_loss"
    muscle_gain = "muscle_gain"
    maintenance = "maintenance"
    endurance = "endurance"

class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    lightly_active = "lightly_active"
    moderately_active = "moderately_active"
    very_active = "very_active"

class LogSource(str, Enum):
    manual = "manual"
    api = "api"

class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"

class LogKind(str, Enum):
    exercise = "exercise"
    activity = "activity"
    food = "food"

class ProgressWindow(int, Enum):
    week = 7
    month = 30
