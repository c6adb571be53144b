"""
Exercise library offered when logging a workout
"""
from typing import List

EXERCISES = [
    # Cardio
    {"name": "Running", "category": "cardio", "muscle_groups": ["legs", "core"], "equipment": "none", "difficulty": "beginner"},
    {"name": "Walking", "category": "cardio", "muscle_groups": ["legs"], "equipment": "none", "difficulty": "beginner"},
    {"name": "Cycling", "category": "cardio", "muscle_groups": ["legs"], "equipment": "cardio_machine", "difficulty": "beginner"},
    {"name": "Swimming", "category": "cardio", "muscle_groups": ["full_body"], "equipment": "none", "difficulty": "intermediate"},
    {"name": "Jump Rope", "category": "cardio", "muscle_groups": ["legs", "calves"], "equipment": "none", "difficulty": "intermediate"},

    # Strength - Bodyweight
    {"name": "Push-ups", "category": "strength", "muscle_groups": ["chest", "shoulders", "triceps"], "equipment": "bodyweight", "difficulty": "beginner"},
    {"name": "Pull-ups", "category": "strength", "muscle_groups": ["back", "biceps"], "equipment": "bodyweight", "difficulty": "intermediate"},
    {"name": "Squats", "category": "strength", "muscle_groups": ["legs", "glutes"], "equipment": "bodyweight", "difficulty": "beginner"},
    {"name": "Lunges", "category": "strength", "muscle_groups": ["legs", "glutes"], "equipment": "bodyweight", "difficulty": "beginner"},
    {"name": "Plank", "category": "strength", "muscle_groups": ["core"], "equipment": "bodyweight", "difficulty": "beginner"},
    {"name": "Burpees", "category": "strength", "muscle_groups": ["full_body"], "equipment": "bodyweight", "difficulty": "intermediate"},

    # Strength - Dumbbells
    {"name": "Dumbbell Press", "category": "strength", "muscle_groups": ["chest", "shoulders", "triceps"], "equipment": "dumbbells", "difficulty": "beginner"},
    {"name": "Dumbbell Rows", "category": "strength", "muscle_groups": ["back", "biceps"], "equipment": "dumbbells", "difficulty": "beginner"},
    {"name": "Dumbbell Curls", "category": "strength", "muscle_groups": ["biceps"], "equipment": "dumbbells", "difficulty": "beginner"},
    {"name": "Dumbbell Shoulder Press", "category": "strength", "muscle_groups": ["shoulders", "triceps"], "equipment": "dumbbells", "difficulty": "beginner"},
    {"name": "Dumbbell Squats", "category": "strength", "muscle_groups": ["legs", "glutes"], "equipment": "dumbbells", "difficulty": "beginner"},

    # Strength - Barbell
    {"name": "Barbell Bench Press", "category": "strength", "muscle_groups": ["chest", "shoulders", "triceps"], "equipment": "barbell", "difficulty": "intermediate"},
    {"name": "Barbell Squat", "category": "strength", "muscle_groups": ["legs", "glutes"], "equipment": "barbell", "difficulty": "intermediate"},
    {"name": "Barbell Deadlift", "category": "strength", "muscle_groups": ["back", "legs", "glutes"], "equipment": "barbell", "difficulty": "advanced"},
    {"name": "Barbell Rows", "category": "strength", "muscle_groups": ["back", "biceps"], "equipment": "barbell", "difficulty": "intermediate"},

    # Flexibility
    {"name": "Yoga", "category": "flexibility", "muscle_groups": ["full_body"], "equipment": "none", "difficulty": "beginner"},
    {"name": "Stretching", "category": "flexibility", "muscle_groups": ["full_body"], "equipment": "none", "difficulty": "beginner"},
]


def get_exercises_by_level(level: str) -> List[dict]:
    return [ex for ex in EXERCISES if ex["difficulty"] == level]


def get_exercises_by_equipment(equipment: str) -> List[dict]:
    """Exercises using the given equipment; 'none' also matches bodyweight moves"""
    if equipment == "none":
        return [ex for ex in EXERCISES if ex["equipment"] in ("none", "bodyweight")]
    return [ex for ex in EXERCISES if ex["equipment"] == equipment]


def get_exercises_by_category(category: str) -> List[dict]:
    return [ex for ex in EXERCISES if ex["category"] == category]
