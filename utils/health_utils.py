from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Tuple

# MET values (Metabolic Equivalent of Task) for common exercises
MET_VALUES = {
    'running': 11.5,
    'cycling': 8.0,
    'swimming': 8.0,
    'weightlifting': 6.0,
    'walking': 3.5,
    'yoga': 3.0,
}
DEFAULT_MET = 5.0

ACTIVITY_MULTIPLIERS = {
    'sedentary': 1.2,           # Little to no exercise
    'lightly_active': 1.375,    # Light exercise 1-3 days/week
    'moderately_active': 1.55,  # Moderate exercise 3-5 days/week
    'very_active': 1.725,       # Hard exercise 6-7 days/week
}

GOAL_ADJUSTMENTS = {
    'weight_loss': -500,  # 500 calorie deficit
    'muscle_gain': 300,   # 300 calorie surplus
    'maintenance': 0,
    'endurance': 200,     # Slight surplus for endurance
}

KM_PER_STEP = 0.0008
KCAL_PER_ACTIVE_MINUTE = 5


def round_half_up(value: float, digits: int = 0):
    """
    Round half away from zero (Python's round() rounds half to even)

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        int when digits == 0, otherwise float
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return int(rounded) if digits == 0 else float(rounded)


def _value(enum_or_str) -> str:
    return getattr(enum_or_str, 'value', enum_or_str)


class HealthCalculator:
    """Utility class for health-related calculations"""

    @staticmethod
    def calculate_bmr(weight_kg: float, height_cm: float, age: int, gender: str) -> int:
        """
        Calculate Basal Metabolic Rate using Mifflin-St Jeor Equation

        Args:
            weight_kg: Weight in kilograms
            height_cm: Height in centimeters
            age: Age in years
            gender: 'male', 'female' or 'other' ('other' uses the female constant)

        Returns:
            BMR in calories per day
        """
        bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
        if _value(gender) == 'male':
            bmr += 5
        else:
            bmr -= 161

        return round_half_up(bmr)

    @staticmethod
    def calculate_tdee(bmr: float, activity_level: str) -> int:
        """
        Calculate Total Daily Energy Expenditure

        Args:
            bmr: Basal Metabolic Rate
            activity_level: 'sedentary', 'lightly_active', 'moderately_active' or 'very_active'

        Returns:
            TDEE in calories per day
        """
        multiplier = ACTIVITY_MULTIPLIERS[_value(activity_level)]
        return round_half_up(bmr * multiplier)

    @staticmethod
    def calculate_calorie_goal(tdee: float, goal: str) -> int:
        """
        Calculate daily calorie goal based on the user's goal

        Args:
            tdee: Total Daily Energy Expenditure
            goal: 'weight_loss', 'muscle_gain', 'maintenance' or 'endurance'

        Returns:
            Daily calorie goal
        """
        return round_half_up(tdee + GOAL_ADJUSTMENTS[_value(goal)])

    @staticmethod
    def calorie_goal_for_profile(profile) -> int:
        """BMR -> TDEE -> goal chain for a UserProfile-like object"""
        bmr = HealthCalculator.calculate_bmr(profile.weight_kg, profile.height_cm, profile.age, profile.gender)
        tdee = HealthCalculator.calculate_tdee(bmr, profile.activity_level)
        return HealthCalculator.calculate_calorie_goal(tdee, profile.goal)

    @staticmethod
    def calculate_raw_bmi(weight_kg: float, height_cm: float) -> float:
        height_m = height_cm / 100
        return weight_kg / (height_m ** 2)

    @staticmethod
    def get_bmi_category(bmi: float) -> str:
        """
        Map an unrounded BMI to its category

        Args:
            bmi: Body Mass Index, not rounded for display

        Returns:
            'Underweight', 'Normal', 'Overweight' or 'Obese'
        """
        if bmi < 18.5:
            return "Underweight"
        elif bmi < 25:
            return "Normal"
        elif bmi < 30:
            return "Overweight"
        return "Obese"

    @staticmethod
    def calculate_bmi(weight_kg: float, height_cm: float) -> Tuple[float, str]:
        """
        Calculate Body Mass Index and category

        Args:
            weight_kg: Weight in kilograms
            height_cm: Height in centimeters

        Returns:
            Tuple of (BMI rounded to one decimal, category of the unrounded BMI)
        """
        bmi = HealthCalculator.calculate_raw_bmi(weight_kg, height_cm)
        return round_half_up(bmi, 1), HealthCalculator.get_bmi_category(bmi)

    @staticmethod
    def calculate_protein_goal(weight_kg: float, goal: str) -> int:
        """
        Calculate daily protein goal in grams

        Args:
            weight_kg: Body weight in kg
            goal: User goal; muscle_gain uses 2.0 g/kg, everything else 1.6 g/kg

        Returns:
            Protein goal in grams
        """
        protein_per_kg = 2.0 if _value(goal) == 'muscle_gain' else 1.6
        return round_half_up(weight_kg * protein_per_kg)

    @staticmethod
    def estimate_calories_burned(weight_kg: float, duration_min: float, exercise_type: str) -> int:
        """
        Estimate calories burned for an exercise

        Calories = MET x weight (kg) x duration (hours). Unknown exercise types
        fall back to a MET of 5.0.

        Args:
            weight_kg: Body weight in kg
            duration_min: Exercise duration in minutes
            exercise_type: Exercise name, matched case-insensitively

        Returns:
            Estimated kcal
        """
        met = MET_VALUES.get(exercise_type.strip().lower(), DEFAULT_MET)
        return round_half_up(met * weight_kg * (duration_min / 60))

    @staticmethod
    def scale_nutrition(food_item, quantity_g: float) -> Dict[str, float]:
        """Per-100g values of a food item scaled to a quantity, unrounded"""
        factor = quantity_g / 100
        return {
            'calories': food_item.calories_per_100g * factor,
            'protein': food_item.protein * factor,
            'carbs': food_item.carbs * factor,
            'fats': food_item.fats * factor,
        }

    @staticmethod
    def estimate_distance_km(steps: int) -> float:
        # 1 step is roughly 0.8 meters
        return steps * KM_PER_STEP

    @staticmethod
    def estimate_active_calories(active_minutes: int) -> float:
        return active_minutes * KCAL_PER_ACTIVE_MINUTE

    @staticmethod
    def calorie_balance(consumed: float, burned: float, goal: int) -> Dict[str, float]:
        """
        Compare a day's intake against the goal

        Args:
            consumed: Calories eaten
            burned: Calories burned through activity
            goal: Daily calorie goal

        Returns:
            Dictionary with net calories, remaining calories and whether the goal was exceeded
        """
        net = consumed - burned
        remaining = goal - net
        return {
            'net_calories': net,
            'remaining_calories': max(0, remaining),
            'over_target': remaining < 0,
            'calories_over': max(0, -remaining),
        }
