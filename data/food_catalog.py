"""
Common foods seeded into the food_items table
Nutritional information per 100g
"""

COMMON_FOODS = [
    {"name": "Chicken Breast", "calories_per_100g": 165, "protein": 31, "carbs": 0, "fats": 3.6},
    {"name": "Brown Rice", "calories_per_100g": 111, "protein": 2.6, "carbs": 23, "fats": 0.9},
    {"name": "Salmon", "calories_per_100g": 208, "protein": 20, "carbs": 0, "fats": 13},
    {"name": "Eggs", "calories_per_100g": 155, "protein": 13, "carbs": 1.1, "fats": 11},
    {"name": "Banana", "calories_per_100g": 89, "protein": 1.1, "carbs": 23, "fats": 0.3},
    {"name": "Oatmeal", "calories_per_100g": 68, "protein": 2.4, "carbs": 12, "fats": 1.4},
    {"name": "Greek Yogurt", "calories_per_100g": 59, "protein": 10, "carbs": 3.6, "fats": 0.4},
    {"name": "Broccoli", "calories_per_100g": 34, "protein": 2.8, "carbs": 7, "fats": 0.4},
    {"name": "Sweet Potato", "calories_per_100g": 86, "protein": 1.6, "carbs": 20, "fats": 0.1},
    {"name": "Almonds", "calories_per_100g": 579, "protein": 21, "carbs": 22, "fats": 50},
    {"name": "Apple", "calories_per_100g": 52, "protein": 0.3, "carbs": 14, "fats": 0.2},
    {"name": "Whole Wheat Bread", "calories_per_100g": 247, "protein": 13, "carbs": 41, "fats": 4.2},
]
