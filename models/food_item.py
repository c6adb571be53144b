from sqlalchemy import Column, Integer, Text, Float
from sqlalchemy.orm import relationship
from database.connection import Base

class FoodItem(Base):
    __tablename__ = 'food_items'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)
    calories_per_100g = Column(Float, nullable=False)
    protein = Column(Float, nullable=False)  # grams per 100g
    carbs = Column(Float, nullable=False)  # grams per 100g
    fats = Column(Float, nullable=False)  # grams per 100g

    food_logs = relationship("FoodLog", back_populates="food_item")

    def __repr__(self):
        return f"<FoodItem(id={self.id}, name='{self.name}', calories_per_100g={self.calories_per_100g})>"
