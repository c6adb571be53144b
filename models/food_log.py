from sqlalchemy import Column, Integer, Text, Float, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from database.connection import Base

class FoodLog(Base):
    __tablename__ = 'food_logs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('user_profiles.id'), nullable=False)
    food_item_id = Column(Integer, ForeignKey('food_items.id'), nullable=False)
    quantity_g = Column(Float, nullable=False)
    meal_type = Column(Text, nullable=False)  # 'breakfast', 'lunch', 'dinner', 'snack'
    date = Column(DateTime, nullable=False)

    user = relationship("UserProfile", back_populates="food_logs")
    food_item = relationship("FoodItem", back_populates="food_logs")

    __table_args__ = (Index('ix_food_logs_user_date', 'user_id', 'date'),)

    def __repr__(self):
        return f"<FoodLog(id={self.id}, food_item_id={self.food_item_id}, quantity_g={self.quantity_g})>"
