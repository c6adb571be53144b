from sqlalchemy import Column, Integer, Text, SmallInteger, Float, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database.connection import Base

class UserProfile(Base):
    __tablename__ = 'user_profiles'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    age = Column(SmallInteger, nullable=False)
    gender = Column(Text, nullable=False)  # 'male', 'female', 'other'
    height_cm = Column(Float, nullable=False)
    weight_kg = Column(Float, nullable=False)
    fitness_level = Column(Text, nullable=False)  # 'beginner', 'intermediate', 'advanced'
    goal = Column(Text, nullable=False)  # 'weight_loss', 'muscle_gain', 'maintenance', 'endurance'
    activity_level = Column(Text, nullable=False)  # 'sedentary', 'lightly_active', 'moderately_active', 'very_active'
    created_at = Column(DateTime, nullable=False, default=func.now())

    # Relationships
    streak = relationship("Streak", back_populates="user", uselist=False)
    exercise_logs = relationship("ExerciseLog", back_populates="user")
    activity_logs = relationship("ActivityLog", back_populates="user")
    food_logs = relationship("FoodLog", back_populates="user")

    def __repr__(self):
        return f"<UserProfile(id={self.id}, name='{self.name}', goal='{self.goal}')>"
