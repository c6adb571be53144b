from sqlalchemy import Column, Integer, Text, Float, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from database.connection import Base

class ExerciseLog(Base):
    __tablename__ = 'exercise_logs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('user_profiles.id'), nullable=False)
    exercise_name = Column(Text, nullable=False)
    sets = Column(Integer, nullable=False, default=0)
    reps = Column(Integer, nullable=False, default=0)
    weight_kg = Column(Float, nullable=False, default=0)
    duration_min = Column(Integer, nullable=False, default=0)
    date = Column(DateTime, nullable=False)
    source = Column(Text, nullable=False, default='manual')  # 'manual', 'api'

    # Relationship to user profile
    user = relationship("UserProfile", back_populates="exercise_logs")

    __table_args__ = (Index('ix_exercise_logs_user_date', 'user_id', 'date'),)

    def __repr__(self):
        return f"<ExerciseLog(id={self.id}, exercise_name='{self.exercise_name}', date={self.date})>"
