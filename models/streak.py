from sqlalchemy import Column, Integer, Date, ForeignKey
from sqlalchemy.orm import relationship
from database.connection import Base

class Streak(Base):
    __tablename__ = 'streaks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('user_profiles.id'), nullable=False, unique=True)
    current_streak = Column(Integer, nullable=False, default=0)
    longest_streak = Column(Integer, nullable=False, default=0)
    last_workout_date = Column(Date)

    user = relationship("UserProfile", back_populates="streak")

    def __repr__(self):
        return (f"<Streak(user_id={self.user_id}, current={self.current_streak}, "
                f"longest={self.longest_streak}, last={self.last_workout_date})>")
