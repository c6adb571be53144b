from sqlalchemy import Column, Integer, Text, Float, Date, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database.connection import Base

class ActivityLog(Base):
    __tablename__ = 'activity_logs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('user_profiles.id'), nullable=False)
    steps = Column(Integer, nullable=False, default=0)
    distance_km = Column(Float, nullable=False, default=0)
    calories_burned = Column(Float, nullable=False, default=0)
    active_minutes = Column(Integer, nullable=False, default=0)
    date = Column(Date, nullable=False)
    source = Column(Text, nullable=False, default='manual')

    # Relationship to user profile
    user = relationship("UserProfile", back_populates="activity_logs")

    # Unique constraint for one record per user per day
    __table_args__ = (UniqueConstraint('user_id', 'date', name='unique_user_date'),)

    def __repr__(self):
        return f"<ActivityLog(user_id={self.user_id}, date={self.date}, steps={self.steps})>"
