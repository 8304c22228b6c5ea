from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text
from sqlalchemy.sql import func

from urbansprout.database import Base

SUNLIGHT_LEVELS = ("full_sun", "partial_sun", "shade")
SPACE_SIZES = ("small", "medium", "large")
EXPERIENCE_LEVELS = ("beginner", "intermediate", "advanced")
TIME_COMMITMENTS = ("low", "medium", "high")
PLANT_CATEGORIES = ("vegetables", "fruits", "herbs", "flowers", "succulents")
DIFFICULTIES = ("Easy", "Moderate", "Hard")


class Plant(Base):
    """Database-backed plant listing used by the quiz and catalog endpoints."""

    __tablename__ = "plant"

    id = Column(Integer, primary_key=True, index=True)
    plant_name = Column(String(200), nullable=False, index=True)
    image_url = Column(String(500), nullable=False)
    description = Column(Text, nullable=False)
    benefits = Column(Text, nullable=False)
    days_to_grow = Column(Integer, nullable=False, default=60)
    maintenance = Column(String(20), nullable=False)
    sunlight = Column(String(20), nullable=False, index=True)
    space = Column(String(20), nullable=False, index=True)
    experience = Column(String(20), nullable=False, index=True)
    time = Column(String(20), nullable=False, index=True)
    category = Column(String(30), nullable=False)
    price = Column(String(50), nullable=False, default="₹20-40")
    difficulty = Column(String(20), nullable=False, default="Easy")
    growing_time = Column(String(50), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    archived = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("ix_plant_quiz", "sunlight", "space", "experience", "time"),
        Index("ix_plant_category_difficulty", "category", "difficulty"),
    )

    def __repr__(self):
        return f"<Plant(id={self.id}, plant_name='{self.plant_name}')>"
