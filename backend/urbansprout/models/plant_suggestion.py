from sqlalchemy import JSON, Boolean, Column, DateTime, Index, Integer, String, Text, event
from sqlalchemy.sql import func

from urbansprout.database import Base

COMBINATION_FIELDS = ("space", "sunlight", "experience", "time", "purpose")
PURPOSES = ("food", "beauty", "health", "hobby")


def normalize_field(value) -> str:
    return str(value).strip().lower()


def build_combination_key(space: str, sunlight: str, experience: str, time: str, purpose: str) -> str:
    """Join the five quiz answers into the lookup key used for suggestion sets."""
    return "_".join(normalize_field(v) for v in (space, sunlight, experience, time, purpose))


class PlantSuggestion(Base):
    """A pre-built set of plants for one combination of quiz answers."""

    __tablename__ = "plant_suggestion"

    id = Column(Integer, primary_key=True, index=True)
    combination_key = Column(String(200), nullable=False, unique=True, index=True)
    space = Column(String(20), nullable=False)
    sunlight = Column(String(20), nullable=False)
    experience = Column(String(20), nullable=False)
    time = Column(String(20), nullable=False)
    purpose = Column(String(20), nullable=False)
    plants = Column(JSON, nullable=False, default=list)
    recommendation_message = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("ix_plant_suggestion_fields", "space", "sunlight", "experience", "time", "purpose"),
    )

    def refresh_combination_key(self) -> str:
        for name in COMBINATION_FIELDS:
            setattr(self, name, normalize_field(getattr(self, name)))
        self.combination_key = build_combination_key(
            self.space, self.sunlight, self.experience, self.time, self.purpose
        )
        return self.combination_key

    def __repr__(self):
        return f"<PlantSuggestion(id={self.id}, combination_key='{self.combination_key}')>"


@event.listens_for(PlantSuggestion, "before_insert")
@event.listens_for(PlantSuggestion, "before_update")
def _sync_combination_key(mapper, connection, target):
    target.refresh_combination_key()
