"""Pydantic schemas for API request/response validation."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# === Suggestion Set Schemas ===
class SuggestionPlant(BaseModel):
    """One denormalised plant entry inside a suggestion set."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    growing_time: Optional[str] = Field(default=None, alias="growingTime")
    sunlight: Optional[str] = None
    space: Optional[str] = None
    difficulty: Optional[str] = None
    price: Optional[str] = None


class SuggestionCreate(BaseModel):
    """Schema for creating a suggestion set."""

    model_config = ConfigDict(populate_by_name=True)

    space: Optional[str] = None
    sunlight: Optional[str] = None
    experience: Optional[str] = None
    time: Optional[str] = None
    purpose: Optional[str] = None
    plants: Optional[List[SuggestionPlant]] = None
    recommendation_message: Optional[str] = Field(default=None, alias="recommendationMessage")


class SuggestionUpdate(SuggestionCreate):
    """Schema for updating a suggestion set; every field is optional."""

    is_active: Optional[bool] = Field(default=None, alias="isActive")


class SuggestionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    combination_key: str
    space: str
    sunlight: str
    experience: str
    time: str
    purpose: str
    plants: List[dict]
    recommendation_message: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SuggestionPage(BaseModel):
    suggestions: List[SuggestionResponse]
    pagination: "Pagination"


class SuggestionStats(BaseModel):
    total: int
    active: int
    inactive: int
    by_space: dict
    by_purpose: dict


# === Keyword Filter Schemas ===
class PreferencesIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    space: Optional[str] = None
    sunlight: Optional[str] = None
    max_days: Optional[int] = Field(default=None, alias="maxDays", ge=0)
    indoor_only: Optional[bool] = Field(default=None, alias="indoorOnly")


class SuggestRequest(BaseModel):
    keyword: Optional[str] = None
    preferences: Optional[PreferencesIn] = None


# === Chatbot Schemas ===
class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")


class IdentifyRequest(BaseModel):
    description: Optional[str] = None
    characteristics: Optional[List[str]] = None


# === Database Plant Schemas ===
class PlantBase(BaseModel):
    plant_name: str
    image_url: str
    description: str
    benefits: str
    maintenance: str
    sunlight: str
    space: str
    experience: str
    time: str
    category: str
    difficulty: str
    growing_time: str


class PlantCreate(BaseModel):
    """Schema for creating a plant; required fields are checked by the router."""

    plant_name: Optional[str] = None
    image_url: Optional[str] = None
    description: Optional[str] = None
    benefits: Optional[str] = None
    maintenance: Optional[str] = None
    sunlight: Optional[str] = None
    space: Optional[str] = None
    experience: Optional[str] = None
    time: Optional[str] = None
    category: Optional[str] = None
    difficulty: Optional[str] = None
    growing_time: Optional[str] = None
    days_to_grow: Optional[int] = None
    price: Optional[str] = None

    @field_validator("sunlight", "space", "experience", "time", "maintenance", "category")
    @classmethod
    def lowercase(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class PlantUpdate(PlantCreate):
    """Schema for updating a plant."""

    is_active: Optional[bool] = None
    archived: Optional[bool] = None


class PlantResponse(PlantBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    days_to_grow: int
    price: str
    is_active: bool
    archived: bool
    created_at: Optional[datetime] = None


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int
    has_next: bool
    has_prev: bool


class PlantPage(BaseModel):
    plants: List[PlantResponse]
    pagination: Pagination


SuggestionPage.model_rebuild()
