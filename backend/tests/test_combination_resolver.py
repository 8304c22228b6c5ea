"""Tests for resolving quiz combinations to stored suggestion sets."""
import pytest

from urbansprout.models import PlantSuggestion, build_combination_key
from urbansprout.services.combination_resolver import resolve
from urbansprout.services.errors import NotFoundError, ValidationError

DEFAULT_KEY = "small_full_sun_beginner_low_food"


def test_build_combination_key_normalises():
    assert build_combination_key(" Small", "FULL_SUN", "Beginner ", "low", "Food") == DEFAULT_KEY


def test_exact_match(seeded_db):
    resolution = resolve(seeded_db, "medium", "full_sun", "intermediate", "medium", "food")
    assert resolution.match == "exact"
    body = resolution.to_response()
    assert body["combinationKey"] == "medium_full_sun_intermediate_medium_food"
    assert [plant["name"] for plant in body["plants"]][:2] == ["Watermelon", "Cantaloupe"]
    assert "isFallback" not in body and "isDefault" not in body


def test_inputs_are_normalised(seeded_db):
    resolution = resolve(seeded_db, "SMALL", " Shade ", "Beginner", "LOW", "Health")
    assert resolution.match == "exact"
    assert resolution.suggestion.combination_key == "small_shade_beginner_low_health"


def test_partial_match_ignores_time_and_purpose(seeded_db):
    resolution = resolve(seeded_db, "small", "partial_sun", "beginner", "high", "beauty")
    assert resolution.match == "fallback"
    assert resolution.requested_key == "small_partial_sun_beginner_high_beauty"
    body = resolution.to_response()
    assert body["isFallback"] is True
    assert body["combinationKey"] == "small_partial_sun_beginner_low_food"


def test_default_when_nothing_close(seeded_db):
    resolution = resolve(seeded_db, "large", "shade", "intermediate", "low", "hobby")
    assert resolution.match == "default"
    body = resolution.to_response()
    assert body["isDefault"] is True
    assert body["combinationKey"] == DEFAULT_KEY
    assert body["recommendationMessage"].startswith("Perfect for small spaces!")


def test_beginner_default_scenario(seeded_db):
    body = resolve(seeded_db, "small", "full_sun", "beginner", "low", "food").to_response()
    assert body["combinationKey"] == DEFAULT_KEY
    assert [plant["name"] for plant in body["plants"]] == [
        "Cherry Tomato", "Strawberry", "Sweet Basil", "Fresh Mint", "Bell Pepper", "Lettuce",
    ]
    assert body["recommendationMessage"] == (
        "Perfect for small spaces! Here are beginner-friendly, low-maintenance plants "
        "that match your growing conditions."
    )
    assert body["plants"][0]["growingTime"] == "60-75 days"


def test_inactive_sets_are_skipped(seeded_db):
    suggestion = (
        seeded_db.query(PlantSuggestion)
        .filter(PlantSuggestion.combination_key == "small_partial_sun_beginner_low_food")
        .one()
    )
    suggestion.is_active = False
    seeded_db.commit()

    resolution = resolve(seeded_db, "small", "partial_sun", "beginner", "low", "food")
    assert resolution.match == "default"


def test_not_found_when_default_inactive(seeded_db):
    default = seeded_db.query(PlantSuggestion).filter(PlantSuggestion.combination_key == DEFAULT_KEY).one()
    default.is_active = False
    seeded_db.commit()

    with pytest.raises(NotFoundError):
        resolve(seeded_db, "small", "full_sun", "beginner", "low", "food")


def test_not_found_on_empty_store(db_session):
    with pytest.raises(NotFoundError):
        resolve(db_session, "small", "full_sun", "beginner", "low", "food")


@pytest.mark.parametrize(
    "values",
    [
        (None, "full_sun", "beginner", "low", "food"),
        ("small", "", "beginner", "low", "food"),
        ("small", "full_sun", "beginner", "   ", "food"),
        ("small", "full_sun", "beginner", "low", None),
    ],
)
def test_missing_field_rejected(db_session, values):
    with pytest.raises(ValidationError):
        resolve(db_session, *values)


def test_key_kept_in_sync_on_save(db_session):
    suggestion = PlantSuggestion(
        space="Medium", sunlight="Shade", experience="Beginner", time="Low", purpose="Beauty",
        plants=[{"name": "Fern"}], recommendation_message="Ferns for shady corners.",
    )
    db_session.add(suggestion)
    db_session.commit()
    assert suggestion.combination_key == "medium_shade_beginner_low_beauty"

    suggestion.time = "high"
    db_session.commit()
    assert suggestion.combination_key == "medium_shade_beginner_high_beauty"
