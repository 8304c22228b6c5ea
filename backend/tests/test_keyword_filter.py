"""Tests for the keyword filter over the plant catalog."""
import pytest

from urbansprout.services.errors import ValidationError
from urbansprout.services.keyword_filter import (
    MAX_RESULTS, Preferences, canonical_keyword, filter_plants,
)


def names(plants):
    return [plant.name for plant in plants]


def test_quick_growing_sorted_by_growth_days(catalog):
    result = filter_plants(catalog, "quick_growing")
    assert names(result) == [
        "Microgreens", "Radishes", "Arugula", "Lettuce", "Cilantro", "Spinach", "Zucchini",
    ]


def test_salad_alias(catalog):
    result = filter_plants(catalog, "salad_plants")
    assert names(result) == [
        "Microgreens", "Radishes", "Arugula", "Lettuce", "Spinach",
        "Swiss Chard", "Kale", "Cucumber", "Cherry Tomatoes",
    ]


def test_slow_growing_excludes_ninety_days(catalog):
    result = filter_plants(catalog, "slow_growing")
    assert names(result) == [
        "Watermelon", "Rosemary", "Strawberries", "Blueberries", "Raspberries", "Lemon Tree",
    ]
    assert all(plant.growth_days > 90 for plant in result)


def test_partial_shade_maps_to_partial_sunlight(catalog):
    result = filter_plants(catalog, "partial_shade")
    assert len(result) == 11
    assert {plant.sunlight for plant in result} == {"partial"}


def test_indoor_and_outdoor_partition(catalog):
    indoor = filter_plants(catalog, "indoor", limit=len(catalog))
    outdoor = filter_plants(catalog, "outdoor", limit=len(catalog))
    assert set(names(indoor)) == {"Lettuce", "Microgreens", "Basil", "Green Onions", "Parsley", "Mint"}
    assert len(indoor) + len(outdoor) == len(catalog)


def test_specific_is_capped(catalog):
    result = filter_plants(catalog, "specific")
    assert len(result) == MAX_RESULTS
    assert result[0].name == "Microgreens"


def test_unknown_keyword_returns_quick_or_salad(catalog):
    result = filter_plants(catalog, "surprise me")
    assert len(result) == 11
    assert all(plant.quick_growing or plant.salad_suitable for plant in result)


def test_keyword_is_case_insensitive(catalog):
    assert names(filter_plants(catalog, "  Herbs ")) == names(filter_plants(catalog, "herbs"))


def test_preferences_narrow_results(catalog):
    prefs = Preferences(space="Small")
    result = filter_plants(catalog, "smoothie", prefs)
    assert names(result) == ["Microgreens", "Mint", "Spinach", "Parsley", "Strawberries"]


def test_max_days_preference(catalog):
    result = filter_plants(catalog, "quick_growing", Preferences(max_days=40))
    assert names(result) == ["Microgreens", "Radishes", "Arugula"]


def test_indoor_only_preference(catalog):
    result = filter_plants(catalog, "quick_growing", Preferences(indoor_only=True))
    assert names(result) == ["Microgreens", "Lettuce"]


def test_empty_result_is_not_an_error(catalog):
    assert filter_plants(catalog, "fruits", Preferences(max_days=10)) == []


@pytest.mark.parametrize("keyword", [None, "", "   "])
def test_blank_keyword_rejected(catalog, keyword):
    with pytest.raises(ValidationError):
        filter_plants(catalog, keyword)


def test_canonical_keyword():
    assert canonical_keyword("Quick") == "quick_growing"
    assert canonical_keyword("smoothie_plants") == "smoothie_suitable"
    assert canonical_keyword("herbs") == "herbs"


def test_preferences_to_dict_drops_unset():
    assert Preferences(space="small").to_dict() == {"space": "small"}


@pytest.mark.parametrize("keyword", ["quick_growing", "salad", "indoor", "partial_shade", "specific"])
@pytest.mark.parametrize("space", ["Small", "medium", "large"])
def test_space_preference_narrows_results(catalog, keyword, space):
    everything = filter_plants(catalog, keyword, limit=len(catalog))
    narrowed = filter_plants(catalog, keyword, Preferences(space=space), limit=len(catalog))
    assert set(names(narrowed)) <= set(names(everything))
    assert all(plant.space == space.lower() for plant in narrowed)
