import pytest

from app.matching_engine import classify_priority
from app.matching_engine.priority import HIGH_PRIORITY_KEYWORDS


def test_high_keyword():
    assert classify_priority("Need ambulance now", None) == "high"


def test_low_keyword():
    assert classify_priority("Just a routine inquiry", None) == "low"


def test_no_keyword_is_medium():
    assert classify_priority("Need some help", None) == "medium"


def test_emergency_category_with_empty_description():
    assert classify_priority("", "Emergency Services") == "high"


def test_category_rule_beats_low_keyword():
    assert classify_priority("need information", "Emergency Services") == "high"
    assert classify_priority("need information", "Healthcare") == "low"


@pytest.mark.parametrize("keyword", HIGH_PRIORITY_KEYWORDS)
def test_high_keyword_wins_over_any_category(keyword):
    description = f"routine question about {keyword}"
    for category in (None, "", "Shelter", "Emergency Services"):
        assert classify_priority(description, category) == "high"


def test_case_insensitive():
    assert classify_priority("URGENT: water in basement") == "high"
    assert classify_priority("Question about the Schedule") == "low"
    assert classify_priority("help", "EMERGENCY shelter") == "high"


def test_substring_matching():
    # "fireplace" contains "fire"
    assert classify_priority("Broken fireplace cover") == "high"


@pytest.mark.parametrize("description", [None, "", 42, ["fire"]])
def test_missing_or_odd_description_never_raises(description):
    assert classify_priority(description, None) == "medium"
    assert classify_priority(description, "Emergency Services") == "high"
