"""
Tests for the week-by-week exercise recommendation engine.
"""

from datetime import date, timedelta

import pytest

from recovery.services.postpartum_clock import compute_week
from recovery.services.recommendation_engine import RECOVERY_TIERS, find_tier, suggest

DELIVERY_TYPES = ["vaginal", "c-section"]


def names(week, delivery_type):
    return [s.name for s in suggest(week, delivery_type)]


@pytest.mark.parametrize("delivery_type", DELIVERY_TYPES)
@pytest.mark.parametrize("week", list(range(1, 13)) + [26, 52])
def test_universal_exercises_come_first(week, delivery_type):
    assert names(week, delivery_type)[:2] == ["Deep Breathing", "Kegel Exercises"]


def test_weeks_one_and_two():
    assert names(2, "vaginal") == ["Deep Breathing", "Kegel Exercises", "Gentle Walking", "Pelvic Tilts"]
    assert names(1, "c-section") == ["Deep Breathing", "Kegel Exercises", "Gentle Walking"]


def test_weeks_three_and_four():
    vaginal = names(3, "vaginal")
    assert "Extended Walking" in vaginal
    assert "Bridge Pose" in vaginal
    assert "Gentle Walking" not in vaginal

    c_section = names(4, "c-section")
    assert "Shoulder Rolls" in c_section
    assert "Bridge Pose" not in c_section


def test_weeks_five_and_six():
    assert "Scar Tissue Massage" in names(6, "c-section")
    assert "Scar Tissue Massage" not in names(6, "vaginal")
    assert names(5, "vaginal") == ["Deep Breathing", "Kegel Exercises", "Brisk Walking", "Modified Planks"]


def test_weeks_seven_and_eight_have_no_delivery_branch():
    assert names(7, "vaginal") == names(7, "c-section")
    assert names(8, "vaginal")[2:] == ["Swimming", "Modified Squats"]


def test_after_week_eight():
    result = names(9, "vaginal")
    assert result == ["Deep Breathing", "Kegel Exercises", "Strength Training", "Yoga"]
    assert names(9, "c-section") == result


def test_tier_upper_bounds_are_inclusive():
    assert [find_tier(w).label for w in (2, 3, 4, 5, 6, 7, 8, 9)] == [
        "Week 1-2", "Week 3-4", "Week 3-4", "Week 5-6", "Week 5-6", "Week 7-8", "Week 7-8", "Week 8+",
    ]
    assert RECOVERY_TIERS[-1].max_week is None


def test_suggestions_are_fresh_copies():
    first = suggest(1, "vaginal")
    first[1].cautions.append("mutated")
    first.clear()
    again = suggest(1, "vaginal")
    assert len(again) == 4
    assert again[1].cautions == ["Stop if you feel pain", "Don't hold your breath"]


def test_cautions_attached_per_suggestion():
    by_name = {s.name: s for s in suggest(6, "c-section")}
    assert by_name["Deep Breathing"].cautions is None
    assert by_name["Brisk Walking"].cautions is None
    assert by_name["Scar Tissue Massage"].cautions == ["Wait for complete healing", "Use gentle pressure"]


def test_two_weeks_after_vaginal_delivery():
    today = date(2024, 6, 15)
    week = compute_week(today - timedelta(days=14), today)
    assert week == 2
    assert len(suggest(week, "vaginal")) == 4
