"""Tests for keyword classification of annotations"""

from dialens.classification import CategoryClassifier, category_of
from dialens.models import RawAnnotation, TimeRiskProfile


def _classify(*texts):
    return CategoryClassifier().classify([RawAnnotation(text) for text in texts])


def test_onset_wins_over_later_keywords():
    profile = _classify("ONSET may increase with exercise and reduce at peak")
    assert profile.onset == "ONSET may increase with exercise and reduce at peak"
    assert profile.increase_factors == ()
    assert profile.decrease_factors == ()
    assert profile.peak is None


def test_first_peak_annotation_is_kept():
    profile = _classify("Peak effect after 1 hour", "Peak effect after 3 hours")
    assert profile.peak == "Peak effect after 1 hour"


def test_duplicate_increase_factors_collapse():
    profile = _classify("Increase risk with alcohol", "Increase risk with alcohol")
    assert profile.increase_factors == ("Increase risk with alcohol",)


def test_list_slots_keep_first_seen_order():
    profile = _classify(
        "Exercise can enhance the effect",
        "Fasting means higher risk",
        "Illness may reduce the effect",
        "Exercise can enhance the effect",
        "Stress gives a lower risk of lows",
    )
    assert profile.increase_factors == (
        "Exercise can enhance the effect",
        "Fasting means higher risk",
    )
    assert profile.decrease_factors == (
        "Illness may reduce the effect",
        "Stress gives a lower risk of lows",
    )


def test_increase_keywords_are_checked_before_decrease():
    # known limitation of the ordered keyword chain
    assert category_of("reduce risk of increase") == "increase"
    profile = _classify("Decrease in food intake will increase risk")
    assert profile.increase_factors == ("Decrease in food intake will increase risk",)
    assert profile.decrease_factors == ()


def test_unmatched_text_is_dropped():
    profile = _classify("Store in a refrigerator", "")
    assert profile == TimeRiskProfile()
    assert profile.is_empty


def test_all_slots():
    profile = _classify(
        "Duration of action 3 to 5 hours",
        "Onset 15 minutes",
        "Peak 1 to 3 hours",
        "Missing a meal can increase risk",
        "Fever can decrease insulin effect",
    )
    assert profile.onset == "Onset 15 minutes"
    assert profile.peak == "Peak 1 to 3 hours"
    assert profile.duration == "Duration of action 3 to 5 hours"
    assert profile.increase_factors == ("Missing a meal can increase risk",)
    assert profile.decrease_factors == ("Fever can decrease insulin effect",)
    assert not profile.is_empty


def test_classification_is_case_insensitive():
    assert category_of("PEAK") == "peak"
    assert category_of("Higher Risk when fasting") == "increase"
    assert category_of("Lower RISK after meals") == "decrease"
