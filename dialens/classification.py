"""
Keyword classification of raw annotations into the five risk slots.
"""

from typing import Iterable, List, Optional, Tuple
import logging

from .models import RawAnnotation, TimeRiskProfile

logger = logging.getLogger(__name__)

ONSET = "onset"
PEAK = "peak"
DURATION = "duration"
INCREASE = "increase"
DECREASE = "decrease"

SINGLE_SLOTS = (ONSET, PEAK, DURATION)

# Evaluated top to bottom, first match wins. Increase is tested before
# decrease, so text holding keywords of both lands in the increase list.
CLASSIFICATION_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("onset",), ONSET),
    (("peak",), PEAK),
    (("duration",), DURATION),
    (("increase", "enhance", "higher risk"), INCREASE),
    (("decrease", "reduce", "lower risk"), DECREASE),
)


def category_of(text: str) -> Optional[str]:
    """Slot name for an annotation text, or None for noise."""
    lowered = text.lower()
    for keywords, category in CLASSIFICATION_RULES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return None


def _append_unique(items: Tuple[str, ...], text: str) -> Tuple[str, ...]:
    if text in items:
        return items
    return items + (text,)


class CategoryClassifier:
    """Folds an ordered sequence of RawAnnotation into a TimeRiskProfile."""

    def classify(self, annotations: Iterable[RawAnnotation]) -> TimeRiskProfile:
        slots = dict.fromkeys(SINGLE_SLOTS)
        increase: Tuple[str, ...] = ()
        decrease: Tuple[str, ...] = ()
        dropped: List[str] = []

        for annotation in annotations:
            text = annotation.text
            if not text:
                continue
            category = category_of(text)
            if category in SINGLE_SLOTS:
                if slots[category] is None:
                    slots[category] = text
                else:
                    logger.debug(f"Ignoring later {category} annotation: {text!r}")
            elif category == INCREASE:
                increase = _append_unique(increase, text)
            elif category == DECREASE:
                decrease = _append_unique(decrease, text)
            else:
                dropped.append(text)

        if dropped:
            logger.debug(f"Dropped {len(dropped)} unclassified annotations")

        return TimeRiskProfile(
            onset=slots[ONSET],
            peak=slots[PEAK],
            duration=slots[DURATION],
            increase_factors=increase,
            decrease_factors=decrease,
        )
