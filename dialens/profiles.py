"""
Insulin time profiles and hypoglycaemia risk windows.
Profiles come from the ePI itself (``dialensInsulinProfiles``) or from the
built-in catalogue, matched on the product name with rapidfuzz.

Times are indicative ranges in hours and must not replace the SmPC/leaflet.
"""

from typing import Any, Dict, List, Sequence, Tuple
import logging

from pydantic import ValidationError
from rapidfuzz import fuzz

from .config import Config
from .matching import load_document, resources_of_type
from .models import (
    HypoWindow,
    InsulinTimeProfile,
    PharmacokineticClass,
    ProfileTimeline,
)

logger = logging.getLogger(__name__)

DEFAULT_INSULIN_PROFILES: Tuple[InsulinTimeProfile, ...] = (
    InsulinTimeProfile(
        id="humalog",
        name="Humalog (insulin lispro)",
        type=PharmacokineticClass.RAPID_ACTING,
        onset_hours=(0.25, 0.5),
        peak_hours=(1, 3),
        duration_hours=(3, 5),
        increased_hypo_risk_factors=[
            "Skipping or delaying a meal after the injection",
            "Unexpected or intense physical activity",
            "Higher dose than prescribed or dosing errors",
            "Alcohol intake (especially on an empty stomach)",
            "Kidney or liver problems",
        ],
        reduced_insulin_effect_factors=[
            "Infection, fever or acute illness",
            "Stress or corticosteroid medicines",
            "Taking less insulin than prescribed",
            "Very high carbohydrate intake without dose adjustment",
        ],
    ),
    InsulinTimeProfile(
        id="levemir",
        name="Levemir (insulin detemir)",
        type=PharmacokineticClass.LONG_ACTING,
        onset_hours=(1, 2),
        peak_hours=(6, 8),
        duration_hours=(18, 24),
        increased_hypo_risk_factors=[
            "Tight dose titration without monitoring",
            "Additional rapid-acting insulin on top of basal dose",
            "Reduced food intake or prolonged fasting",
            "Unexpected physical activity, especially at night",
            "Kidney or liver impairment",
        ],
        reduced_insulin_effect_factors=[
            "Missed or very delayed basal dose",
            "Infection, fever or other intercurrent illness",
            "Some concomitant medicines that raise blood glucose",
            "Very high carbohydrate intake without correction",
        ],
    ),
)

# Hours after onset before basal insulin risk becomes material
LONG_ACTING_ONSET_OFFSET = 3
# Hours the rapid-acting window extends past the end of the peak
RAPID_ACTING_PEAK_TAIL = 1


def estimate_window(profile: InsulinTimeProfile) -> HypoWindow:
    """Approximate period where hypoglycaemia symptoms are most likely."""
    onset_start = profile.onset_hours[0]
    peak_end = profile.peak_hours[1]
    duration_end = profile.duration_hours[1]

    if profile.type is PharmacokineticClass.RAPID_ACTING:
        return HypoWindow(
            start=onset_start,
            end=min(peak_end + RAPID_ACTING_PEAK_TAIL, duration_end),
        )

    if profile.type is PharmacokineticClass.LONG_ACTING:
        return HypoWindow(
            start=min(onset_start + LONG_ACTING_ONSET_OFFSET, duration_end),
            end=duration_end,
        )

    return HypoWindow(start=onset_start, end=duration_end)


class RiskWindowEstimator:
    """Pairs named profiles with their estimated risk windows."""

    def estimate_window(self, profile: InsulinTimeProfile) -> HypoWindow:
        return estimate_window(profile)

    def timelines(self, profiles: Sequence[InsulinTimeProfile]) -> Tuple[ProfileTimeline, ...]:
        return tuple(
            ProfileTimeline(profile=profile, window=estimate_window(profile))
            for profile in profiles
        )


def parse_embedded_profiles(raw_profiles: Any) -> List[InsulinTimeProfile]:
    """Validate profiles embedded in the ePI; invalid items are skipped."""
    if not isinstance(raw_profiles, list):
        return []

    profiles = []
    for index, raw in enumerate(raw_profiles):
        try:
            profiles.append(InsulinTimeProfile.model_validate(raw))
        except ValidationError as e:
            logger.warning(f"Ignoring embedded insulin profile [{index}]: {e.error_count()} errors")
    return profiles


class ProfileResolver:
    """Finds the insulin profiles that describe the ePI's product."""

    def __init__(self, config=Config,
                 catalogue: Sequence[InsulinTimeProfile] = DEFAULT_INSULIN_PROFILES):
        self.config = config
        self.catalogue = tuple(catalogue)
        self.threshold = config.FUZZY_MATCH_THRESHOLD

    def resolve(self, document: Any) -> Tuple[InsulinTimeProfile, ...]:
        document = load_document(document)

        embedded = parse_embedded_profiles(document.get(self.config.EMBEDDED_PROFILES_KEY))
        if embedded:
            logger.info(f"Using {len(embedded)} insulin profiles embedded in ePI")
            return tuple(embedded)

        names = self.product_names(document)
        matched = []
        for profile in self.catalogue:
            score = max((self._score(profile, name) for name in names), default=0)
            if score >= self.threshold:
                logger.info(f"Catalogue profile {profile.id} matched (score {score:.0f})")
                matched.append(profile)
        return tuple(matched)

    def product_names(self, document: Dict) -> List[str]:
        names = []
        for product in resources_of_type(document, self.config.PRODUCT_TYPE):
            names_field = product.get("name")
            if not isinstance(names_field, list):
                continue
            for name in names_field:
                if isinstance(name, dict) and isinstance(name.get("productName"), str):
                    names.append(name["productName"])
        return names

    @staticmethod
    def _score(profile: InsulinTimeProfile, product_name: str) -> float:
        # brand name alone, e.g. "Humalog" out of "Humalog (insulin lispro)"
        brand = profile.name.split("(")[0].strip().lower()
        return fuzz.partial_ratio(brand, product_name.lower())
