"""
Data Model Module
Value objects passed between the lens stages. Every object is created fresh
for each enhance() call and never mutated afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PharmacokineticClass(str, Enum):
    RAPID_ACTING = "rapid-acting"
    LONG_ACTING = "long-acting"
    OTHER = "other"


class LensStatus(str, Enum):
    ENHANCED = "enhanced"
    OUT_OF_SCOPE = "out_of_scope"


HoursRange = Tuple[float, float]


class InsulinTimeProfile(BaseModel):
    """Onset, peak and duration of action of one insulin product, in hours.

    Accepts the camelCase keys used by profiles embedded in ePI bundles
    (``onsetHours``, ``increasedHypoRiskFactors``...) as well as the field
    names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    type: PharmacokineticClass = PharmacokineticClass.OTHER
    onset_hours: HoursRange = Field(alias="onsetHours")
    peak_hours: HoursRange = Field(alias="peakHours")
    duration_hours: HoursRange = Field(alias="durationHours")
    increased_hypo_risk_factors: List[str] = Field(
        default_factory=list, alias="increasedHypoRiskFactors"
    )
    reduced_insulin_effect_factors: List[str] = Field(
        default_factory=list, alias="reducedInsulinEffectFactors"
    )

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value):
        """Unknown pharmacokinetic classes are treated as 'other'."""
        if isinstance(value, PharmacokineticClass):
            return value
        try:
            return PharmacokineticClass(str(value).strip().lower())
        except ValueError:
            return PharmacokineticClass.OTHER

    @field_validator("onset_hours", "peak_hours", "duration_hours")
    @classmethod
    def _check_range(cls, value: HoursRange) -> HoursRange:
        low, high = value
        if low < 0:
            raise ValueError(f"range {value} starts below zero")
        if low > high:
            raise ValueError(f"range {value} has min > max")
        return value

    @model_validator(mode="after")
    def _check_ordering(self) -> "InsulinTimeProfile":
        if not (self.duration_hours[1] >= self.peak_hours[1] >= self.onset_hours[0]):
            raise ValueError(
                "expected duration.max >= peak.max >= onset.min for "
                f"profile {self.id!r}"
            )
        return self


@dataclass(frozen=True)
class RawAnnotation:
    """Free-text annotation pulled from a Composition extension."""
    text: str
    code: str = ""


@dataclass(frozen=True)
class TimeRiskProfile:
    """Classified annotations for one document. Unset slots render defaults."""
    onset: Optional[str] = None
    peak: Optional[str] = None
    duration: Optional[str] = None
    increase_factors: Tuple[str, ...] = ()
    decrease_factors: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.onset or self.peak or self.duration
                    or self.increase_factors or self.decrease_factors)


@dataclass(frozen=True)
class HypoWindow:
    """Hours after the dose where hypoglycaemia is most likely."""
    start: float
    end: float

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"window start {self.start} is negative")
        if self.start > self.end:
            raise ValueError(f"window start {self.start} is after end {self.end}")


@dataclass(frozen=True)
class ProfileTimeline:
    """A named profile paired with its estimated risk window."""
    profile: InsulinTimeProfile
    window: HypoWindow


@dataclass(frozen=True)
class LocalizedPanel:
    markup: str
    language: str


@dataclass(frozen=True)
class LensResult:
    """Outcome of one lens invocation."""
    html: str
    status: LensStatus
    language: Optional[str] = None
    annotations: int = 0
    timelines: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def enhanced(self) -> bool:
        return self.status is LensStatus.ENHANCED
