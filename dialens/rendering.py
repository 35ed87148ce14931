"""
Panel Rendering Module
Turns a classified TimeRiskProfile into the localized risk panel markup.

Annotation text is inserted verbatim, without HTML escaping: the ePI source
is trusted to carry well-formed text.
"""

from typing import Callable, List, Optional, Sequence, Tuple
import logging

from .config import Config
from .language import LanguageResolver
from .models import LocalizedPanel, ProfileTimeline, TimeRiskProfile
from .templates import TEMPLATES, PanelTemplate
from .utils import format_hours_range

logger = logging.getLogger(__name__)

Section = Callable[[PanelTemplate, TimeRiskProfile, Sequence[ProfileTimeline]], str]

ONSET_BAR_MIN_WIDTH = 2
PEAK_BAR_MIN_WIDTH = 4


def _list_items(items: Sequence[str]) -> str:
    return "".join(f"<li>{item}</li>" for item in items)


def _bulleted(title: str, slot: str, items: Sequence[str]) -> str:
    return (
        f'<div class="dialens-hypo-section-title">{title}</div>'
        f'<ul class="dialens-hypo-list" data-slot="{slot}">{_list_items(items)}</ul>'
    )


def _row(label: str, slot: str, value: str) -> str:
    return (
        '<div class="dialens-row">'
        f'<div class="dialens-row-label">{label}</div>'
        f'<div class="dialens-row-value" data-slot="{slot}">{value}</div>'
        '</div>'
    )


def header_section(template, profile, timelines):
    return (
        '<div class="dialens-hypo-header"><div>'
        f'<h2 class="dialens-hypo-title">{template.title}</h2>'
        f'<p class="dialens-hypo-tagline">{template.intro}</p>'
        f'</div><div class="dialens-pill">{template.badge}</div></div>'
    )


def time_rows_section(template, profile, timelines):
    return (
        '<div class="dialens-rows">'
        + _row(template.onset_label, "onset", profile.onset or template.default_onset)
        + _row(template.peak_label, "peak", profile.peak or template.default_peak)
        + _row(template.duration_label, "duration",
               profile.duration or template.default_duration)
        + '</div>'
    )


def timeline_section(template, profile, timelines):
    return "".join(_timeline_card(template, timeline) for timeline in timelines)


def increase_section(template, profile, timelines):
    return _bulleted(template.increase_title, "increase",
                     profile.increase_factors or template.default_increase)


def decrease_section(template, profile, timelines):
    return _bulleted(template.decrease_title, "decrease",
                     profile.decrease_factors or template.default_decrease)


def symptoms_section(template, profile, timelines):
    return _bulleted(template.symptoms_title, "symptoms", template.symptoms)


def emergency_section(template, profile, timelines):
    return _bulleted(template.emergency_title, "emergency", template.emergency)


def footer_section(template, profile, timelines):
    return f'<div class="dialens-hypo-footer">{template.disclaimer}</div>'


SECTIONS: Tuple[Section, ...] = (
    header_section,
    time_rows_section,
    timeline_section,
    increase_section,
    decrease_section,
    symptoms_section,
    emergency_section,
    footer_section,
)


def _percent(hours: float, total: float) -> float:
    return round(hours / total * 100, 2) if total else 0.0


def _timeline_card(template: PanelTemplate, timeline: ProfileTimeline) -> str:
    """Supplementary numeric view of one named insulin profile."""
    profile = timeline.profile
    window = timeline.window
    total = profile.duration_hours[1]

    onset_left = _percent(profile.onset_hours[0], total)
    onset_width = max(ONSET_BAR_MIN_WIDTH,
                      _percent(profile.onset_hours[1], total) - onset_left)
    peak_left = _percent(profile.peak_hours[0], total)
    peak_width = max(PEAK_BAR_MIN_WIDTH,
                     _percent(profile.peak_hours[1], total) - peak_left)

    risk_text = template.risk_window_text.format(
        start=f"{window.start:.1f}", end=f"{window.end:.1f}"
    )
    class_label = template.class_labels.get(profile.type.value,
                                            template.class_labels["other"])

    return (
        f'<div class="dialens-timeline" data-profile="{profile.id}" '
        f'data-window-start="{window.start:g}" data-window-end="{window.end:g}">'
        f'<div class="dialens-insulin-name">{profile.name}</div>'
        f'<div class="dialens-insulin-type">{class_label}</div>'
        + _row(template.onset_label, "profile-onset", format_hours_range(profile.onset_hours))
        + _row(template.peak_label, "profile-peak", format_hours_range(profile.peak_hours))
        + _row(template.duration_label, "profile-duration",
               format_hours_range(profile.duration_hours))
        + '<div class="dialens-mini-bar">'
        f'<div class="dialens-mini-bar-onset" style="left: {onset_left:g}%; width: {onset_width:g}%"></div>'
        f'<div class="dialens-mini-bar-peak" style="left: {peak_left:g}%; width: {peak_width:g}%"></div>'
        '<div class="dialens-mini-bar-duration"></div>'
        '</div>'
        f'<div class="dialens-mini-bar-x"><span>0 h</span><span>{total:g} h</span></div>'
        f'<p class="dialens-hypo-risk-text">{risk_text}</p>'
        '</div>'
    )


class PanelRenderer:
    """Selects a template family and renders every panel section."""

    def __init__(self, config=Config, sections: Sequence[Section] = SECTIONS):
        self.config = config
        self.sections = tuple(sections)
        self.language_resolver = LanguageResolver(config)

    def template_for(self, language: Optional[str]) -> PanelTemplate:
        family = self.language_resolver.template_language(language)
        return TEMPLATES.get(family, TEMPLATES[self.config.DEFAULT_LANGUAGE])

    def render(self, profile: TimeRiskProfile, language: Optional[str] = None,
               timelines: Sequence[ProfileTimeline] = ()) -> LocalizedPanel:
        template = self.template_for(language)
        logger.info(f"Rendering hypo panel with template '{template.language}'")

        parts: List[str] = [section(template, profile, timelines) for section in self.sections]
        markup = (
            f'<section class="dialens-hypo-card" lang="{template.language}" '
            f'aria-label="{template.aria_label}">'
            + "".join(parts)
            + '</section>'
        )
        return LocalizedPanel(markup=markup, language=template.language)
