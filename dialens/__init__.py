"""
DiaLens hypoglycaemia lens
Main package initialization
"""

__version__ = "1.0.0"
__author__ = "DiaLens Team"

from .config import Config
from .exceptions import InvalidDocument, LensError, NoCompositionFound, RenderingFailure
from .models import LensResult, LensStatus
from .pipeline import HypoLens
from .matching import DocumentMatcher
from .language import LanguageResolver
from .extraction import AnnotationExtractor
from .classification import CategoryClassifier
from .profiles import RiskWindowEstimator, ProfileResolver
from .rendering import PanelRenderer

__all__ = [
    "Config",
    "HypoLens",
    "LensResult",
    "LensStatus",
    "LensError",
    "InvalidDocument",
    "NoCompositionFound",
    "RenderingFailure",
    "DocumentMatcher",
    "LanguageResolver",
    "AnnotationExtractor",
    "CategoryClassifier",
    "RiskWindowEstimator",
    "ProfileResolver",
    "PanelRenderer",
    "enhance",
    "get_specification",
]


def enhance(document, html: str) -> str:
    """Shortcut for HypoLens().enhance()."""
    return HypoLens().enhance(document, html)


def get_specification() -> str:
    """Shortcut for HypoLens().get_specification()."""
    return Config.SPECIFICATION
