"""
Annotation Extraction Module
Walks the Composition extension tree of an ePI bundle and collects the
free-text hypoglycaemia annotations tagged with one of the hypo category
codes.

Expected shape of one annotated extension element::

    {
      "extension": [
        {"url": "elementClass", "valueString": "Onset of action: 15 minutes"},
        {"url": "concept",
         "valueCodeableReference": {"concept": {"coding": [
             {"system": "...", "code": "hypo-onset"}]}}}
      ]
    }
"""

from typing import Any, Dict, List, Optional
import logging

from .config import Config
from .exceptions import NoCompositionFound
from .matching import load_document, resources_of_type
from .models import RawAnnotation

logger = logging.getLogger(__name__)

TEXT_VALUE_KEYS = ("valueString", "valueMarkdown")


class AnnotationExtractor:
    """Recovers RawAnnotation objects from Composition extensions."""

    def __init__(self, config=Config):
        self.config = config
        self.category_codes = frozenset(config.HYPO_CATEGORY_CODES)

    def compositions(self, document: Any) -> List[Dict]:
        """All Composition resources. Raises NoCompositionFound when none."""
        compositions = list(resources_of_type(document, self.config.COMPOSITION_TYPE))
        if not compositions:
            raise NoCompositionFound("ePI bundle contains no Composition resource")
        return compositions

    def extract_annotations(self, document: Any) -> List[RawAnnotation]:
        document = load_document(document)
        annotations = []

        for composition in self.compositions(document):
            extensions = composition.get("extension")
            if not isinstance(extensions, list):
                continue
            for index, element in enumerate(extensions):
                found = self._extract_from_element(element)
                if found is None:
                    logger.debug(f"Skipping extension[{index}]: no concept coding")
                    continue
                annotations.extend(found)

        logger.info(f"Extracted {len(annotations)} hypo annotations")
        return annotations

    def _extract_from_element(self, element: Any) -> Optional[List[RawAnnotation]]:
        """Annotations of one extension element, or None if it has the wrong shape."""
        if not isinstance(element, dict):
            return None
        nested = element.get("extension")
        if not isinstance(nested, list):
            return None

        concept = None
        text = None
        for sub in nested:
            if not isinstance(sub, dict):
                continue
            if sub.get("url") == "concept":
                concept = sub
            elif text is None:
                text = _text_value(sub)

        codings = _codings_of(concept)
        if codings is None:
            return None

        annotations = []
        for coding in codings:
            if not isinstance(coding, dict):
                continue
            code = coding.get("code")
            if code not in self.category_codes:
                continue
            if not text:
                logger.debug(f"Hypo code {code} has no sibling text value")
                continue
            annotations.append(RawAnnotation(text=text, code=code))
        return annotations


def _text_value(extension: Dict) -> Optional[str]:
    for key in TEXT_VALUE_KEYS:
        value = extension.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _codings_of(concept_extension: Optional[Dict]) -> Optional[List]:
    """concept extension -> valueCodeableReference.concept.coding"""
    if concept_extension is None:
        return None
    reference = concept_extension.get("valueCodeableReference")
    if not isinstance(reference, dict):
        return None
    concept = reference.get("concept")
    if not isinstance(concept, dict):
        return None
    coding = concept.get("coding")
    if not isinstance(coding, list):
        return None
    return coding
