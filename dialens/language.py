"""
Language resolution for the risk panel.
"""

from typing import Any, Optional
import logging

from .config import Config
from .matching import load_document, resources_of_type

logger = logging.getLogger(__name__)


class LanguageResolver:
    """Picks the panel language from the ePI metadata.

    Precedence: the first Composition's ``language``, then the bundle's
    ``language``, then nothing (the caller falls back to the default
    template). Regional variants such as ``pt-PT`` map onto their base
    template family through a case-insensitive prefix match.
    """

    def __init__(self, config=Config):
        self.config = config

    def resolve_language(self, document: Any) -> Optional[str]:
        document = load_document(document)

        composition = next(resources_of_type(document, self.config.COMPOSITION_TYPE), None)
        if composition is not None:
            language = composition.get("language")
            if isinstance(language, str) and language.strip():
                return language.strip()

        language = document.get("language")
        if isinstance(language, str) and language.strip():
            return language.strip()

        logger.debug("No language found in ePI")
        return None

    def template_language(self, code: Optional[str]) -> str:
        if not code:
            return self.config.DEFAULT_LANGUAGE
        lowered = code.lower()
        for supported in self.config.SUPPORTED_LANGUAGES:
            if lowered.startswith(supported):
                return supported
        return self.config.DEFAULT_LANGUAGE
