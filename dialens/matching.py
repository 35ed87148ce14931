"""
DOCUMENT MATCHING MODULE
Decides whether an ePI bundle belongs to an insulin product, using the
bundle and product identifier allow-lists from Config.
"""

import json
from typing import Any, Dict, Iterator, List, Optional
import logging

from .config import Config
from .exceptions import InvalidDocument

logger = logging.getLogger(__name__)


def load_document(document: Any) -> Dict:
    """Return the bundle as a dict, parsing it when given as a JSON string."""
    if isinstance(document, (str, bytes)):
        try:
            document = json.loads(document)
        except ValueError as e:
            raise InvalidDocument(f"ePI is not valid JSON: {e}") from e
    if not isinstance(document, dict):
        raise InvalidDocument("ePI is missing or is not a bundle object")
    return document


def entries_of(document: Any) -> List[Dict]:
    """Validated entry list of a bundle. Raises InvalidDocument when empty."""
    document = load_document(document)
    entries = document.get("entry")
    if not isinstance(entries, list) or not entries:
        raise InvalidDocument("ePI bundle has no entries")
    return entries


def resources_of_type(document: Any, resource_type: str) -> Iterator[Dict]:
    """Yield the resources of the given type, in entry order."""
    for entry in entries_of(document):
        if not isinstance(entry, dict):
            continue
        resource = entry.get("resource")
        if isinstance(resource, dict) and resource.get("resourceType") == resource_type:
            yield resource


def identifier_values(identifier: Any) -> List[str]:
    """Collect identifier values from a single Identifier or a list of them."""
    if isinstance(identifier, dict):
        identifier = [identifier]
    if not isinstance(identifier, list):
        return []
    return [
        str(item["value"]) for item in identifier
        if isinstance(item, dict) and item.get("value") is not None
    ]


class DocumentMatcher:
    """Allow-list lookup on bundle and product identifiers."""

    def __init__(self, config=Config):
        self.config = config
        self.bundle_identifiers = frozenset(config.BUNDLE_IDENTIFIERS)
        self.product_identifiers = frozenset(config.PRODUCT_IDENTIFIERS)

    def matches(self, document: Any) -> bool:
        document = load_document(document)
        entries_of(document)

        bundle_ids = identifier_values(document.get("identifier"))
        hit = self._first_hit(bundle_ids, self.bundle_identifiers)
        if hit:
            logger.info(f"Bundle identifier matched: {hit}")
            return True

        for product in resources_of_type(document, self.config.PRODUCT_TYPE):
            hit = self._first_hit(identifier_values(product.get("identifier")),
                                  self.product_identifiers)
            if hit:
                logger.info(f"Product identifier matched: {hit}")
                return True

        logger.info("No insulin identifier found in ePI")
        return False

    @staticmethod
    def _first_hit(values: List[str], allowed: frozenset) -> Optional[str]:
        for value in values:
            if value in allowed:
                return value
        return None
