"""
Configuration Management Module
Handles identifier allow-lists, annotation category codes, language settings
and logging configuration.
"""

import os
from pathlib import Path
from typing import Dict, Any, List
from dotenv import load_dotenv
import logging


# Load environment variables
load_dotenv()

# Base paths
BASE_DIR = Path(__file__).resolve().parent.parent


def _env_list(name: str, default: List[str]) -> List[str]:
    """Read a comma-separated list from the environment."""
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Config:
    """Central configuration class for the DiaLens hypoglycaemia lens."""

    # Lens identity
    SPECIFICATION = "1.0.0-dialens-hypo"

    # Document matching (swap these to retarget the lens)
    BUNDLE_IDENTIFIERS = _env_list("DIALENS_BUNDLE_IDENTIFIERS", [
        "epibundle-humalog-en",
        "epibundle-humalog-pt",
        "epibundle-levemir-en",
        "epibundle-levemir-da",
    ])
    PRODUCT_IDENTIFIERS = _env_list("DIALENS_PRODUCT_IDENTIFIERS", [
        "EU/1/96/007/002",
        "EU/1/96/007/004",
        "EU/1/04/278/001",
        "EU/1/04/278/005",
    ])

    # Annotation category codes carried by Composition extensions
    HYPO_CATEGORY_CODES = frozenset(_env_list("DIALENS_HYPO_CATEGORY_CODES", [
        "hypo-onset",
        "hypo-peak",
        "hypo-duration",
        "hypo-increase-factor",
        "hypo-decrease-factor",
    ]))

    # Resource types
    COMPOSITION_TYPE = "Composition"
    PRODUCT_TYPE = "MedicinalProductDefinition"
    EMBEDDED_PROFILES_KEY = "dialensInsulinProfiles"

    # Language configuration
    DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")
    SUPPORTED_LANGUAGES = ("pt", "es", "da")

    # Profile resolution
    FUZZY_MATCH_THRESHOLD = int(os.getenv("FUZZY_MATCH_THRESHOLD", "85"))

    # Logging Configuration
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE = os.getenv("LOG_FILE", "")

    @classmethod
    def get_config_dict(cls) -> Dict[str, Any]:
        """Return configuration as dictionary."""
        return {
            key: value for key, value in cls.__dict__.items()
            if not key.startswith("_") and not callable(value)
            and not isinstance(value, classmethod)
        }


def setup_logging(level: str = None):
    """Configure logging for the application."""
    handlers = [logging.StreamHandler()]
    if Config.LOG_FILE:
        handlers.append(logging.FileHandler(BASE_DIR / Config.LOG_FILE))

    logging.basicConfig(
        level=getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO),
        format=Config.LOG_FORMAT,
        handlers=handlers
    )
    return logging.getLogger("dialens")
