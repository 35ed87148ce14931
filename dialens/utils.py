"""
Utility Functions
Helper functions for file I/O and number formatting.
"""

import json
from typing import Dict, Any, Optional, Tuple
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def format_hours(value: float) -> str:
    """0.25 -> '0.25', 3.0 -> '3'"""
    return f"{value:g}"


def format_hours_range(hours_range: Tuple[float, float]) -> str:
    """Format an hours range nicely: '1 h' or '1–3 h'."""
    low, high = hours_range
    if low == high:
        return f"{format_hours(low)} h"
    return f"{format_hours(low)}–{format_hours(high)} h"


def load_json(file_path: str) -> Optional[Dict]:
    """Load JSON file."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return data
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load JSON from {file_path}: {str(e)}")
        return None


def load_text(file_path: str) -> Optional[str]:
    """Load a text (HTML) file."""
    try:
        return Path(file_path).read_text(encoding='utf-8')
    except OSError as e:
        logger.error(f"Failed to read {file_path}: {str(e)}")
        return None


def save_text(text: str, output_path: str):
    """Write text to a file, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding='utf-8')
    logger.debug(f"Saved output to: {output_path}")


def save_json(data: Dict[str, Any], output_path: str, indent: int = 2):
    """Save dictionary as JSON file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, ensure_ascii=False, default=str)

    logger.debug(f"Saved JSON to: {output_path}")
