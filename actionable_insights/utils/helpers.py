"""
Helper utility functions for the Actionable Insights application.
"""

import re
import json
from typing import Dict, Any, Optional


def count_words(text: Optional[str]) -> int:
    """
    Count whitespace separated words in a text.

    Args:
        text: The text to count

    Returns:
        Number of words, 0 for empty text
    """
    if not text:
        return 0
    return len([word for word in re.split(r"\s+", text.strip()) if word])


def save_json(data: Dict[str, Any], filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False, default=str)
        else:
            json.dump(data, f, ensure_ascii=False, default=str)


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
