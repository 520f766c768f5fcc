"""
Text utilities for provider payloads.

Used by the source adapters to pick values out of records whose field names
vary between provider versions.
"""

from typing import Any, Iterable, Mapping, Optional


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty after stripping."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def first_present(record: Mapping[str, Any], aliases: Iterable[str]) -> Any:
    """
    Return the value of the first alias that holds a non-blank value.

    Args:
        record: Raw provider record
        aliases: Field names to try, most preferred first

    Returns:
        The raw value, or None if every alias is missing or blank
    """
    for alias in aliases:
        value = record.get(alias)
        if not is_blank(value):
            return value
    return None


def clean_text(value: Any, max_length: int = 255) -> Optional[str]:
    """
    Clean a free-text value.

    - Converts numbers to strings
    - Strips whitespace
    - Truncates to max length
    - Returns None for empty/whitespace-only values

    Args:
        value: Raw value from a provider
        max_length: Maximum characters to keep

    Returns:
        Cleaned string or None
    """
    if value is None or isinstance(value, (bool, dict, list)):
        return None

    text = str(value).strip()
    if not text:
        return None

    return text[:max_length]


def normalize_reference(value: Any) -> Optional[str]:
    """
    Normalize reference numbers (container, bill, job) to uppercase.

    "  ffau2413670 " → "FFAU2413670"
    """
    text = clean_text(value, max_length=50)
    if text is None:
        return None
    return text.upper()
