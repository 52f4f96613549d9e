#!/usr/bin/env python3
"""
Text utilities for typo distance scoring.

Helpers for checking and cleaning input strings before scoring, since
characters that are not on the keyboard cannot be scored.
"""

from typing import List

from typo_distance.keyboard_layout import LAYOUTS


def is_supported_character(char: str) -> bool:
    """Check whether a character is on either keyboard layout."""
    return any(layout.contains_character(char) for layout in LAYOUTS)


def find_unsupported_characters(text: str) -> List[str]:
    """
    Find characters that are on neither keyboard layout.

    Args:
        text: Input text

    Returns:
        Distinct unsupported characters in order of first appearance
    """
    unsupported = []
    seen = set()

    for char in text:
        if char in seen:
            continue
        seen.add(char)
        if not is_supported_character(char):
            unsupported.append(char)

    return unsupported


def strip_unsupported_characters(text: str, replacement: str = '') -> str:
    """
    Remove (or replace) characters that are on neither keyboard layout.

    Args:
        text: Input text
        replacement: String substituted for each unsupported character;
            must itself consist of supported characters

    Returns:
        Cleaned text

    Raises:
        ValueError: If replacement contains unsupported characters
    """
    bad_replacement = find_unsupported_characters(replacement)
    if bad_replacement:
        raise ValueError(f"Replacement contains unsupported characters: {bad_replacement}")

    return ''.join(char if is_supported_character(char) else replacement for char in text)


def validate_text_input(text: str) -> List[str]:
    """
    Validate a string for typo distance scoring.

    Returns:
        List of issue messages (empty if valid)
    """
    issues = []

    if not text:
        issues.append("Text is empty")
        return issues

    unsupported = find_unsupported_characters(text)
    if unsupported:
        shown = ', '.join(repr(char) for char in unsupported[:10])
        if len(unsupported) > 10:
            shown += f", ... ({len(unsupported)} total)"
        issues.append(f"Characters not on the keyboard: {shown}")

    return issues
