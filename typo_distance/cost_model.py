#!/usr/bin/env python3
"""
Character cost model for typo distance scoring.

Resolves which layout (base or shifted) a character lives in and
calculates the Euclidean distance between two keys.
"""

from math import sqrt

from typo_distance.keyboard_layout import (
    BASE_LAYOUT, SHIFTED_LAYOUT, KeyboardLayout, KeyNotFoundError
)


class CharacterNotFoundError(KeyNotFoundError):
    """Raised when a character is in neither keyboard layout."""

    def __init__(self, character: str):
        super().__init__(character, message=f"{character!r} not found in any keyboard layouts")


def layout_for(char: str) -> KeyboardLayout:
    """
    Get the layout a character lives in.

    For instance, 'A' lives in the shifted layout and 'a' in the base layout.

    Args:
        char: Character to resolve

    Returns:
        BASE_LAYOUT or SHIFTED_LAYOUT

    Raises:
        CharacterNotFoundError: If the character is in neither layout
    """
    if BASE_LAYOUT.contains_character(char):
        return BASE_LAYOUT
    if SHIFTED_LAYOUT.contains_character(char):
        return SHIFTED_LAYOUT
    raise CharacterNotFoundError(char)


def is_shift_mismatch(char1: str, char2: str) -> bool:
    """Check whether two characters are typed with different shift states."""
    return layout_for(char1) is not layout_for(char2)


def euclidean_distance(char1: str, char2: str) -> float:
    """
    Calculate the Euclidean distance between two keys, shifted or not.

    Each character's coordinate is taken from its own layout and both
    coordinates are treated as points on the same plane, so 'a' and 'A'
    are at distance 0.
    """
    row1, col1 = layout_for(char1).coordinate_of(char1)
    row2, col2 = layout_for(char2).coordinate_of(char2)
    dr = row1 - row2
    dc = col1 - col2
    return sqrt(dr * dr + dc * dc)
