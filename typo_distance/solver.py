#!/usr/bin/env python3
"""
Typo distance solver.

Finds the typo distance between two strings: how likely it is that the
second string is a typo of the first, based on the canonical Levenshtein
dynamic-programming table with keyboard-aware edit costs. The lower the
number, the more likely the typo. "rlephants" is a likely typo of
"elephants" since R sits next to E, while "ilephants" scores higher.

The distance is not commutative: insertions cost more than deletions.
"""

import logging

import numpy as np

from typo_distance.cost_model import layout_for
from typo_distance.edit_costs import deletion_cost, insertion_cost, substitution_cost

logger = logging.getLogger(__name__)


def _char_at(s: str, index: int) -> str:
    """Character at ``index`` (negative counts from the end), '' when out of range."""
    try:
        return s[index]
    except IndexError:
        return ''


def validate_characters(*strings: str) -> None:
    """
    Check that every character of the given strings is on the keyboard.

    Raises:
        CharacterNotFoundError: For the first unsupported character
    """
    for s in strings:
        for char in s:
            layout_for(char)


def build_distance_matrix(string1: str, string2: str) -> np.ndarray:
    """
    Build and fill the typo distance table for two strings.

    Args:
        string1: Intended string
        string2: Typed string

    Returns:
        Array of shape (len(string1) + 2, len(string2) + 2); the distance
        is at [len(string1), len(string2)]

    Raises:
        CharacterNotFoundError: If any character is in neither layout
    """
    validate_characters(string1, string2)

    len1 = len(string1)
    len2 = len(string2)
    matrix = np.zeros((len1 + 2, len2 + 2), dtype=float)

    # Deleting enough characters to exhaust a prefix; constant across rows
    row_boundary = sum(deletion_cost() for _ in range(len2 + 2))
    matrix[:, 0] = row_boundary

    # Typing string2 left to right, each insertion judged against the
    # intermediate string typed so far
    intermediate = ''
    cost = 0.0
    for i in range(len2 + 2):
        if i > 0:
            j = i - 1
            char = _char_at(string2, j - 1)
            cost += insertion_cost(intermediate, j - 1, char)
            intermediate += char
        matrix[0, i] = cost

    for j in range(1, len2 + 1):
        char2 = string2[j - 1]
        for i in range(1, len1 + 1):
            if string1[i - 1] == char2:
                matrix[i, j] = matrix[i - 1, j - 1]
            else:
                matrix[i, j] = min(
                    matrix[i - 1, j] + deletion_cost(),
                    matrix[i, j - 1] + insertion_cost(string1, i, char2),
                    matrix[i - 1, j - 1] + substitution_cost(string1, i - 1, char2),
                )

    logger.debug("Filled %dx%d typo distance matrix for %r -> %r",
                 len1 + 2, len2 + 2, string1, string2)
    return matrix


def typo_distance(string1: str, string2: str) -> float:
    """
    Find the typo distance between two strings.

    Args:
        string1: Intended string
        string2: Typed string (possible typo of string1)

    Returns:
        Non-negative distance, 0.0 when the strings are equal

    Raises:
        CharacterNotFoundError: If any character is in neither layout
    """
    matrix = build_distance_matrix(string1, string2)
    return float(matrix[len(string1), len(string2)])
