#!/usr/bin/env python3
"""
Edit operation costs for typo distance scoring.

Deletion has a constant cost. Insertion and substitution are weighted by
the distance between keys and by whether the shift state changes.
"""

from dataclasses import dataclass, asdict
from typing import Dict

from typo_distance.cost_model import euclidean_distance, is_shift_mismatch


@dataclass(frozen=True)
class CostConfig:
    """Weights of the edit operations."""

    shift_cost: float = 2.0
    insertion_cost: float = 3.0
    deletion_cost: float = 3.0
    substitution_cost: float = 1.0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


COSTS = CostConfig()

SHIFT_COST = COSTS.shift_cost
INSERTION_COST = COSTS.insertion_cost
DELETION_COST = COSTS.deletion_cost
SUBSTITUTION_COST = COSTS.substitution_cost


def deletion_cost() -> float:
    """Cost of deleting a character (independent of context)."""
    return DELETION_COST


def _key_change_cost(original: str, char: str) -> float:
    cost = 0.0
    if is_shift_mismatch(original, char):
        # Shift was held for one of the two characters but not the other
        cost += SHIFT_COST
    cost += euclidean_distance(original, char)
    return cost


def insertion_cost(s: str, i: int, char: str) -> float:
    """
    Cost of inserting ``char`` at position ``i`` in ``s``.

    The character currently at ``i`` is the reference for the shift state
    and key distance. Without a reference character (empty string or
    ``i`` past the end) only the base insertion cost applies.

    Args:
        s: String being typed
        i: Insertion position
        char: Inserted character

    Returns:
        Insertion cost

    Raises:
        CharacterNotFoundError: If a compared character is in neither layout
    """
    if not s or i >= len(s):
        return INSERTION_COST

    return INSERTION_COST + _key_change_cost(s[i], char)


def substitution_cost(s: str, i: int, char: str) -> float:
    """
    Cost of replacing the character at position ``i`` in ``s`` with ``char``.

    Falls back to the insertion cost when there is no character at ``i``.
    """
    if not s or i >= len(s):
        return INSERTION_COST

    return SUBSTITUTION_COST + _key_change_cost(s[i], char)
