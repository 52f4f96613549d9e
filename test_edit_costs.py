import dataclasses
from math import sqrt

import pytest

from typo_distance.cost_model import (
    CharacterNotFoundError,
    euclidean_distance,
    is_shift_mismatch,
    layout_for,
)
from typo_distance.edit_costs import (
    COSTS,
    DELETION_COST,
    INSERTION_COST,
    SHIFT_COST,
    SUBSTITUTION_COST,
    deletion_cost,
    insertion_cost,
    substitution_cost,
)
from typo_distance.keyboard_layout import BASE_LAYOUT, SHIFTED_LAYOUT, KeyNotFoundError


# ---------------------------------------------------------------------------
# Layout resolution and key distance
# ---------------------------------------------------------------------------
class TestCharacterCostModel:
    def test_layout_for(self):
        assert layout_for('a') is BASE_LAYOUT
        assert layout_for(' ') is BASE_LAYOUT
        assert layout_for('A') is SHIFTED_LAYOUT
        assert layout_for('!') is SHIFTED_LAYOUT
        assert layout_for('`') is BASE_LAYOUT

    def test_unsupported_character(self):
        with pytest.raises(CharacterNotFoundError):
            layout_for('´')

        with pytest.raises(CharacterNotFoundError) as excinfo:
            layout_for('€')
        assert excinfo.value.character == '€'
        assert isinstance(excinfo.value, KeyNotFoundError)
        assert "not found in any keyboard layouts" in str(excinfo.value)

    def test_euclidean_distance(self):
        assert euclidean_distance('e', 'r') == 1.0
        assert euclidean_distance('e', 'i') == 5.0
        assert euclidean_distance('q', 'a') == 1.0
        assert euclidean_distance('a', 'c') == pytest.approx(sqrt(10))

    def test_euclidean_distance_ignores_layout(self):
        assert euclidean_distance('a', 'A') == 0.0
        assert euclidean_distance('1', '!') == 0.0
        assert euclidean_distance('e', 'R') == 1.0

    def test_euclidean_distance_is_symmetric(self):
        assert euclidean_distance('t', 'c') == euclidean_distance('c', 't')

    def test_shift_mismatch(self):
        assert is_shift_mismatch('a', 'A')
        assert not is_shift_mismatch('a', 'b')
        assert not is_shift_mismatch('A', '?')


# ---------------------------------------------------------------------------
# Edit costs
# ---------------------------------------------------------------------------
class TestEditCosts:
    def test_cost_constants(self):
        assert SHIFT_COST == 2.0
        assert INSERTION_COST == 3.0
        assert DELETION_COST == 3.0
        assert SUBSTITUTION_COST == 1.0

    def test_costs_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            COSTS.shift_cost = 0.0

    def test_deletion_cost_is_constant(self):
        assert deletion_cost() == DELETION_COST

    def test_insertion_without_reference_character(self):
        assert insertion_cost('', 0, 'a') == INSERTION_COST
        assert insertion_cost('', -1, '') == INSERTION_COST
        assert insertion_cost('abc', 3, 'x') == INSERTION_COST

    def test_insertion_next_to_nearby_key(self):
        assert insertion_cost('e', 0, 'r') == INSERTION_COST + 1.0
        assert insertion_cost('ea', 1, 'a') == INSERTION_COST

    def test_insertion_with_shift_mismatch(self):
        assert insertion_cost('abc', 0, 'A') == INSERTION_COST + SHIFT_COST

    def test_substitution(self):
        assert substitution_cost('e', 0, 'r') == SUBSTITUTION_COST + 1.0
        assert substitution_cost('e', 0, 'R') == SUBSTITUTION_COST + SHIFT_COST + 1.0
        assert substitution_cost('a', 0, 'A') == SUBSTITUTION_COST + SHIFT_COST

    def test_substitution_fallback(self):
        assert substitution_cost('', 0, 'a') == INSERTION_COST
        assert substitution_cost('ab', 5, 'a') == INSERTION_COST

    def test_unsupported_character_propagates(self):
        with pytest.raises(CharacterNotFoundError):
            insertion_cost('abc', 1, '€')
        with pytest.raises(CharacterNotFoundError):
            substitution_cost('a€c', 1, 'b')
