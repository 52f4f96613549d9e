from math import sqrt

import numpy as np
import pytest

from typo_distance import typo_distance, build_distance_matrix, CharacterNotFoundError
from typo_distance.edit_costs import DELETION_COST, INSERTION_COST, SHIFT_COST, SUBSTITUTION_COST


SAMPLE_STRINGS = [
    "",
    " ",
    "a",
    "elephants",
    "Straße",
    "Hello, World!",
    "Grüße aus Köln",
    "(x + y) = 2 * z?",
]


# ---------------------------------------------------------------------------
# Identity and non-negativity
# ---------------------------------------------------------------------------
class TestIdentity:
    @pytest.mark.parametrize("s", SAMPLE_STRINGS)
    def test_distance_to_self_is_zero(self, s):
        assert typo_distance(s, s) == 0.0

    def test_result_is_python_float(self):
        assert type(typo_distance("cat", "cast")) is float

    def test_distances_are_non_negative(self):
        for s1 in SAMPLE_STRINGS:
            for s2 in SAMPLE_STRINGS:
                assert typo_distance(s1, s2) >= 0.0


# ---------------------------------------------------------------------------
# Keyboard-aware weighting
# ---------------------------------------------------------------------------
class TestWeighting:
    def test_nearby_key_substitution_is_cheaper(self):
        near = typo_distance("elephants", "rlephants")
        far = typo_distance("elephants", "ilephants")
        assert near < far
        assert near == pytest.approx(SUBSTITUTION_COST + 1.0)
        assert far == pytest.approx(SUBSTITUTION_COST + 5.0)

    def test_shift_mismatch_penalty(self):
        assert typo_distance("a", "A") == SUBSTITUTION_COST + SHIFT_COST
        assert typo_distance("ä", "Ä") == SUBSTITUTION_COST + SHIFT_COST
        assert typo_distance("hello", "Hello") == SUBSTITUTION_COST + SHIFT_COST

    def test_backtick_is_typed_unshifted(self):
        # 'ß' and '`' are neighbouring keys on the base layout
        assert typo_distance("ß", "`") == SUBSTITUTION_COST + 1.0

    def test_insertion_costs_more_than_deletion(self):
        inserted = typo_distance("cat", "cast")
        deleted = typo_distance("cast", "cat")
        assert inserted != deleted
        assert inserted == pytest.approx(5.0)
        assert deleted == pytest.approx(DELETION_COST)

    def test_trailing_insertion_not_cheaper_than_trailing_deletion(self):
        assert typo_distance("cat", "cats") >= typo_distance("cats", "cat")


# ---------------------------------------------------------------------------
# Boundaries
# ---------------------------------------------------------------------------
class TestBoundaries:
    def test_empty_strings(self):
        assert typo_distance("", "") == 0.0

    def test_typing_from_empty_accumulates_insertions(self):
        expected = 3 * INSERTION_COST + sqrt(10) + sqrt(26)
        result = typo_distance("", "abc")
        assert result == pytest.approx(expected)
        assert result != pytest.approx(3 * INSERTION_COST)

    def test_deleting_everything_uses_constant_row_boundary(self):
        # (len("") + 2) deletions, independent of len(string1)
        assert typo_distance("abc", "") == 2 * DELETION_COST
        assert typo_distance("elephants", "") == 2 * DELETION_COST

    def test_matrix_shape_and_boundaries(self):
        matrix = build_distance_matrix("cat", "cast")
        assert isinstance(matrix, np.ndarray)
        assert matrix.shape == (5, 6)
        assert matrix[0, 0] == 0.0
        assert np.all(matrix[1:, 0] == 6 * DELETION_COST)
        assert np.all(np.diff(matrix[0, :]) >= INSERTION_COST)

    def test_matrix_holds_result(self):
        matrix = build_distance_matrix("cat", "cast")
        assert matrix[3, 4] == typo_distance("cat", "cast")


# ---------------------------------------------------------------------------
# Unsupported characters
# ---------------------------------------------------------------------------
class TestUnsupportedCharacters:
    def test_unsupported_character_in_typed_string(self):
        with pytest.raises(CharacterNotFoundError) as excinfo:
            typo_distance("hello", "hello€")
        assert excinfo.value.character == '€'

    def test_unsupported_character_in_intended_string(self):
        with pytest.raises(CharacterNotFoundError):
            typo_distance("café", "cafe")

    def test_unsupported_character_fails_even_when_never_compared(self):
        with pytest.raises(CharacterNotFoundError):
            typo_distance("€", "")
        with pytest.raises(CharacterNotFoundError):
            typo_distance("€", "€")

    def test_unsupported_character_is_a_value_error(self):
        with pytest.raises(ValueError):
            typo_distance("tab\there", "tab here")
