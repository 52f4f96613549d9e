import string

import pytest

from typo_distance.keyboard_layout import (
    BASE_LAYOUT,
    SHIFTED_LAYOUT,
    KeyboardLayout,
    KeyNotFoundError,
    contains_character,
    coordinate_of,
    get_layout_by_name,
)


class TestCoordinates:
    def test_base_letters(self):
        assert coordinate_of(BASE_LAYOUT, 'q') == (1, 0)
        assert coordinate_of(BASE_LAYOUT, 'e') == (1, 2)
        assert coordinate_of(BASE_LAYOUT, 'a') == (2, 0)
        assert coordinate_of(BASE_LAYOUT, 'y') == (3, 1)

    def test_shifted_keys_share_positions_with_base_keys(self):
        for lower, upper in [('a', 'A'), ('z', 'Z'), ('1', '!'), ('ü', 'Ü'), ('-', '_')]:
            assert coordinate_of(BASE_LAYOUT, lower) == coordinate_of(SHIFTED_LAYOUT, upper)

    def test_space_bar_resolves_to_leftmost_cell(self):
        assert coordinate_of(BASE_LAYOUT, ' ') == (4, 2)

    def test_missing_character_raises(self):
        with pytest.raises(KeyNotFoundError) as excinfo:
            coordinate_of(BASE_LAYOUT, 'A')
        assert excinfo.value.character == 'A'
        assert excinfo.value.layout_name == 'base'
        assert isinstance(excinfo.value, ValueError)


class TestMembership:
    def test_contains_character(self):
        assert contains_character(BASE_LAYOUT, 'ß')
        assert not contains_character(BASE_LAYOUT, '?')
        assert contains_character(SHIFTED_LAYOUT, '?')
        assert '§' in SHIFTED_LAYOUT

    def test_blank_cells_never_match(self):
        assert not contains_character(BASE_LAYOUT, '')
        assert not contains_character(SHIFTED_LAYOUT, '')
        with pytest.raises(KeyNotFoundError):
            coordinate_of(SHIFTED_LAYOUT, '')

    def test_space_is_only_on_base_layout(self):
        assert contains_character(BASE_LAYOUT, ' ')
        assert not contains_character(SHIFTED_LAYOUT, ' ')

    def test_backtick_is_only_on_base_layout(self):
        assert coordinate_of(BASE_LAYOUT, '`') == (0, 12)
        assert not contains_character(SHIFTED_LAYOUT, '`')
        assert not contains_character(BASE_LAYOUT, '´')
        assert not contains_character(SHIFTED_LAYOUT, '´')

    def test_no_character_in_both_layouts(self):
        assert set(BASE_LAYOUT.characters()) & set(SHIFTED_LAYOUT.characters()) == set()

    def test_ascii_letters_and_digits_in_exactly_one_layout(self):
        for char in string.ascii_letters + string.digits:
            found = [contains_character(layout, char) for layout in (BASE_LAYOUT, SHIFTED_LAYOUT)]
            assert found.count(True) == 1, char


class TestLayoutObjects:
    def test_rows_are_immutable(self):
        assert isinstance(BASE_LAYOUT.rows, tuple)
        assert all(isinstance(row, tuple) for row in BASE_LAYOUT.rows)

    def test_first_occurrence_wins(self):
        layout = KeyboardLayout('test', [['a', 'b'], ['b', '', 'c']])
        assert layout.coordinate_of('b') == (0, 1)
        assert layout.coordinate_of('c') == (1, 2)
        assert list(layout.characters()) == ['a', 'b', 'c']

    def test_get_layout_by_name(self):
        assert get_layout_by_name('base') is BASE_LAYOUT
        assert get_layout_by_name('shifted') is SHIFTED_LAYOUT
        with pytest.raises(ValueError):
            get_layout_by_name('dvorak')
