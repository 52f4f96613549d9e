#!/usr/bin/env python3
"""
Keyboard layout definitions for typo distance scoring.

Holds the two static character grids of the German QWERTZ keyboard:
the unshifted (base) layout and the shifted layout. Each character's
position is its (row, column) index in the grid literal. Blank cells
('') are placeholders for keys that do not exist, such as the space
around the space bar.
"""

from typing import Dict, Tuple, Iterator, Optional


Coordinate = Tuple[int, int]

BLANK = ''

# "Lowercase" QWERTZ keyboard
BASE_ROWS = (
    ('^', '1', '2', '3', '4', '5', '6', '7', '8', '9', '0', 'ß', '`'),
    ('q', 'w', 'e', 'r', 't', 'z', 'u', 'i', 'o', 'p', 'ü', '+'),
    ('a', 's', 'd', 'f', 'g', 'h', 'j', 'k', 'l', 'ö', 'ä', '#'),
    ('<', 'y', 'x', 'c', 'v', 'b', 'n', 'm', ',', '.', '-'),
    ('', '', ' ', ' ', ' ', ' ', ' ', '', ''),
)

# "Uppercase" QWERTZ keyboard (space bar and backtick resolve unshifted)
SHIFTED_ROWS = (
    ('°', '!', '"', '§', '$', '%', '&', '/', '(', ')', '=', '?', ''),
    ('Q', 'W', 'E', 'R', 'T', 'Z', 'U', 'I', 'O', 'P', 'Ü', '*'),
    ('A', 'S', 'D', 'F', 'G', 'H', 'J', 'K', 'L', 'Ö', 'Ä', "'"),
    ('>', 'Y', 'X', 'C', 'V', 'B', 'N', 'M', ';', ':', '_'),
    ('', '', '', '', '', '', '', '', ''),
)


class KeyNotFoundError(ValueError):
    """Raised when a character is not present in a keyboard layout."""

    def __init__(self, character: str, layout_name: str = "", message: Optional[str] = None):
        self.character = character
        self.layout_name = layout_name
        if message is None:
            where = f"'{layout_name}' keyboard layout" if layout_name else "given keyboard layout"
            message = f"{character!r} not found in {where}"
        super().__init__(message)


class KeyboardLayout:
    """
    Immutable character grid with coordinate lookup.

    Rows may have different lengths. Lookups return the first occurrence
    in row-major order, so a wide key (the space bar) resolves to its
    leftmost cell.
    """

    def __init__(self, name: str, rows: Tuple[Tuple[str, ...], ...]):
        """
        Initialize the layout.

        Args:
            name: Layout name (e.g., 'base', 'shifted')
            rows: Grid of single characters, '' for unused cells
        """
        self._name = name
        self._rows = tuple(tuple(row) for row in rows)
        self._positions: Dict[str, Coordinate] = {}

        for row_index, row in enumerate(self._rows):
            for col_index, char in enumerate(row):
                if char == BLANK or char in self._positions:
                    continue
                self._positions[char] = (row_index, col_index)

    @property
    def name(self) -> str:
        return self._name

    @property
    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        return self._rows

    def characters(self) -> Iterator[str]:
        """Iterate over the distinct characters of the layout in row-major order."""
        return iter(self._positions)

    def contains_character(self, char: str) -> bool:
        """Check whether a character appears anywhere in the grid."""
        return char in self._positions

    def coordinate_of(self, char: str) -> Coordinate:
        """
        Get the (row, column) position of a character.

        Args:
            char: Character to look up

        Returns:
            Tuple of (row, column)

        Raises:
            KeyNotFoundError: If the character is not in this layout
        """
        try:
            return self._positions[char]
        except KeyError:
            raise KeyNotFoundError(char, self._name) from None

    def __contains__(self, char: str) -> bool:
        return self.contains_character(char)

    def __repr__(self) -> str:
        return f"KeyboardLayout({self._name!r}, keys={len(self._positions)})"


BASE_LAYOUT = KeyboardLayout('base', BASE_ROWS)
SHIFTED_LAYOUT = KeyboardLayout('shifted', SHIFTED_ROWS)

LAYOUTS = (BASE_LAYOUT, SHIFTED_LAYOUT)


def contains_character(layout: KeyboardLayout, char: str) -> bool:
    """Check whether ``char`` appears in ``layout``."""
    return layout.contains_character(char)


def coordinate_of(layout: KeyboardLayout, char: str) -> Coordinate:
    """Get the coordinate of ``char`` in ``layout``, raising KeyNotFoundError if absent."""
    return layout.coordinate_of(char)


def get_layout_by_name(name: str) -> KeyboardLayout:
    """
    Get one of the two layouts by name.

    Args:
        name: 'base' or 'shifted'

    Returns:
        Matching KeyboardLayout

    Raises:
        ValueError: If name is not recognized
    """
    for layout in LAYOUTS:
        if layout.name == name:
            return layout

    available = [layout.name for layout in LAYOUTS]
    raise ValueError(f"Unknown layout '{name}'. Available: {available}")
