#!/usr/bin/env python3
"""
QWERTZ Keyboard Layout Visualizer

Displays the base and shifted keyboard grids used for typo distance
scoring, with each key's (row, column) coordinate. Optionally highlights
a character or reports the key distance between two characters.

Usage:
    python display_layout.py
    python display_layout.py --layout shifted
    python display_layout.py --char A
    python display_layout.py --distance e r
    python display_layout.py --simple
"""

import argparse
import sys
from typing import List, Optional

from typo_distance.keyboard_layout import LAYOUTS, KeyboardLayout, get_layout_by_name
from typo_distance.cost_model import CharacterNotFoundError, layout_for, euclidean_distance, is_shift_mismatch

SPACE_SYMBOL = '␣'


def _key_label(char: str) -> str:
    if char == ' ':
        return SPACE_SYMBOL
    return char


def format_layout_simple(layout: KeyboardLayout) -> str:
    """Format a layout as a simple monospace grid with column indices."""
    width = max(len(row) for row in layout.rows)
    lines = [f"{layout.name.upper()} LAYOUT",
             "    " + " ".join(f"{col:>2}" for col in range(width))]

    for row_index, row in enumerate(layout.rows):
        cells = " ".join(f"{_key_label(char):>2}" for char in row)
        lines.append(f"{row_index:>2}: {cells}")

    return "\n".join(lines)


def format_layout_ascii(layout: KeyboardLayout, highlight: Optional[str] = None) -> str:
    """
    Format a layout with unicode box-drawing characters.

    Args:
        layout: Layout to draw
        highlight: Character to mark with brackets (first occurrence)

    Returns:
        Multi-line keyboard drawing
    """
    highlight_at = None
    if highlight is not None and layout.contains_character(highlight):
        highlight_at = layout.coordinate_of(highlight)

    lines = [f"{layout.name.upper()} LAYOUT"]
    for row_index, row in enumerate(layout.rows):
        if row_index == 0:
            lines.append("┌" + "┬".join("───" for _ in row) + "┐")
        else:
            lines.append("├" + "┼".join("───" for _ in row) + "┤")

        cells = []
        for col_index, char in enumerate(row):
            label = _key_label(char) or ' '
            if highlight_at == (row_index, col_index):
                cells.append(f"[{label}]")
            else:
                cells.append(f" {label} ")
        lines.append("│" + "│".join(cells) + "│")

    last_row = layout.rows[-1]
    lines.append("└" + "┴".join("───" for _ in last_row) + "┘")

    return "\n".join(lines)


def describe_character(char: str) -> str:
    """
    Describe where a character is on the keyboard.

    Raises:
        CharacterNotFoundError: If the character is in neither layout
    """
    layout = layout_for(char)
    row, col = layout.coordinate_of(char)
    return f"{_key_label(char)!r}: {layout.name} layout, row {row}, column {col}"


def describe_distance(char1: str, char2: str) -> str:
    """
    Describe the key distance and shift state change between two characters.

    Raises:
        CharacterNotFoundError: If a character is in neither layout
    """
    distance = euclidean_distance(char1, char2)
    shift = "shift state changes" if is_shift_mismatch(char1, char2) else "same shift state"
    return f"{_key_label(char1)!r} -> {_key_label(char2)!r}: key distance {distance:.6f} ({shift})"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Visualize the QWERTZ keyboard layouts used for typo distance',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Display modes:
  (default)  Unicode box-drawing keyboard
  --simple   Simple monospace display with coordinates

Examples:
  python display_layout.py --layout base
  python display_layout.py --char Ö
  python display_layout.py --distance e i
        """
    )

    parser.add_argument('--layout', choices=['base', 'shifted', 'both'], default='both',
                        help='Layout(s) to display (default: both)')
    parser.add_argument('--simple', action='store_true',
                        help='Simple monospace display')
    parser.add_argument('--char',
                        help='Character to locate and highlight')
    parser.add_argument('--distance', nargs=2, metavar=('CHAR1', 'CHAR2'),
                        help='Show the key distance between two characters')

    args = parser.parse_args(argv)

    for value in [args.char] + list(args.distance or []):
        if value is not None and len(value) != 1:
            print(f"Error: Expected a single character, got {value!r}", file=sys.stderr)
            return 1

    try:
        if args.distance:
            print(describe_distance(*args.distance))
            return 0

        if args.char is not None:
            print(describe_character(args.char))
            print()
    except CharacterNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    layouts = LAYOUTS if args.layout == 'both' else (get_layout_by_name(args.layout),)

    for layout in layouts:
        if args.simple:
            print(format_layout_simple(layout))
        else:
            print(format_layout_ascii(layout, highlight=args.char))
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
