# typo_distance/__init__.py
"""
Typo Distance

Keyboard-aware, asymmetric edit distance estimating how likely one
string is an accidental typo of another.
"""

__version__ = "1.0.0"

# Import main functions and classes for easy access
from .keyboard_layout import BASE_LAYOUT, SHIFTED_LAYOUT, KeyboardLayout, KeyNotFoundError
from .cost_model import CharacterNotFoundError, layout_for, euclidean_distance
from .solver import typo_distance, build_distance_matrix
from .result import DistanceResult
from .scorer import TypoDistanceScorer

__all__ = [
    'BASE_LAYOUT',
    'SHIFTED_LAYOUT',
    'KeyboardLayout',
    'KeyNotFoundError',
    'CharacterNotFoundError',
    'layout_for',
    'euclidean_distance',
    'typo_distance',
    'build_distance_matrix',
    'DistanceResult',
    'TypoDistanceScorer',
]
