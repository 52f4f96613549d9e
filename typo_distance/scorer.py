#!/usr/bin/env python3
"""
Typo distance scorer.

Wraps the typo distance solver with configuration, timing, optional
reverse-direction scoring and batch scoring of string pairs.
"""

import logging
import time
from pathlib import Path
from typing import Dict, Any, Optional, Tuple

import pandas as pd

from typo_distance.edit_costs import COSTS
from typo_distance.result import DistanceResult
from typo_distance.solver import build_distance_matrix
from typo_distance.text_utils import find_unsupported_characters, strip_unsupported_characters

logger = logging.getLogger(__name__)

DEFAULT_BATCH_COLUMNS = {
    'source_column': 'string1',
    'target_column': 'string2',
    'output_column': 'typo_distance',
}


class TypoDistanceScorer:
    """
    Scores how likely one string is a keyboard typo of another.

    Scoring options (``config['scoring_options']``):
        include_reverse: Also score string2 -> string1
        include_matrix: Keep the full distance matrix in the breakdown
        strip_unsupported: Drop characters that are not on the keyboard
            instead of failing
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the scorer.

        Args:
            config: Optional configuration dictionary (see config.yaml)
        """
        self.config = config or {}
        self.scorer_name = 'typo_distance'

        scoring_options = self.config.get('scoring_options') or {}
        self.include_reverse = scoring_options.get('include_reverse', False)
        self.include_matrix = scoring_options.get('include_matrix', False)
        self.strip_unsupported = scoring_options.get('strip_unsupported', False)

        self.batch_columns = {**DEFAULT_BATCH_COLUMNS, **(self.config.get('batch') or {})}

    def _prepare(self, text: str) -> Tuple[str, list]:
        if not self.strip_unsupported:
            return text, []
        removed = find_unsupported_characters(text)
        if removed:
            logger.debug("Stripping unsupported characters %s from %r", removed, text)
            text = strip_unsupported_characters(text)
        return text, removed

    def score_pair(self, string1: str, string2: str) -> DistanceResult:
        """
        Calculate the typo distance from string1 to string2.

        Args:
            string1: Intended string
            string2: Typed string

        Returns:
            DistanceResult with timing information

        Raises:
            CharacterNotFoundError: If a character is not on the keyboard
                (and strip_unsupported is off)
        """
        start_time = time.time()

        string1, removed1 = self._prepare(string1)
        string2, removed2 = self._prepare(string2)

        matrix = build_distance_matrix(string1, string2)
        distance = float(matrix[len(string1), len(string2)])

        components = {}
        if self.include_reverse:
            reverse_matrix = build_distance_matrix(string2, string1)
            reverse_distance = float(reverse_matrix[len(string2), len(string1)])
            components['reverse_distance'] = reverse_distance
            components['asymmetry'] = distance - reverse_distance

        detailed_breakdown = {}
        if self.include_matrix:
            detailed_breakdown['matrix'] = matrix.tolist()

        validation_info = {}
        if self.strip_unsupported:
            validation_info['removed_from_string1'] = ''.join(removed1)
            validation_info['removed_from_string2'] = ''.join(removed2)

        result = DistanceResult(
            distance=distance,
            string1=string1,
            string2=string2,
            components=components,
            metadata={
                'string1_length': len(string1),
                'string2_length': len(string2),
                'scoring_method': 'keyboard_weighted_levenshtein',
                **COSTS.to_dict(),
            },
            detailed_breakdown=detailed_breakdown,
            validation_info=validation_info,
        )

        result.execution_time = time.time() - start_time
        result.config_used = self.config.copy()

        logger.debug("Scored %r -> %r: %.6f", string1, string2, distance)
        return result

    def score_pairs(self, pairs: pd.DataFrame) -> pd.DataFrame:
        """
        Score every row of a DataFrame of string pairs.

        Args:
            pairs: DataFrame with the configured source and target columns

        Returns:
            Copy of the DataFrame with the output column appended (and
            reverse_distance when include_reverse is set)

        Raises:
            ValueError: If a required column is missing
            CharacterNotFoundError: If a character is not on the keyboard
        """
        source = self.batch_columns['source_column']
        target = self.batch_columns['target_column']
        output = self.batch_columns['output_column']

        missing = [col for col in (source, target) if col not in pairs.columns]
        if missing:
            raise ValueError(f"Missing columns in pairs data: {missing}. "
                             f"Available: {list(pairs.columns)}")

        scored = pairs.copy()
        distances = []
        reverse_distances = []

        for string1, string2 in zip(pairs[source], pairs[target]):
            # Empty CSV cells are read as NaN
            string1 = '' if pd.isna(string1) else str(string1)
            string2 = '' if pd.isna(string2) else str(string2)

            result = self.score_pair(string1, string2)
            distances.append(result.distance)
            if self.include_reverse:
                reverse_distances.append(result.components['reverse_distance'])

        scored[output] = distances
        if self.include_reverse:
            scored['reverse_distance'] = reverse_distances

        logger.info("Scored %d string pairs", len(scored))
        return scored

    def score_pairs_file(self, filepath: str) -> pd.DataFrame:
        """
        Score string pairs read from a CSV file.

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Pairs file not found: {filepath}")

        # Keep strings such as "0" or "NA" as text
        pairs = pd.read_csv(path, dtype=str, keep_default_na=False)
        return self.score_pairs(pairs)
