#!/usr/bin/env python3
"""
Output utilities for typo distance scoring.

Common functions for formatting and displaying results in various formats.
"""

import csv
import io
import sys
from typing import Dict, Any, List, Optional, Sequence

import pandas as pd

from typo_distance.result import DistanceResult


def _axis_labels(s: str) -> List[str]:
    # Row/column 0 is the empty prefix; the table has one extra trailing slot
    return ['·'] + list(s) + ['·']


def format_matrix(matrix: Sequence[Sequence[float]],
                  string1: str,
                  string2: str,
                  precision: int = 2) -> str:
    """
    Format a typo distance matrix as an aligned text table.

    Rows are labelled with the characters of string1, columns with the
    characters of string2.
    """
    row_labels = _axis_labels(string1)
    col_labels = _axis_labels(string2)

    cells = [[f"{value:.{precision}f}" for value in row] for row in matrix]
    width = max([len(cell) for row in cells for cell in row] + [1])

    lines = ["   " + " ".join(f"{label:>{width}}" for label in col_labels)]
    for label, row in zip(row_labels, cells):
        lines.append(f"{label:>2} " + " ".join(f"{cell:>{width}}" for cell in row))

    return '\n'.join(lines)


def format_csv_output(result: DistanceResult,
                      config: Optional[Dict[str, Any]] = None,
                      include_metadata: bool = True) -> str:
    """
    Format a result as CSV output.

    Args:
        result: DistanceResult to format
        config: Output format configuration
        include_metadata: Whether to include metadata fields

    Returns:
        CSV formatted string
    """
    if config is None:
        config = {}

    delimiter = config.get('delimiter', ',')
    precision = config.get('precision', 6)
    include_headers = config.get('include_headers', True)

    headers = ['string1', 'string2', 'typo_distance']
    values = [result.string1, result.string2, f"{result.distance:.{precision}f}"]

    for component in sorted(result.components.keys()):
        headers.append(f'component_{component}')
        values.append(f"{result.components[component]:.{precision}f}")

    if include_metadata:
        headers.append('execution_time')
        values.append(f"{result.execution_time:.3f}")

        for prefix, section in (('validation', result.validation_info), ('meta', result.metadata)):
            for key in sorted(section.keys()):
                value = section[key]
                if not isinstance(value, (str, int, float, bool)):
                    continue
                headers.append(f'{prefix}_{key}')
                if isinstance(value, float):
                    values.append(f"{value:.{precision}f}")
                else:
                    values.append(str(value))

    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator='\n')
    if include_headers:
        writer.writerow(headers)
    writer.writerow(values)

    return buffer.getvalue().rstrip('\n')


def format_score_only_output(result: DistanceResult,
                             config: Optional[Dict[str, Any]] = None,
                             include_components: bool = False) -> str:
    """
    Format a result as score-only output (compact format).
    """
    if config is None:
        config = {}

    precision = config.get('precision', 6)
    separator = config.get('separator', ' ')

    scores = [f"{result.distance:.{precision}f}"]

    if include_components:
        for component in sorted(result.components.keys()):
            scores.append(f"{result.components[component]:.{precision}f}")

    return separator.join(scores)


def format_detailed_output(result: DistanceResult,
                           config: Optional[Dict[str, Any]] = None) -> str:
    """
    Format a result as detailed human-readable output.

    Args:
        result: DistanceResult to format
        config: Output format configuration

    Returns:
        Formatted detailed output string
    """
    if config is None:
        config = {}

    precision = config.get('precision', 6)
    show_matrix = config.get('show_matrix', False)
    show_validation = config.get('show_validation_info', False)

    lines = [
        f"Intended: {result.string1!r}",
        f"Typed:    {result.string2!r}",
        "",
        "Scores:",
        f"  {'Typo distance':<28}: {result.distance:.{precision}f}",
    ]

    for component, score in result.components.items():
        component_name = component.replace('_', ' ').capitalize()
        lines.append(f"  {component_name:<28}: {score:.{precision}f}")

    if show_validation and result.validation_info:
        lines.append("\nValidation information:")
        for key, value in sorted(result.validation_info.items()):
            key_name = key.replace('_', ' ').capitalize()
            lines.append(f"  {key_name:<28}: {value!r}")

    if result.metadata:
        lines.append("\nAdditional information:")
        for key, value in sorted(result.metadata.items()):
            if key == 'scoring_method' or not isinstance(value, (str, int, float, bool)):
                continue
            key_name = key.replace('_', ' ').capitalize()
            if isinstance(value, float):
                lines.append(f"  {key_name:<28}: {value:8.6f}")
            else:
                lines.append(f"  {key_name:<28}: {value}")

    matrix = result.detailed_breakdown.get('matrix')
    if show_matrix and matrix is not None:
        lines.append("\nDistance matrix:")
        lines.append(format_matrix(matrix, result.string1, result.string2))

    if result.execution_time > 0:
        lines.append(f"\nExecution time: {result.execution_time:.3f}s")

    return '\n'.join(lines)


def print_results(result: DistanceResult,
                  output_format: str = "detailed",
                  config: Optional[Dict[str, Any]] = None,
                  file=None) -> None:
    """
    Print a result in the specified format.

    Args:
        result: DistanceResult to print
        output_format: Format type ('detailed', 'csv', 'score_only')
        config: Output format configuration
        file: File object to write to (defaults to stdout)

    Raises:
        ValueError: If the output format is unknown
    """
    if file is None:
        file = sys.stdout

    if output_format == "csv":
        output = format_csv_output(result, config)
    elif output_format == "score_only":
        output = format_score_only_output(result, config)
    elif output_format == "detailed":
        output = format_detailed_output(result, config)
    else:
        raise ValueError(f"Unknown output format: {output_format}")

    print(output, file=file)


def save_batch_results(scored: pd.DataFrame,
                       filepath: str,
                       config: Optional[Dict[str, Any]] = None) -> None:
    """
    Save batch scoring results to a CSV file.

    Args:
        scored: DataFrame returned by TypoDistanceScorer.score_pairs
        filepath: Path to output file
        config: CSV output format configuration
    """
    if config is None:
        config = {}

    precision = config.get('precision', 6)
    scored.to_csv(filepath,
                  index=False,
                  sep=config.get('delimiter', ','),
                  float_format=f"%.{precision}f")
