#!/usr/bin/env python3
"""
CLI utilities for typo distance scoring.

Command-line argument parsing, logging setup and error handling shared
by the scripts.
"""

import argparse
import logging
import sys
from typing import Dict, Any, List, Optional

from typo_distance.config_loader import get_config_loader


class StandardCLIParser:
    """
    Command-line argument parser for the typo distance scorer.
    """

    def __init__(self, scorer_name: str = "typo_distance", config_path: str = "config.yaml"):
        """
        Initialize the CLI parser.

        Args:
            scorer_name: Name of the scorer section in the configuration
            config_path: Path to configuration file
        """
        self.scorer_name = scorer_name
        self.config_loader = get_config_loader(config_path)

        try:
            self.scorer_config = self.config_loader.get_scorer_config(scorer_name)
        except FileNotFoundError:
            # Defaults apply without a config file
            self.scorer_config = {}
        except Exception as e:
            print(f"Warning: Could not load configuration: {e}", file=sys.stderr)
            self.scorer_config = {}

        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        description = self.scorer_config.get('description', 'Typo distance between two strings')
        method = self.scorer_config.get('method', 'Keyboard-weighted edit distance')

        parser = argparse.ArgumentParser(
            description=f"{description}\n\nMethod: {method}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._generate_epilog()
        )

        self._add_input_arguments(parser)
        self._add_scoring_arguments(parser)
        self._add_output_arguments(parser)

        return parser

    def _add_input_arguments(self, parser: argparse.ArgumentParser) -> None:
        input_group = parser.add_argument_group('Input Options')

        input_group.add_argument(
            'string1', nargs='?',
            help="Intended string"
        )
        input_group.add_argument(
            'string2', nargs='?',
            help="Typed string (possible typo of string1)"
        )
        input_group.add_argument(
            '--pairs-file',
            dest='pairs_file',
            help="CSV file of string pairs to score (alternative to STRING1 STRING2)"
        )
        input_group.add_argument(
            '--config',
            dest='config',
            default="config.yaml",
            help="Path to configuration file (default: config.yaml)"
        )

    def _add_scoring_arguments(self, parser: argparse.ArgumentParser) -> None:
        scoring_group = parser.add_argument_group('Scoring Options')

        scoring_group.add_argument(
            '--both-directions',
            dest='both_directions',
            action='store_true',
            help="Also score the reverse direction (string2 -> string1)"
        )
        scoring_group.add_argument(
            '--strip-unsupported',
            dest='strip_unsupported',
            action='store_true',
            help="Drop characters that are not on the keyboard instead of failing"
        )

    def _add_output_arguments(self, parser: argparse.ArgumentParser) -> None:
        output_group = parser.add_argument_group('Output Options')

        output_group.add_argument(
            '--output-format',
            dest='output_format',
            choices=['detailed', 'csv', 'score_only'],
            default='detailed',
            help="Output format (default: detailed)"
        )
        output_group.add_argument(
            '--csv',
            dest='csv',
            action='store_true',
            help="Output in CSV format (same as --output-format csv)"
        )
        output_group.add_argument(
            '--score-only',
            dest='score_only',
            action='store_true',
            help="Output only the distance (same as --output-format score_only)"
        )
        output_group.add_argument(
            '--show-matrix',
            dest='show_matrix',
            action='store_true',
            help="Show the distance matrix in detailed output"
        )
        output_group.add_argument(
            '--output',
            dest='output',
            help="Write batch results to this CSV file (with --pairs-file)"
        )
        output_group.add_argument(
            '--quiet',
            dest='quiet',
            action='store_true',
            help="Suppress warnings and log messages"
        )
        output_group.add_argument(
            '--verbose',
            dest='verbose',
            action='store_true',
            help="Show debug log messages"
        )

    def _generate_epilog(self) -> str:
        lines = [
            "Examples:",
            "  # Score one pair",
            "  python typo_distance_scorer.py elephants rlephants",
            "",
            "  # Both directions with the distance matrix",
            "  python typo_distance_scorer.py cat cast --both-directions --show-matrix",
            "",
            "  # Score a CSV file of pairs",
            "  python typo_distance_scorer.py --pairs-file pairs.csv --output scored.csv",
        ]
        return "\n".join(lines)

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """
        Parse command-line arguments with validation.

        Args:
            args: List of arguments (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        parsed_args = self.parser.parse_args(args)

        if parsed_args.csv:
            parsed_args.output_format = 'csv'
        elif parsed_args.score_only:
            parsed_args.output_format = 'score_only'

        has_pair = parsed_args.string1 is not None or parsed_args.string2 is not None

        if parsed_args.pairs_file and has_pair:
            self.parser.error("Cannot specify both STRING1 STRING2 and --pairs-file")

        if not parsed_args.pairs_file:
            if parsed_args.string1 is None or parsed_args.string2 is None:
                self.parser.error("Must provide either STRING1 STRING2 or --pairs-file")
            if parsed_args.output:
                self.parser.error("--output requires --pairs-file")

        if parsed_args.quiet and parsed_args.verbose:
            self.parser.error("Cannot specify both --quiet and --verbose")

        return parsed_args


def find_config_path(args: Optional[List[str]] = None, default: str = "config.yaml") -> str:
    """
    Find the --config value before the full parser is built.

    Args:
        args: List of arguments (uses sys.argv if None)
        default: Path used when --config is not given

    Returns:
        Configuration file path
    """
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument('--config', dest='config', default=default)
    known_args, _ = pre_parser.parse_known_args(args)
    return known_args.config


def create_standard_parser(scorer_name: str = "typo_distance",
                           config_path: str = "config.yaml") -> StandardCLIParser:
    """Create the CLI parser for a scorer."""
    return StandardCLIParser(scorer_name, config_path)


def apply_args_to_config(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """
    Override configuration settings with command-line arguments.

    Args:
        config: Scorer configuration (not modified)
        args: Parsed command-line arguments

    Returns:
        Updated copy of the configuration
    """
    config = dict(config)
    scoring_options = dict(config.get('scoring_options') or {})

    if args.both_directions:
        scoring_options['include_reverse'] = True
    if args.strip_unsupported:
        scoring_options['strip_unsupported'] = True
    if args.show_matrix:
        scoring_options['include_matrix'] = True

    config['scoring_options'] = scoring_options
    config['quiet_mode'] = args.quiet or bool(config.get('quiet_mode', False))
    return config


def configure_logging(logging_config: Optional[Dict[str, Any]] = None,
                      verbose: bool = False,
                      quiet: bool = False) -> None:
    """
    Set up logging from the 'logging' configuration section.

    Args:
        logging_config: Dict with optional 'level' and 'format' keys
        verbose: Force DEBUG level
        quiet: Force ERROR level
    """
    logging_config = logging_config or {}

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, str(logging_config.get('level', 'WARNING')).upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format=logging_config.get('format', '%(asctime)s - %(levelname)s - %(message)s'),
        force=True
    )


def handle_common_errors(func):
    """
    Decorator to handle common CLI errors gracefully.

    Args:
        func: Function to wrap (typically main())

    Returns:
        Wrapped function with error handling
    """
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            print("\nOperation cancelled by user.", file=sys.stderr)
            return 130
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except PermissionError as e:
            print(f"Permission error: {e}", file=sys.stderr)
            return 1
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            return 1

    return wrapper
