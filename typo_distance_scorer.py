#!/usr/bin/env python3
"""
Typo Distance Scorer for pairs of strings.

Calculate how likely it is that a typed string is an accidental typo of an
intended string on a German QWERTZ keyboard. The lower the distance, the
more likely the typo:

  - **Substitutions** cost more the farther apart the two keys are
  - **Shift-state changes** (e.g., 'a' typed as 'A') add a penalty
  - **Insertions** cost more than **deletions**, so the distance is not
    commutative: missing a keystroke is more likely than adding one

Usage:

  # Basic usage
  python typo_distance_scorer.py elephants rlephants

  # Score both directions and show the distance matrix
  python typo_distance_scorer.py cat cast --both-directions --show-matrix

  # Drop characters that aren't on the keyboard
  python typo_distance_scorer.py "hello" "hello€" --strip-unsupported

  # CSV output
  python typo_distance_scorer.py elephants ilephants --csv

  # Score only
  python typo_distance_scorer.py elephants ilephants --score-only

  # Batch scoring of a CSV file with string1,string2 columns
  python typo_distance_scorer.py --pairs-file pairs.csv --output scored.csv
"""

import logging
import sys
from typing import List, Optional

from typo_distance.config_loader import get_config_loader, load_scorer_config
from typo_distance.cli_utils import (
    create_standard_parser, find_config_path, handle_common_errors,
    apply_args_to_config, configure_logging
)
from typo_distance.output_utils import print_results, save_batch_results
from typo_distance.scorer import TypoDistanceScorer
from typo_distance.text_utils import validate_text_input

logger = logging.getLogger(__name__)


@handle_common_errors
def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""

    cli_parser = create_standard_parser('typo_distance', find_config_path(argv))
    args = cli_parser.parse_args(argv)

    # Load configuration (fall back to defaults without a config file)
    try:
        config = load_scorer_config('typo_distance', args.config)
        config_loader = get_config_loader(args.config)
        logging_config = config_loader.get_logging_config()
        csv_config = dict(config_loader.get_output_format_config('csv'))
        output_config = dict(config_loader.get_output_format_config(args.output_format))
    except FileNotFoundError:
        config = {}
        logging_config = {}
        csv_config = {}
        output_config = {}

    config = apply_args_to_config(config, args)
    quiet = config['quiet_mode']

    configure_logging(logging_config, verbose=args.verbose, quiet=quiet)

    scorer = TypoDistanceScorer(config)

    if args.pairs_file:
        scored = scorer.score_pairs_file(args.pairs_file)

        if args.output:
            save_batch_results(scored, args.output, csv_config)
            if not quiet:
                print(f"Scored {len(scored)} pairs -> {args.output}")
        else:
            scored.to_csv(sys.stdout, index=False,
                          float_format=f"%.{csv_config.get('precision', 6)}f")
        return 0

    if not scorer.strip_unsupported:
        for label, text in (('string1', args.string1), ('string2', args.string2)):
            for issue in validate_text_input(text):
                if issue != "Text is empty":
                    logger.warning("%s: %s", label, issue)

    result = scorer.score_pair(args.string1, args.string2)

    if args.show_matrix:
        output_config['show_matrix'] = True

    print_results(result, args.output_format, output_config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
