#!/usr/bin/env python3
"""
Main entry point for E-Divisive change-point detection.

Single-series files (JSON list, {"series": [...]}, or a one-column table)
print their change points; tables with [id, time, value] run the batch.
"""

import argparse
import json
import sys
import logging
from pathlib import Path
from typing import List, Optional

from .methods import EDivisiveMethod
from .methods.base import CommonConfig
from .methods.edivisive.config import PVALUE, PERMUTATIONS, SEED
from .batch_processor import (
    load_series, read_table, series_from_frame, is_multi_series, run_batch_frame,
    get_processing_summary
)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="E-Divisive change-point detection")

    # Input/Output paths
    parser.add_argument('--input', '-i', type=str,
                        default=CommonConfig.DEFAULT_INPUT_PATH,
                        help='Input file (.json, .csv or .parquet)')
    parser.add_argument('--output', '-o', type=str,
                        default=CommonConfig.DEFAULT_OUTPUT_PATH,
                        help='Output file for batch results')

    # Significance test parameters
    parser.add_argument('--pvalue', '-p', type=float, default=PVALUE,
                        help='Significance threshold for accepting a change point')
    parser.add_argument('--permutations', '-n', type=int, default=PERMUTATIONS,
                        help='Permutation trials per candidate')

    # Common parameters
    parser.add_argument('--n-jobs', '-j', type=int, default=None,
                        help='Number of parallel jobs')
    parser.add_argument('--seed', '-s', type=int, default=SEED,
                        help='Random seed')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose logging')
    parser.add_argument('--validate-only', action='store_true',
                        help='Validate config and exit')

    return parser.parse_args(argv)


def get_method_config(args: argparse.Namespace) -> dict:
    """Get method configuration from arguments."""
    return {
        'significance_threshold': args.pvalue,
        'permutation_count': args.permutations,
        'seed': args.seed
    }


def run_detection(args: argparse.Namespace) -> int:
    """Run detection on a single series or a batch table."""
    logger = logging.getLogger(__name__)

    config = get_method_config(args)
    method = EDivisiveMethod(config)
    method.validate_config()
    if args.validate_only:
        logger.info("Validation only - exiting")
        return 0

    input_path = Path(args.input)
    if not input_path.exists():
        logger.error(f"Input file does not exist: {input_path}")
        return 1

    if input_path.suffix.lower() == '.json':
        series = load_series(str(input_path))
    else:
        df = read_table(str(input_path))
        if not is_multi_series(df):
            series = series_from_frame(df)
        else:
            n_jobs = args.n_jobs or CommonConfig.N_JOBS
            logger.info(f"Running batch with config: {config}")
            result_df = run_batch_frame(df, args.output, config=config,
                                        n_jobs=n_jobs, verbose=args.verbose)
            summary = get_processing_summary(result_df)
            logger.info(f"Processed {summary['n_series']} series")
            logger.info(f"Success: {summary['n_successful']}, Failed: {summary['n_failed']}")
            return 0

    change_points, metadata = method.detect(series)
    logger.info(f"Found {len(change_points)} change points in {metadata['processing_time']:.3f}s")
    print(json.dumps({'series_length': len(series), 'change_points': change_points}))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        logger.info("Starting E-Divisive change-point detection")
        return run_detection(args)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
