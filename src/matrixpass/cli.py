"""Точка входа процесса.

stdout:
    Passphrase: <passphrase>
    Total execution time: <ms> ms
либо при ошибке:
    Error: <message>

Логи идут в stderr, чтобы не смешиваться с выводом.
"""

import argparse
import logging
import sys
from typing import List, Optional

import requests

from matrixpass.api.errors import MatrixPassError
from matrixpass.config import DEFAULT_BASE_URL, DEFAULT_MATRIX_SIZE, PipelineConfig
from matrixpass.pipeline import MatrixPipeline

_LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matrixpass",
        description="Multiply the A and B matrices of the numbers API and fetch the passphrase.",
    )
    parser.add_argument(
        "--base-url", default=DEFAULT_BASE_URL,
        help=f"API root (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--size", type=int, default=DEFAULT_MATRIX_SIZE,
        help=f"matrix size N (default: {DEFAULT_MATRIX_SIZE})",
    )
    parser.add_argument(
        "--fetch-workers", type=int, default=None,
        help="row fetch concurrency (default: one worker per row)",
    )
    parser.add_argument(
        "--compute-workers", type=int, default=None,
        help="row compute concurrency (default: one worker per row)",
    )
    parser.add_argument(
        "--timeout", type=float, default=None,
        help="HTTP timeout in seconds (default: transport default)",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="log to stderr (-v info, -vv debug)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=_LOG_LEVELS.get(args.verbose, logging.DEBUG),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = PipelineConfig(
            base_url=args.base_url,
            matrix_size=args.size,
            max_fetch_workers=args.fetch_workers,
            max_compute_workers=args.compute_workers,
            request_timeout_sec=args.timeout,
        )
        with MatrixPipeline(config) as pipeline:
            result = pipeline.run()
    except (MatrixPassError, requests.RequestException, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Passphrase: {result.passphrase}")
    print(f"Total execution time: {int(result.elapsed_ms)} ms")
    return 0
