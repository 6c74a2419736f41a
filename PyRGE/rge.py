"""Main ``rge`` CLI application: the Reference Genome Explorer.

Reads a reference genome FASTA file, runs every selected analysis over its
records and prints the analysis reports to stdout.
"""
from __future__ import annotations

import argparse
import logging

from . import entrypoint, logging_version
from .utils.logfmt import set_rootlogger
from .utils.parsearg import get_rge_parser
from .interfaces.config import RGEConfig
from .handler.analysis import AnalysisHandler

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    """Parse arguments and set up logging.

    Raises:
        SystemExit: If argument validation fails
    """
    parser = get_rge_parser()
    args = parser.parse_args()

    if args.chrx_name == args.chry_name:
        parser.error("argument --chry-name: must differ from --chrx-name.")

    # set up logging
    set_rootlogger(args.color, args.log_level)
    logging_version(logger)

    return args


@entrypoint(logger)
def main() -> None:
    """Main PyRGE application entry point.

    1. Parse command-line arguments
    2. Read the FASTA file and feed each record to every analysis
    3. Postprocess every analysis
    4. Print every analysis report
    """
    args = _parse_args()
    config = RGEConfig.from_args(args)

    handler = AnalysisHandler(config)
    handler.run()
