"""Command-line argument parsing for the ``rge`` entry point.

Key functionality:
- Common logging and version arguments
- Custom argparse actions for logging level and colorization
- Include/exclude chromosome pattern collection
- Parser factory for the ``rge`` command
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence, Type, Union

import PyRGE
from PyRGE.analysis import ANALYSES
from PyRGE.analysis.par import DEFAULT_CHRX_NAME, DEFAULT_CHRY_NAME


def _make_upper(s: str) -> str:
    return s.upper()


class StoreLoggingLevel(argparse.Action):
    """Store a logging level name (e.g. 'DEBUG') as its logging constant."""
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[Any, Sequence[Any], None],
        option_string: Optional[str] = None
    ) -> None:
        assert isinstance(values, str), "Logging level must be a string"
        setattr(namespace, self.dest, getattr(logging, values))


class ToColorizeOption(argparse.Action):
    """Store 'TRUE'/'FALSE' as a bool; anything else follows whether stderr
    is a terminal."""
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[Any, Sequence[Any], None],
        option_string: Optional[str] = None
    ) -> None:
        assert isinstance(values, str), "Colorization option must be a string"
        if values == "TRUE":
            colorize = True
        elif values == "FALSE":
            colorize = False
        else:
            colorize = sys.stderr.isatty()
        setattr(namespace, self.dest, colorize)


def make_multistate_append_action(key: bool) -> Type[argparse.Action]:
    """Create an action appending ``(key, values)`` to a shared destination.

    Lets ``-i`` and ``-e`` fill the same list while keeping their order.
    """
    class _MultistateAppendAction(argparse.Action):
        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Any,
            option_string: Optional[str] = None
        ) -> None:
            args = getattr(namespace, self.dest)
            args = [] if args is None else args
            args.append((key, values))
            setattr(namespace, self.dest, args)

    return _MultistateAppendAction


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add logging, coloring and version arguments."""
    parser.add_argument(
        "-v", "--log-level", type=_make_upper, default=logging.INFO,
        action=StoreLoggingLevel, choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Set verbosity. (Default: INFO)"
    )
    parser.add_argument(
        "--color", type=_make_upper, default=sys.stderr.isatty(), action=ToColorizeOption,
        choices=("TRUE", "FALSE"),
        help="Coloring log. (Default: auto)"
    )
    parser.add_argument(
        "--version", action="version", version="PyRGE " + PyRGE.VERSION
    )


def add_chrom_filter_args(group: argparse._ArgumentGroup) -> None:
    """Add chromosome include/exclude pattern arguments."""
    group.add_argument(
        "-i", "--include-chrom", nargs='+', dest="chromfilter", metavar="CHROM",
        action=make_multistate_append_action(True),
        help="Include sequences to analyze. You can use Unix shell-style "
             "wildcards ('?', '*', '[]' and '[!]'). This option can be declared "
             "multiple times to include sequences excluded by a just before "
             "-e/--exclude-chrom option. Note that this option is case-sensitive."
    )
    group.add_argument(
        "-e", "--exclude-chrom", nargs='+', dest="chromfilter", metavar="CHROM",
        action=make_multistate_append_action(False),
        help="Exclude sequences from analysis. You can use Unix shell-style "
             "wildcards ('?', '*', '[]' and '[!]'). This option can be declared "
             "multiple times to exclude sequences included by a just before "
             "-i/--include-chrom option. Note that this option is case-sensitive."
    )


def get_rge_parser() -> argparse.ArgumentParser:
    """Create the ``rge`` argument parser."""
    parser = argparse.ArgumentParser(
        description="Explore a reference genome: detect N-hardmasked regions and\n"
                    "estimate pseudoautosomal regions of chromosomes X and Y.",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    add_common_args(parser)

    input_args = parser.add_argument_group("Input file arguments")
    input_args.add_argument(
        "fasta", metavar="FASTA", type=Path,
        help="The path to the reference genome we are exploring (plain or gzipped FASTA)."
    )

    proc_args = parser.add_argument_group("Analysis arguments")
    proc_args.add_argument(
        "-a", "--analysis", nargs='+', choices=tuple(ANALYSES), metavar="ANALYSIS",
        help="Run only the specified analyses. Choices: {} "
             "(Default: all)".format(', '.join(ANALYSES))
    )
    proc_args.add_argument(
        "--chrx-name", default=DEFAULT_CHRX_NAME,
        help="Sequence name of chromosome X. (Default: {})".format(DEFAULT_CHRX_NAME)
    )
    proc_args.add_argument(
        "--chry-name", default=DEFAULT_CHRY_NAME,
        help="Sequence name of chromosome Y. (Default: {})".format(DEFAULT_CHRY_NAME)
    )

    filter_args = parser.add_argument_group("Input sequence filtering arguments")
    add_chrom_filter_args(filter_args)

    return parser
