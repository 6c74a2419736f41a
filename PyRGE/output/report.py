"""Report output for finished analyses.

Every analysis gets a block on the output sink: its name, a rule, a blank
line, the report itself and a closing blank line.
"""
import logging
import sys
from typing import Iterable, Optional, TextIO

from PyRGE.analysis.base import Analysis

logger = logging.getLogger(__name__)

REPORT_RULE = "-----"


def print_report(analysis: Analysis, output: Optional[TextIO] = None) -> None:
    """Print the report block of a single analysis."""
    if output is None:
        output = sys.stdout
    print(analysis.name, file=output)
    print(REPORT_RULE, file=output)
    print(file=output)
    analysis.report(output)
    print(file=output)


def print_reports(analyses: Iterable[Analysis], output: Optional[TextIO] = None) -> None:
    """Print the report blocks of all analyses in order."""
    if output is None:
        output = sys.stdout
    for analysis in analyses:
        logger.debug("Report '{}'".format(analysis.name))
        print_report(analysis, output)
    output.flush()
