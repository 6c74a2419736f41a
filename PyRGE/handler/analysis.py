"""Driver running analyses over the records of a FASTA file.

The handler owns the list of active analyses and enforces their lifecycle:
every record goes to every analysis first, then every analysis is
postprocessed, and only then are the reports printed. An error at any stage
propagates and stops the run, so a failed postprocess prints no report at
all.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, TextIO

from PyRGE.analysis import Analysis, get_analyses
from PyRGE.core.models import Record
from PyRGE.interfaces.config import RGEConfig
from PyRGE.output.report import print_reports
from PyRGE.reader.fasta import FastaReader
from PyRGE.utils.chromfilter import is_target_chrom

logger = logging.getLogger(__name__)


class AnalysisHandler:
    """Run a set of analyses over one reference genome.

    Attributes:
        config: Run configuration
        analyses: Active analyses, in the order they are driven and reported
    """

    def __init__(self, config: RGEConfig, analyses: Optional[List[Analysis]] = None) -> None:
        self.config = config
        if analyses is None:
            analyses = get_analyses(
                config.analyses,
                chrx_name=config.chrx_name,
                chry_name=config.chry_name
            )
        self.analyses = analyses
        self.nrecords = 0

    def process_records(self, records: Iterable[Record]) -> None:
        """Feed each record to every analysis, in order."""
        for record in records:
            if not is_target_chrom(record.name, self.config.chromfilter):
                logger.debug("Skip record: {}".format(record.name))
                continue

            logger.info("Processing record: {}".format(record.name))
            for analysis in self.analyses:
                analysis.process(record)
            self.nrecords += 1

        if self.nrecords == 0:
            logger.warning("No records were processed.")

    def postprocess(self) -> None:
        """Finalize every analysis."""
        for analysis in self.analyses:
            logger.info("Postprocess '{}'".format(analysis.name))
            analysis.postprocess()

    def report(self, output: Optional[TextIO] = None) -> None:
        print_reports(self.analyses, output)

    def run(self, output: Optional[TextIO] = None) -> None:
        """Read the FASTA file, run all analyses and print their reports.

        Raises:
            SourceReadError: If the FASTA file can't be read
            MissingChromosome: If an analysis lacks a required chromosome
            OutOfRange: If a scan walks off a sequence
        """
        logger.info("Process {}".format(self.config.fasta_path))
        with FastaReader(self.config.fasta_path) as reader:
            self.process_records(reader)

        self.postprocess()
        self.report(output)
