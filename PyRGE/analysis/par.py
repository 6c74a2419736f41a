"""Pseudoautosomal region detection.

This module detects the pseudoautosomal regions of an existing reference
genome. It scans the start and the end of chromosomes X and Y, skips the
N-hardmasked caps of each chromosome independently, and then walks both
chromosomes in tandem to find how long X and Y stay identical. The scan start
positions, the end of the N-hardmasked caps and the end of the
pseudoautosomal regions are all reported.
"""
import logging
from typing import Optional, TextIO, Tuple

import numpy as np

from PyRGE.core.exceptions import MissingChromosome, OutOfRange
from PyRGE.core.models import (
    PairedPseudoAutosomalScanResult, PseudoAutosomalScanResult, Record, ScanDirection
)
from PyRGE.core.position import Position, distance
from PyRGE.core.sequence import Sequence, masked_mask
from .base import Analysis

logger = logging.getLogger(__name__)

DEFAULT_CHRX_NAME = "chrX"
DEFAULT_CHRY_NAME = "chrY"


def _start_position(sequence: Sequence, direction: ScanDirection) -> Position:
    if len(sequence) == 0:
        raise OutOfRange("can't scan an empty sequence")
    if direction is ScanDirection.FORWARD:
        return Position(1)
    return sequence.last_position


def _walk(sequence: Sequence, position: Position, direction: ScanDirection) -> np.ndarray:
    """Bases met when walking from ``position`` to the end of ``sequence``
    in ``direction``, the base at ``position`` first."""
    bases = sequence.as_array()
    if direction is ScanDirection.FORWARD:
        return bases[int(position) - 1:]
    return bases[int(position) - 1::-1]


def skip_masked(sequence: Sequence, position: Position, direction: ScanDirection) -> Position:
    """Walk from ``position`` while the base is N-hardmasked.

    Returns:
        Position of the first base that is not N or n

    Raises:
        OutOfRange: If the walk falls off the end of the sequence
    """
    unmasked = np.flatnonzero(~masked_mask(_walk(sequence, position, direction)))
    if unmasked.size == 0:
        raise OutOfRange("no unmasked base found from position {} scanning {}".format(
            position, direction.name.lower()))
    return Position(position + direction.step * int(unmasked[0]))


def find_divergence(
    chr_x: Sequence, x_position: Position,
    chr_y: Sequence, y_position: Position,
    direction: ScanDirection
) -> Tuple[Position, Position]:
    """Walk both chromosomes together until their bases differ.

    Bases are compared as raw bytes, so ``a`` and ``A`` are different.

    Returns:
        Positions on X and on Y of the first pair of differing bases

    Raises:
        OutOfRange: If either chromosome runs out of bases first
    """
    x_bases = _walk(chr_x, x_position, direction)
    y_bases = _walk(chr_y, y_position, direction)

    overlap = min(x_bases.size, y_bases.size)
    mismatches = np.flatnonzero(x_bases[:overlap] != y_bases[:overlap])
    if mismatches.size == 0:
        raise OutOfRange("chromosomes never diverge scanning {} from positions ({}, {})".format(
            direction.name.lower(), x_position, y_position))

    offset = direction.step * int(mismatches[0])
    return Position(x_position + offset), Position(y_position + offset)


def scan_for_pseudoautosomal_region(
    chr_x: Sequence, chr_y: Sequence, direction: ScanDirection
) -> PairedPseudoAutosomalScanResult:
    """Scan chromosomes X and Y for a pseudoautosomal region.

    Args:
        chr_x: Sequence of chromosome X
        chr_y: Sequence of chromosome Y
        direction: FORWARD scans from the first base, REVERSE from the last

    Returns:
        Paired scan result with every field set

    Raises:
        OutOfRange: If a pointer walks past either end of a chromosome
    """
    result = PairedPseudoAutosomalScanResult()
    pairs = ((chr_x, result.chr_x), (chr_y, result.chr_y))

    # (1) Set up the start position of each chromosome
    for sequence, chrom_result in pairs:
        chrom_result.start_position = _start_position(sequence, direction)

    # (2) Skip the N-hardmasked caps, independently for each chromosome
    for sequence, chrom_result in pairs:
        assert chrom_result.start_position is not None
        ns_until = skip_masked(sequence, chrom_result.start_position, direction)
        chrom_result.ns_until_position = ns_until
        chrom_result.start_to_ns_len = distance(chrom_result.start_position, ns_until)

    # (3) Track both chromosomes until the nucleotides split
    assert result.chr_x.ns_until_position is not None and result.chr_y.ns_until_position is not None
    x_same_until, y_same_until = find_divergence(
        chr_x, result.chr_x.ns_until_position,
        chr_y, result.chr_y.ns_until_position,
        direction
    )
    result.chr_x.same_until_position = x_same_until
    result.chr_y.same_until_position = y_same_until
    result.chr_x.ns_to_same_len = distance(result.chr_x.ns_until_position, x_same_until)
    result.chr_y.ns_to_same_len = distance(result.chr_y.ns_until_position, y_same_until)

    return result


class PseudoAutosomalRegionAnalysis(Analysis):
    """Analysis estimating the pseudoautosomal regions of chromosomes X and Y.

    Attributes:
        chrx_name: Record name captured as chromosome X
        chry_name: Record name captured as chromosome Y
        chr_x: Chromosome X, once seen
        chr_y: Chromosome Y, once seen
        forward_results: Results of scanning from the start of the chromosomes
        reverse_results: Results of scanning from the end of the chromosomes
    """
    name = "Pseudoautosomal Region Analysis"

    def __init__(self, chrx_name: str = DEFAULT_CHRX_NAME, chry_name: str = DEFAULT_CHRY_NAME) -> None:
        self.chrx_name = chrx_name
        self.chry_name = chry_name
        self.chr_x: Optional[Sequence] = None
        self.chr_y: Optional[Sequence] = None
        self.forward_results: Optional[PairedPseudoAutosomalScanResult] = None
        self.reverse_results: Optional[PairedPseudoAutosomalScanResult] = None

    def process(self, record: Record) -> None:
        if record.name == self.chrx_name:
            self.chr_x = Sequence(record.sequence.data)
            logger.debug("Captured chromosome X: {} ({} bp)".format(record.name, len(self.chr_x)))
        elif record.name == self.chry_name:
            self.chr_y = Sequence(record.sequence.data)
            logger.debug("Captured chromosome Y: {} ({} bp)".format(record.name, len(self.chr_y)))

    def postprocess(self) -> None:
        # (1) Check to ensure we actually found chrX and chrY
        if self.chr_x is None:
            raise MissingChromosome(
                "we didn't identify chromosome X ({})! "
                "Does this genome use accessions instead?".format(self.chrx_name))
        if self.chr_y is None:
            raise MissingChromosome(
                "we didn't identify chromosome Y ({})! "
                "Does this genome use accessions instead?".format(self.chry_name))

        # (2) Scan from the front and the back of the chromosomes
        logger.info("Scan chromosome X and Y for pseudoautosomal regions")
        self.forward_results = scan_for_pseudoautosomal_region(self.chr_x, self.chr_y, ScanDirection.FORWARD)
        self.reverse_results = scan_for_pseudoautosomal_region(self.chr_x, self.chr_y, ScanDirection.REVERSE)

    def report(self, output: TextIO) -> None:
        print("---", file=output)
        print("Pseudoautosomal Region 1", file=output)
        print(self.forward_results, file=output)
        print(file=output)
        print("---", file=output)
        print("Pseudoautosomal Region 2", file=output)
        print(self.reverse_results, file=output)
