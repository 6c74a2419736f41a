"""Detection of N regions within the genome.

Runs of N-hardmasked bases are collected per sequence and summed up into a
per-sequence total once every record has been seen.
"""
import logging
from typing import Dict, List, Optional, Set, TextIO

import numpy as np

from PyRGE.core.models import NRegion, Record
from PyRGE.core.position import Position
from PyRGE.core.sequence import masked_mask
from .base import Analysis

logger = logging.getLogger(__name__)


def detect_n_regions(record: Record) -> List[NRegion]:
    """Find the N-hardmasked regions of a record.

    Positions ``1`` to ``len - 1`` are walked; the final base is never
    examined. A region opens at the first masked base of a run and closes at
    the first unmasked base after it, so a run still open when the walk ends
    is not reported. ``length`` of a region is ``end - start``.

    Args:
        record: Record to scan

    Returns:
        Regions in increasing position order
    """
    bases = record.sequence.as_array()[:-1]
    if bases.size == 0:
        return []

    # int8 views of the bool mask keep the edge array one byte per base
    masked = masked_mask(bases).view(np.int8)
    edges = np.diff(masked, prepend=np.int8(0))
    # 0-based indices of run starts and of the first unmasked base after a run
    starts = np.flatnonzero(edges == 1)
    stops = np.flatnonzero(edges == -1)

    regions = []
    for start, stop in zip(starts, stops):
        # 0-based `stop` is the 1-based position of the last masked base
        region_start = Position(int(start) + 1)
        region_end = Position(int(stop))
        regions.append(NRegion(
            sequence_name=record.name,
            start=region_start,
            end=region_end,
            length=region_end - region_start
        ))
    return regions


class NRegionDetectionAnalysis(Analysis):
    """Analysis collecting N-hardmasked regions of every sequence.

    Attributes:
        regions: N regions detected so far, in detection order
        sequence_names: Sequence names in the order they were first seen,
            used to print results in file order
        total_ns: Sum of region lengths per sequence, set by postprocess
    """
    name = "N Region Detection"

    def __init__(self) -> None:
        self.regions: List[NRegion] = []
        self.sequence_names: List[str] = []
        self._seen_names: Set[str] = set()
        self.total_ns: Optional[Dict[str, int]] = None

    def process(self, record: Record) -> None:
        regions = detect_n_regions(record)
        logger.debug("Found {} N region(s) in {}".format(len(regions), record.name))
        self.regions.extend(regions)

        if record.name not in self._seen_names:
            self._seen_names.add(record.name)
            self.sequence_names.append(record.name)

    def postprocess(self) -> None:
        total_ns: Dict[str, int] = {}
        for region in self.regions:
            total_ns[region.sequence_name] = total_ns.get(region.sequence_name, 0) + region.length
        self.total_ns = total_ns

    def report(self, output: TextIO) -> None:
        if self.total_ns is None:
            return

        print("Summary table:", file=output)
        for name in self.sequence_names:
            print(name, self.total_ns.get(name, 0), sep='\t', file=output)

        print(file=output)
        for region in self.regions:
            print(region, file=output)
