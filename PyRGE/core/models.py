"""Data models shared by the PyRGE analyses.

Key models:
- Record: a named sequence read from the FASTA file
- NRegion: one run of N-hardmasked bases
- ScanDirection: direction of a pseudoautosomal region scan
- PseudoAutosomalScanResult: scan result for one chromosome
- PairedPseudoAutosomalScanResult: scan results for chromosomes X and Y
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .position import Position
from .sequence import Sequence


@dataclass(frozen=True)
class Record:
    """Named sequence entry of a FASTA file.

    A record lives only while the analyses process it; analyses copy out
    whatever they keep.
    """
    name: str
    sequence: Sequence


@dataclass(frozen=True)
class NRegion:
    """Region of a sequence where every base is N-hardmasked.

    Both ends are inclusive, ``[start, end]``. ``length`` is ``end - start``.

    Attributes:
        sequence_name: Name of the sequence holding the region
        start: First masked position
        end: Last masked position
        length: Size of the region
    """
    sequence_name: str
    start: Position
    end: Position
    length: int

    def __str__(self) -> str:
        return "{{ Sequence Name: {}, Start: {}, End: {}, Length: {} }}".format(
            self.sequence_name, self.start, self.end, self.length
        )


class ScanDirection(Enum):
    """Direction in which chromosomes X and Y are walked."""
    FORWARD = 1
    REVERSE = -1

    @property
    def step(self) -> int:
        return self.value


@dataclass
class PseudoAutosomalScanResult:
    """Result of scanning a single chromosome in one direction.

    Every field stays None until the scan phase producing it has finished.

    Attributes:
        start_position: Where the scan began (the first or the last base)
        ns_until_position: First base that is not N-hardmasked
        same_until_position: First base where X and Y differ, i.e. the end of
            the pseudoautosomal region
        start_to_ns_len: Number of bases in the N-hardmasked cap
        ns_to_same_len: Length of the pseudoautosomal region
    """
    start_position: Optional[Position] = None
    ns_until_position: Optional[Position] = None
    same_until_position: Optional[Position] = None
    start_to_ns_len: Optional[int] = None
    ns_to_same_len: Optional[int] = None

    def format(self) -> str:
        return "Start: {}, Ns until: {} (Len: {:>6}), Same until: {} (Len: {:>6})".format(
            self.start_position,
            self.ns_until_position,
            self.start_to_ns_len,
            self.same_until_position,
            self.ns_to_same_len
        )


@dataclass
class PairedPseudoAutosomalScanResult:
    """Scan results for chromosomes X and Y, which are scanned in tandem."""
    chr_x: PseudoAutosomalScanResult = field(default_factory=PseudoAutosomalScanResult)
    chr_y: PseudoAutosomalScanResult = field(default_factory=PseudoAutosomalScanResult)

    def __str__(self) -> str:
        return "Chromosome X:\n  {}\nChromosome Y:\n  {}\n".format(
            self.chr_x.format(), self.chr_y.format()
        )
