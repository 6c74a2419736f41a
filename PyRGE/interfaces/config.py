"""Configuration for a PyRGE run."""
from argparse import Namespace
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import sys
if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from PyRGE.analysis.par import DEFAULT_CHRX_NAME, DEFAULT_CHRY_NAME


@dataclass
class RGEConfig:
    """Parameters for exploring a reference genome.

    Attributes:
        fasta_path: FASTA file to analyze
        analyses: Registry keys of the analyses to run (None runs all)
        chromfilter: Include/exclude chromosome patterns
        chrx_name: Record name of chromosome X
        chry_name: Record name of chromosome Y
    """
    fasta_path: Path
    analyses: Optional[Tuple[str, ...]] = None
    chromfilter: Optional[List[Tuple[bool, List[str]]]] = None
    chrx_name: str = DEFAULT_CHRX_NAME
    chry_name: str = DEFAULT_CHRY_NAME

    def __post_init__(self) -> None:
        if self.chrx_name == self.chry_name:
            raise ValueError("chromosome X and Y names must differ")

    @classmethod
    def from_args(cls, args: Namespace) -> Self:
        """Create configuration from parsed command-line arguments."""
        return cls(
            fasta_path=args.fasta,
            analyses=tuple(args.analysis) if args.analysis else None,
            chromfilter=args.chromfilter,
            chrx_name=args.chrx_name,
            chry_name=args.chry_name
        )
