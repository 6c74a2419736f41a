from abc import ABC, abstractmethod
from typing import TextIO

from PyRGE.core.models import Record


class Analysis(ABC):
    """Abstract base class for all reference genome analyses.

    An analysis is driven through a fixed lifecycle:

    1. ``process`` once for every record, in FASTA file order
    2. ``postprocess`` once, after the last record
    3. ``report`` once, after every analysis finished postprocessing

    Implementations keep all their state on the instance and never modify
    the records they are given.
    """

    #: Display label printed above the report of the analysis.
    name: str

    @abstractmethod
    def process(self, record: Record) -> None:
        """Process a record contained within the FASTA file.

        Records may arrive in any order and any chromosome may be absent.

        Args:
            record: Transient record; anything kept must be copied out
        """
        pass

    @abstractmethod
    def postprocess(self) -> None:
        """Aggregate results once processing of all records has concluded.

        This is the only step allowed to fail because some required
        record never arrived.
        """
        pass

    @abstractmethod
    def report(self, output: TextIO) -> None:
        """Write the human-readable report of the analysis to ``output``."""
        pass
