"""FASTA file reading.

Wraps ``pysam.FastxFile`` to stream the records of a (optionally gzip
compressed) FASTA file in file order. No index is built or required.
"""
from __future__ import annotations

import logging
import os
import weakref
from typing import Any, Iterator, Literal, Optional, Union

import sys
if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

import pysam

from PyRGE.core.exceptions import SourceReadError
from PyRGE.core.models import Record
from PyRGE.core.sequence import Sequence

logger = logging.getLogger(__name__)


class FastaReader:
    """Reader yielding the records of a FASTA file.

    Usable as a context manager; the underlying pysam handle is also closed
    when the reader is garbage collected.

    Raises:
        SourceReadError: If the file can't be opened or parsed
    """

    def __init__(self, path: Union[str, os.PathLike[str]]) -> None:
        self.path = str(path)
        try:
            self._fx = pysam.FastxFile(self.path)
        except (OSError, ValueError) as e:
            logger.error("Failed to open FASTA file '{}'".format(self.path))
            raise SourceReadError("failed to open FASTA file '{}': {}".format(self.path, e)) from e
        self._finalizer = weakref.finalize(self, self._safe_close, self._fx)
        self._closed = False

    @staticmethod
    def _safe_close(fx: Any) -> None:
        try:
            fx.close()
        except Exception:
            pass

    def close(self) -> None:
        """Close the FASTA file."""
        if self._finalizer.alive:
            self._finalizer()
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: Optional[type], exc: Optional[BaseException], tb: Optional[Any]) -> Literal[False]:
        self.close()
        return False

    def __iter__(self) -> Iterator[Record]:
        """Iterate over records in file order.

        Yields:
            Record with the sequence name (the first word of the header line)
            and its bases

        Raises:
            SourceReadError: If the file is closed, can't be parsed or holds
                no FASTA record
        """
        if self._closed:
            raise SourceReadError("FASTA file '{}' is already closed".format(self.path))

        nrecords = 0
        try:
            for entry in self._fx:
                nrecords += 1
                yield Record(entry.name, Sequence(entry.sequence or ""))
        except (OSError, ValueError) as e:
            logger.error("Failed to read FASTA file '{}'".format(self.path))
            raise SourceReadError("failed to read FASTA file '{}': {}".format(self.path, e)) from e

        # pysam skips everything up to the first header, so non-FASTA input
        # reads as an empty stream
        if nrecords == 0:
            logger.error("No FASTA record found in '{}'".format(self.path))
            raise SourceReadError("no FASTA record found in '{}'; is this a FASTA file?".format(self.path))
