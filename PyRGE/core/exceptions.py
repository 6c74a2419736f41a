"""Exceptions for PyRGE reference genome analyses.

Every error raised by PyRGE derives from RGEError so that the command line
entry point can report it and exit, and also from the builtin exception that
describes it best so callers can catch it the usual way.
"""


class RGEError(Exception):
    """Base class of all PyRGE errors."""
    pass


class InvalidPosition(RGEError, ValueError):
    """Exception raised when a 1-based position is zero, negative or addresses
    a base outside of a sequence.

    Positions produced from well-formed FASTA records never trigger this; it
    signals an arithmetic error in a caller.
    """
    pass


class OutOfRange(RGEError, IndexError):
    """Exception raised when a scan pointer walks off either end of a sequence.

    During pseudoautosomal region scanning this means the chromosome is masked
    from end to end, or that chromosomes X and Y never diverge before one of
    them runs out of bases.
    """
    pass


class MissingChromosome(RGEError, LookupError):
    """Exception raised when a chromosome required by an analysis never
    appeared in the input records."""
    pass


class SourceReadError(RGEError, IOError):
    """Exception raised when the input FASTA file can't be opened or parsed."""
    pass


class UnknownAnalysis(RGEError, KeyError):
    """Exception raised when an analysis name is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return Exception.__str__(self)
