"""Chromosome name filtering with Unix shell-style patterns.

Filters come from ``-i/--include-chrom`` and ``-e/--exclude-chrom`` as an
ordered list of ``(to_include, patterns)`` tuples. Consecutive tuples of the
same kind are merged into one group and groups are applied in order: an
include group keeps only matching names, an exclude group accepts every name
it doesn't match and passes the matching ones on to the next group, where
they may be included again. A name surviving the final group is accepted if
that group was an include group.
"""
import fnmatch
from itertools import chain, groupby
from typing import List, Optional, Tuple

ChromFilter = List[Tuple[bool, List[str]]]


def is_target_chrom(name: str, filters: Optional[ChromFilter]) -> bool:
    """Check whether a sequence name passes the chromosome filters.

    Args:
        name: Sequence name
        filters: Ordered (to_include, patterns) tuples, or None to accept all

    Returns:
        True if the sequence should be analyzed
    """
    if not filters:
        return True

    to_include = True
    for to_include, group in groupby(filters, key=lambda f: f[0]):
        patterns = set(chain(*(f[1] for f in group)))
        matched = any(fnmatch.fnmatchcase(name, p) for p in patterns)
        if not matched:
            return not to_include
    return to_include
