"""Analyses supported by the ``rge`` command line tool.

Each analysis is registered under a short key in ANALYSES. Keys are used by
the ``-a/--analysis`` option and analyses always run in registry order.
"""
from typing import Any, Dict, List, Optional, Sequence, Type

from PyRGE.core.exceptions import UnknownAnalysis
from .base import Analysis
from .ndetect import NRegionDetectionAnalysis
from .par import PseudoAutosomalRegionAnalysis

ANALYSES: Dict[str, Type[Analysis]] = {
    "par": PseudoAutosomalRegionAnalysis,
    "ndetect": NRegionDetectionAnalysis,
}


def get_analyses(names: Optional[Sequence[str]] = None, **par_options: Any) -> List[Analysis]:
    """Create fresh instances of the requested analyses.

    Args:
        names: Registry keys to run; every analysis if None
        **par_options: Keyword arguments for PseudoAutosomalRegionAnalysis
            (chrx_name, chry_name)

    Returns:
        Analyses in registry order

    Raises:
        UnknownAnalysis: If a name is not registered
    """
    if names is None:
        names = tuple(ANALYSES)

    unknown = [n for n in names if n not in ANALYSES]
    if unknown:
        raise UnknownAnalysis("unknown analysis: {} (choose from {})".format(
            ', '.join(unknown), ', '.join(ANALYSES)))

    analyses: List[Analysis] = []
    for key, analysis_class in ANALYSES.items():
        if key not in names:
            continue
        if analysis_class is PseudoAutosomalRegionAnalysis:
            analyses.append(PseudoAutosomalRegionAnalysis(**par_options))
        else:
            analyses.append(analysis_class())
    return analyses


__all__ = [
    "ANALYSES",
    "Analysis",
    "NRegionDetectionAnalysis",
    "PseudoAutosomalRegionAnalysis",
    "get_analyses",
]
