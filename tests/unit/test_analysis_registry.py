"""Test the analysis registry and abstract base class."""

import pytest

from PyRGE.analysis import (
    ANALYSES, Analysis, NRegionDetectionAnalysis, PseudoAutosomalRegionAnalysis, get_analyses
)
from PyRGE.core.exceptions import UnknownAnalysis


class TestGetAnalyses:

    def test_all_analyses_in_registry_order(self):
        analyses = get_analyses()
        assert [type(a) for a in analyses] == [PseudoAutosomalRegionAnalysis, NRegionDetectionAnalysis]

    def test_fresh_instances(self):
        first, second = get_analyses(), get_analyses()
        assert all(a is not b for a, b in zip(first, second))

    def test_selection_keeps_registry_order(self):
        analyses = get_analyses(["ndetect", "par"])
        assert [a.name for a in analyses] == [
            "Pseudoautosomal Region Analysis", "N Region Detection"
        ]

    def test_single_selection(self):
        analyses = get_analyses(["ndetect"])
        assert len(analyses) == 1
        assert isinstance(analyses[0], NRegionDetectionAnalysis)

    def test_par_options(self):
        (analysis,) = get_analyses(["par"], chrx_name="X", chry_name="Y")
        assert analysis.chrx_name == "X"
        assert analysis.chry_name == "Y"

    def test_unknown_analysis(self):
        with pytest.raises(UnknownAnalysis, match="gc"):
            get_analyses(["par", "gc"])
        with pytest.raises(KeyError):
            get_analyses(["gc"])

    def test_registry_keys(self):
        assert tuple(ANALYSES) == ("par", "ndetect")


class TestAnalysisBase:

    def test_cannot_instantiate_abstract_analysis(self):
        with pytest.raises(TypeError):
            Analysis()

    def test_subclass_must_implement_lifecycle(self):
        class Incomplete(Analysis):
            name = "Incomplete"

            def process(self, record):
                pass

        with pytest.raises(TypeError):
            Incomplete()

    def test_concrete_subclass(self, make_record):
        class CountRecords(Analysis):
            name = "Count"

            def __init__(self):
                self.count = 0

            def process(self, record):
                self.count += 1

            def postprocess(self):
                pass

            def report(self, output):
                print(self.count, file=output)

        analysis = CountRecords()
        analysis.process(make_record("chr1", "A"))
        assert analysis.count == 1
