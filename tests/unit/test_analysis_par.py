"""Test pseudoautosomal region scanning."""

import io

import pytest

from PyRGE.analysis.par import (
    PseudoAutosomalRegionAnalysis, find_divergence, scan_for_pseudoautosomal_region, skip_masked
)
from PyRGE.core.exceptions import MissingChromosome, OutOfRange
from PyRGE.core.models import PairedPseudoAutosomalScanResult, ScanDirection
from PyRGE.core.position import Position
from PyRGE.core.sequence import Sequence

FORWARD = ScanDirection.FORWARD
REVERSE = ScanDirection.REVERSE

# X: 1-3 N, 4-11 shared, 12-15 X only, 16-23 shared, 24-25 N
CHR_X = "NNN" + "ACGTACGT" + "GGGG" + "TTTTCCCC" + "NN"
# Y: 1-2 N, 3-10 shared, 11-14 Y only, 15-22 shared, 23-26 N
CHR_Y = "NN" + "ACGTACGT" + "AAAA" + "TTTTCCCC" + "NNNN"


def _fields(result):
    return (
        int(result.start_position),
        int(result.ns_until_position),
        result.start_to_ns_len,
        int(result.same_until_position),
        result.ns_to_same_len,
    )


class TestSkipMasked:
    """Test the independent N-skip walk."""

    def test_forward(self):
        assert skip_masked(Sequence("NNNNACGT"), Position(1), FORWARD) == 5
        assert skip_masked(Sequence("NNACGTAA"), Position(1), FORWARD) == 3

    def test_reverse(self):
        assert skip_masked(Sequence("ACGTNnN"), Position(7), REVERSE) == 4

    def test_no_masked_cap(self):
        assert skip_masked(Sequence("ACGT"), Position(1), FORWARD) == 1
        assert skip_masked(Sequence("ACGT"), Position(4), REVERSE) == 4

    def test_starting_mid_sequence(self):
        assert skip_masked(Sequence("ANNNA"), Position(2), FORWARD) == 5
        assert skip_masked(Sequence("ANNNA"), Position(4), REVERSE) == 1

    @pytest.mark.parametrize("direction", [FORWARD, REVERSE])
    def test_all_masked_is_out_of_range(self, direction):
        sequence = Sequence("NNnnNN")
        start = Position(1) if direction is FORWARD else sequence.last_position
        with pytest.raises(OutOfRange):
            skip_masked(sequence, start, direction)


class TestFindDivergence:
    """Test the lockstep comparison."""

    def test_forward_from_different_offsets(self):
        x, y = find_divergence(Sequence("NNNNACGTC"), Position(5), Sequence("NNACGTAA"), Position(3), FORWARD)
        assert (x, y) == (9, 7)

    def test_reverse(self):
        x, y = find_divergence(Sequence("GACGT"), Position(5), Sequence("TTACGT"), Position(6), REVERSE)
        assert (x, y) == (1, 2)

    def test_immediate_mismatch(self):
        x, y = find_divergence(Sequence("A"), Position(1), Sequence("C"), Position(1), FORWARD)
        assert (x, y) == (1, 1)

    def test_comparison_is_case_sensitive(self):
        x, y = find_divergence(Sequence("ACGTacgt"), Position(1), Sequence("ACGTACGT"), Position(1), FORWARD)
        assert (x, y) == (5, 5)

    def test_masked_bases_are_compared_as_bases(self):
        x, y = find_divergence(Sequence("ACNNA"), Position(1), Sequence("ACNNT"), Position(1), FORWARD)
        assert (x, y) == (5, 5)

    @pytest.mark.parametrize("direction", [FORWARD, REVERSE])
    def test_never_diverging_is_out_of_range(self, direction):
        x = Sequence("ACGTACGT")
        start = Position(1) if direction is FORWARD else x.last_position
        with pytest.raises(OutOfRange):
            find_divergence(x, start, Sequence("ACGTACGT"), start, direction)

    def test_shorter_chromosome_running_out_is_out_of_range(self):
        with pytest.raises(OutOfRange):
            find_divergence(Sequence("NNNNACGT"), Position(5), Sequence("NNACGTAA"), Position(3), FORWARD)


class TestScanForPseudoautosomalRegion:
    """Test the full directional scan."""

    def test_forward(self):
        result = scan_for_pseudoautosomal_region(Sequence(CHR_X), Sequence(CHR_Y), FORWARD)

        assert _fields(result.chr_x) == (1, 4, 3, 12, 8)
        assert _fields(result.chr_y) == (1, 3, 2, 11, 8)

    def test_reverse(self):
        result = scan_for_pseudoautosomal_region(Sequence(CHR_X), Sequence(CHR_Y), REVERSE)

        assert _fields(result.chr_x) == (25, 23, 2, 15, 8)
        assert _fields(result.chr_y) == (26, 22, 4, 14, 8)

    def test_n_skip_is_not_synchronized(self):
        result = scan_for_pseudoautosomal_region(Sequence("NNNNACGTC"), Sequence("NNACGTAA"), FORWARD)

        assert _fields(result.chr_x) == (1, 5, 4, 9, 4)
        assert _fields(result.chr_y) == (1, 3, 2, 7, 4)

    def test_example_without_divergence_is_out_of_range(self):
        with pytest.raises(OutOfRange):
            scan_for_pseudoautosomal_region(Sequence("NNNNACGT"), Sequence("NNACGTAA"), FORWARD)

    @pytest.mark.parametrize("direction", [FORWARD, REVERSE])
    def test_identical_chromosomes_are_out_of_range(self, direction):
        with pytest.raises(OutOfRange):
            scan_for_pseudoautosomal_region(Sequence("ACGTACGT"), Sequence("ACGTACGT"), direction)

    @pytest.mark.parametrize("direction", [FORWARD, REVERSE])
    def test_all_masked_chromosome_is_out_of_range(self, direction):
        with pytest.raises(OutOfRange):
            scan_for_pseudoautosomal_region(Sequence("NNNN"), Sequence("ACGT"), direction)
        with pytest.raises(OutOfRange):
            scan_for_pseudoautosomal_region(Sequence("ACGT"), Sequence("nnnn"), direction)

    def test_empty_chromosome_is_out_of_range(self):
        with pytest.raises(OutOfRange):
            scan_for_pseudoautosomal_region(Sequence(""), Sequence("ACGT"), FORWARD)

    @pytest.mark.parametrize("direction", [FORWARD, REVERSE])
    def test_results_are_consistent(self, direction):
        chr_x, chr_y = Sequence(CHR_X), Sequence(CHR_Y)
        result = scan_for_pseudoautosomal_region(chr_x, chr_y, direction)

        for sequence, chrom in ((chr_x, result.chr_x), (chr_y, result.chr_y)):
            assert chrom.ns_to_same_len >= 0
            assert chrom.start_to_ns_len >= 0
            assert 1 <= int(chrom.same_until_position) <= len(sequence)
            assert 1 <= int(chrom.ns_until_position) <= len(sequence)


class TestPseudoAutosomalRegionAnalysis:
    """Test the analysis lifecycle."""

    def test_name(self):
        assert PseudoAutosomalRegionAnalysis.name == "Pseudoautosomal Region Analysis"

    def test_captures_only_exact_names(self, make_record):
        analysis = PseudoAutosomalRegionAnalysis()
        analysis.process(make_record("chr1", "ACGT"))
        analysis.process(make_record("chrx", "ACGT"))
        analysis.process(make_record("chrX_random", "ACGT"))
        assert analysis.chr_x is None
        assert analysis.chr_y is None

        analysis.process(make_record("chrX", CHR_X))
        analysis.process(make_record("chrY", CHR_Y))
        assert analysis.chr_x == Sequence(CHR_X)
        assert analysis.chr_y == Sequence(CHR_Y)

    def test_last_record_wins(self, make_record):
        analysis = PseudoAutosomalRegionAnalysis()
        analysis.process(make_record("chrX", "AAAA"))
        analysis.process(make_record("chrX", "CCCC"))
        assert analysis.chr_x == Sequence("CCCC")

    def test_custom_names(self, make_record):
        analysis = PseudoAutosomalRegionAnalysis(chrx_name="X", chry_name="Y")
        analysis.process(make_record("chrX", "AAAA"))
        analysis.process(make_record("X", CHR_X))
        analysis.process(make_record("Y", CHR_Y))
        analysis.postprocess()
        assert _fields(analysis.forward_results.chr_x) == (1, 4, 3, 12, 8)

    def test_missing_y(self, make_record):
        analysis = PseudoAutosomalRegionAnalysis()
        analysis.process(make_record("chrX", CHR_X))
        with pytest.raises(MissingChromosome, match="chromosome Y"):
            analysis.postprocess()
        assert analysis.forward_results is None

    def test_missing_both_reports_x_first(self):
        analysis = PseudoAutosomalRegionAnalysis()
        with pytest.raises(MissingChromosome, match="chromosome X"):
            analysis.postprocess()

    def test_missing_chromosome_is_lookup_error(self):
        with pytest.raises(LookupError):
            PseudoAutosomalRegionAnalysis().postprocess()

    def test_postprocess_runs_both_directions(self, make_record):
        analysis = PseudoAutosomalRegionAnalysis()
        analysis.process(make_record("chrX", CHR_X))
        analysis.process(make_record("chrY", CHR_Y))
        analysis.postprocess()

        assert isinstance(analysis.forward_results, PairedPseudoAutosomalScanResult)
        assert isinstance(analysis.reverse_results, PairedPseudoAutosomalScanResult)
        assert _fields(analysis.forward_results.chr_y) == (1, 3, 2, 11, 8)
        assert _fields(analysis.reverse_results.chr_y) == (26, 22, 4, 14, 8)

    def test_report(self, make_record):
        analysis = PseudoAutosomalRegionAnalysis()
        analysis.process(make_record("chrX", CHR_X))
        analysis.process(make_record("chrY", CHR_Y))
        analysis.postprocess()

        output = io.StringIO()
        analysis.report(output)

        def line(start, ns_until, ns_len, same_until, same_len):
            return "  Start: {}, Ns until: {} (Len: {:>6}), Same until: {} (Len: {:>6})".format(
                start, ns_until, ns_len, same_until, same_len)

        assert output.getvalue().splitlines() == [
            "---",
            "Pseudoautosomal Region 1",
            "Chromosome X:",
            line(1, 4, 3, 12, 8),
            "Chromosome Y:",
            line(1, 3, 2, 11, 8),
            "",
            "",
            "---",
            "Pseudoautosomal Region 2",
            "Chromosome X:",
            line(25, 23, 2, 15, 8),
            "Chromosome Y:",
            line(26, 22, 4, 14, 8),
            "",
        ]
