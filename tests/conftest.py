"""Shared fixtures for PyRGE tests."""
import gzip

import pytest

from PyRGE.core.models import Record
from PyRGE.core.sequence import Sequence


def _format_fasta(records, width=60):
    lines = []
    for name, seq in records:
        lines.append(">" + name)
        for i in range(0, len(seq), width):
            lines.append(seq[i:i + width])
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_fasta(tmp_path):
    """Factory writing ``[(name, sequence), ...]`` to a FASTA file."""
    def _write(records, name="genome.fa", compress=False, width=60):
        path = tmp_path / name
        text = _format_fasta(records, width)
        if compress:
            with gzip.open(str(path), "wt") as f:
                f.write(text)
        else:
            path.write_text(text)
        return path
    return _write


@pytest.fixture
def make_record():
    """Factory creating a Record from a name and a base string."""
    def _make(name, bases):
        return Record(name, Sequence(bases))
    return _make
