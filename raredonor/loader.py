"""Reading a plate's phenotype export and naming well positions."""

from __future__ import annotations

import os
from collections.abc import Iterable
from itertools import islice

from raredonor.sample import Sample, parse_sample

HEADER_LINES = 8
PLATE_SAMPLES = 93
PLATE_ROWS = "ABCDEFGH"


def plate_location(index: int) -> str:
    """Return the well name (row letter and column number) of a plate index."""
    if index < 0:
        raise ValueError(f"plate index must not be negative: {index}")
    row = PLATE_ROWS[index % len(PLATE_ROWS)]
    column = index // len(PLATE_ROWS) + 1
    return f"{row}{column}"


def read_samples(lines: Iterable[str]) -> list[Sample]:
    """Skip the export header and parse the plate's sample lines.

    A plate always yields PLATE_SAMPLES samples; lines missing at the end
    of the input count as empty lines.
    """
    it = iter(lines)
    for _ in islice(it, HEADER_LINES):
        pass
    return [parse_sample(next(it, "")) for _ in range(PLATE_SAMPLES)]


def load_samples(path: str | os.PathLike[str]) -> list[Sample]:
    """Read the samples of a phenotype export file."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return read_samples(handle)