"""Donor samples and the phenotype line format they are read from."""

from __future__ import annotations

from dataclasses import dataclass, field

#: Antigen columns of a phenotype line, in file order, after the DIN column.
ANTIGENS: tuple[str, ...] = (
    "C", "E", "c", "e", "CW", "V", "hrs", "VS", "hrB",
    "K", "k", "Kpa", "Kpb", "Jsa", "Jsb", "Jka", "Jkb",
    "Fya", "Fyb", "M", "N", "S", "s", "U", "Mia",
    "Dia", "Dib", "Doa", "Dob", "Hy", "Joa", "Coa", "Cob",
    "Yta", "Ytb", "Lua", "Lub",
)

FIELD_SEPARATOR = ";"
POSITIVE = "+"
NEGATIVE = "0"


@dataclass
class FileHeader:
    """Descriptive header of a phenotype export."""

    batch_name: str = ""
    date: str = ""
    user_name: str = ""
    software_version: str = ""


@dataclass
class Sample:
    """One donor: its DIN, antigen results and whether it has been reported."""

    din: str
    antigens: dict[str, str] = field(default_factory=dict)
    printed: bool = False

    def __getitem__(self, antigen: str) -> str:
        if antigen not in ANTIGENS:
            raise KeyError(f"unknown antigen {antigen!r}")
        return self.antigens.get(antigen, "")

    def positive(self, antigen: str) -> bool:
        """True if the antigen was typed positive."""
        return self[antigen] == POSITIVE

    def negative(self, antigen: str) -> bool:
        """True if the antigen was typed negative."""
        return self[antigen] == NEGATIVE


def parse_sample(line: str) -> Sample:
    """Parse one ';'-separated phenotype line into a Sample.

    Missing trailing columns are empty; anything after the last antigen
    column, separators included, belongs to that last column.
    """
    line = line.split("\n", 1)[0]
    parts = line.split(FIELD_SEPARATOR, len(ANTIGENS))
    parts.extend([""] * (len(ANTIGENS) + 1 - len(parts)))
    din, *values = parts
    return Sample(din=din, antigens=dict(zip(ANTIGENS, values)))