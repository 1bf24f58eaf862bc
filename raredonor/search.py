"""Searching a plate's samples for the rare phenotypes that need follow-up."""

from __future__ import annotations

import io
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from raredonor.loader import plate_location
from raredonor.sample import POSITIVE, Sample

#: Sample lines start at this well; the first wells hold the controls.
WELL_OFFSET = 3
NOT_FOUND = "NOT FOUND"

RH_FY_NULL_HEADER = (
    "C- E- K- Fy(a-b-)   *****Needs to be RhD negative*****   Samples that are "
    "D+ and qualify for C -E- K- (Fya- or Fyb-) and (Jka- or Jkb-) and (S- or s-) "
    "will be indicated "
)

Predicate = Callable[[Sample], bool]
LineFormat = Callable[[str, Sample], str]


def _either_negative(sample: Sample, first: str, second: str) -> bool:
    return sample.negative(first) or sample.negative(second)


class RareDonorSearch:
    """Runs the rare phenotype searches over one plate, writing a report.

    A sample reported by one search is not reported again by later ones,
    except by the partial-match search, which does not mark what it finds.
    The numbered searches share one running counter.
    """

    def __init__(self, samples: Iterable[Sample], out: TextIO | None = None) -> None:
        self.samples = list(samples)
        self.out = out if out is not None else sys.stdout
        self.count = 1

    def _write(self, text: str) -> None:
        self.out.write(text)

    def _number(self) -> int:
        number = self.count
        self.count += 1
        return number

    def _matches(self, predicate: Predicate, mark: bool) -> Iterator[tuple[str, Sample]]:
        for index, sample in enumerate(self.samples):
            if not sample.printed and predicate(sample):
                if mark:
                    sample.printed = True
                yield plate_location(index + WELL_OFFSET), sample

    def _report(
        self,
        header: str,
        predicate: Predicate,
        line: LineFormat,
        not_found: str,
        mark: bool = True,
    ) -> list[Sample]:
        self._write(header)
        found = []
        for location, sample in self._matches(predicate, mark):
            found.append(sample)
            self._write(line(location, sample))
        if not found:
            self._write(not_found)
        return found

    def _numbered(self, location: str, sample: Sample) -> str:
        return f"{self._number()}.  {location} {sample.din}\n"

    def u_variants(self) -> list[Sample]:
        """U- and U variant samples: anything not typed U+."""
        return self._report(
            "U- and U variants\n",
            lambda s: s["U"] != POSITIVE,
            lambda loc, s: f"{loc}  {s.din}\n",
            f"\n{NOT_FOUND}\n",
        )

    def jsb_negative(self) -> list[Sample]:
        """Jsb- samples."""
        return self._report(
            "Jsb-",
            lambda s: s.negative("Jsb"),
            lambda loc, s: f"\n{loc}  {s.din}\n",
            f"\n{NOT_FOUND}\n",
        )

    def kpb_negative(self) -> list[Sample]:
        """Kpb- samples."""
        return self._report(
            "Kpb-",
            lambda s: s.negative("Kpb"),
            lambda loc, s: f"\n{loc}    {s.din}\n",
            f"\n{NOT_FOUND}\n",
        )

    def doa_pos_dob_neg_joa_neg(self) -> list[Sample]:
        """Do(a+b-) Joa- samples."""
        return self._report(
            "Do(a+b-) and Joa-\n",
            lambda s: s.positive("Doa") and s.negative("Dob") and s.negative("Joa"),
            lambda loc, s: f"\n{loc}    {s.din}\n",
            f"{NOT_FOUND}\n",
        )

    def k_negative(self) -> list[Sample]:
        """k- (Cellano negative) samples."""
        return self._report(
            "k-",
            lambda s: s.negative("k"),
            lambda loc, s: f"{loc}\n    {s.din}\n",
            f"\n{NOT_FOUND}\n",
        )

    def jka_neg_jkb_neg(self) -> list[Sample]:
        """Jk(a-b-) samples."""
        return self._report(
            "Jka-  and Jkb- ",
            lambda s: s.negative("Jka") and s.negative("Jkb"),
            lambda loc, s: f"{loc}\n    {s.din}\n",
            f"\n{NOT_FOUND}\n",
        )

    def yta_negative(self) -> list[Sample]:
        """Yta- samples."""
        return self._report(
            "Yta-",
            lambda s: s.negative("Yta"),
            lambda loc, s: f"{loc}\n    {s.din}\n",
            f"\n{NOT_FOUND}\n",
        )

    def lub_negative(self) -> list[Sample]:
        """Lub- samples."""
        return self._report(
            "Lub-",
            lambda s: s.negative("Lub"),
            lambda loc, s: f"{loc}    {s.din}\n",
            f"\n{NOT_FOUND}\n",
        )

    def rh_c_e_k_fy_null(self) -> list[Sample]:
        """C- E- K- Fy(a-b-) samples, flagging those that also qualify as partial matches."""

        def line(location: str, sample: Sample) -> str:
            text = f"{self._number()}.    {location} {sample.din}"
            if _either_negative(sample, "S", "s") and _either_negative(sample, "Jka", "Jkb"):
                return text + " Qualifies\n"
            return text + "\n"

        return self._report(
            RH_FY_NULL_HEADER + "\n",
            lambda s: all(s.negative(a) for a in ("C", "E", "K", "Fya", "Fyb")),
            line,
            f" {NOT_FOUND}\n",
        )

    def rh_c_little_e_k_fy_null(self) -> list[Sample]:
        """C- e- K- Fy(a-b-) samples."""
        return self._report(
            "C- e- K- Fy(a-b-)\n",
            lambda s: all(s.negative(a) for a in ("C", "e", "K", "Fya", "Fyb")),
            self._numbered,
            f" {NOT_FOUND}\n",
        )

    def rh_c_e_k_partial(self) -> list[Sample]:
        """C- E- K- samples negative for one of each of Fy, Jk and Ss; not marked as reported."""

        def line(location: str, sample: Sample) -> str:
            text = f"{self._number()}.  {location} {sample.din}"
            return text + ("    repeat\n" if sample.printed else "\n")

        return self._report(
            "C -E- K- (Fya- or Fyb-) and (Jka- or Jkb-) and (S- or s-) \n",
            lambda s: (
                all(s.negative(a) for a in ("C", "E", "K"))
                and _either_negative(s, "Fya", "Fyb")
                and _either_negative(s, "Jka", "Jkb")
                and _either_negative(s, "S", "s")
            ),
            line,
            f" {NOT_FOUND}\n",
            mark=False,
        )

    def c_neg_c_pos_e_pos_e_neg(self) -> list[Sample]:
        """C- c+ E+ e- samples."""
        return self._report(
            "C- c+ E+ e-    *****Needs to be RhD negative*****\n",
            lambda s: s.negative("C") and s.positive("c") and s.positive("E") and s.negative("e"),
            self._numbered,
            f" {NOT_FOUND}\n",
        )

    def c_pos_c_neg_e_neg_e_pos(self) -> list[Sample]:
        """C+ c- E- e+ samples."""
        return self._report(
            "C+ c- E- e+    *****Needs to be RhD negative*****\n",
            lambda s: s.positive("C") and s.negative("c") and s.negative("E") and s.positive("e"),
            self._numbered,
            f" {NOT_FOUND}\n",
        )

    def c_pos_c_neg_e_pos_e_neg(self) -> list[Sample]:
        """C+ c- E+ e- samples."""
        return self._report(
            "C+ c- E+ e-\n",
            lambda s: s.positive("C") and s.negative("c") and s.positive("E") and s.negative("e"),
            self._numbered,
            f" {NOT_FOUND}\n",
        )

    def run(self) -> None:
        """Run every search in report order, separated by blank lines."""
        searches = (
            self.u_variants,
            self.jsb_negative,
            self.kpb_negative,
            self.doa_pos_dob_neg_joa_neg,
            self.k_negative,
            self.jka_neg_jkb_neg,
            self.yta_negative,
            self.lub_negative,
            self.rh_c_e_k_fy_null,
            self.rh_c_little_e_k_fy_null,
            self.rh_c_e_k_partial,
            self.c_neg_c_pos_e_pos_e_neg,
            self.c_pos_c_neg_e_neg_e_pos,
            self.c_pos_c_neg_e_pos_e_neg,
        )
        for position, search in enumerate(searches):
            if position:
                self._write("\n")
            search()


def run_search(samples: Iterable[Sample]) -> str:
    """Run all searches over the samples and return the report text."""
    buffer = io.StringIO()
    RareDonorSearch(samples, buffer).run()
    return buffer.getvalue()