# raredonor

Reads the phenotype export of a 96-well genotyping run and lists the donors
whose antigen profiles count as rare. Each donor is listed with its well
position on the plate and its donation identification number (DIN).

## Installing

```
pip install .
```

## The input file

The export is a text file. Its first eight lines are a header and are skipped
without being read. The next 93 lines are the samples, one per well, starting
at well D1 (the first three wells hold controls). If the file ends early, the
missing sample lines are treated as empty.

Each sample line holds the DIN followed by 37 antigen results, separated by
semicolons, with `+` for positive and `0` for negative. The columns, in order,
are:

C, E, c, e, CW, V, hrs, VS, hrB, K, k, Kpa, Kpb, Jsa, Jsb, Jka, Jkb, Fya,
Fyb, M, N, S, s, U, Mia, Dia, Dib, Doa, Dob, Hy, Joa, Coa, Cob, Yta, Ytb,
Lua, Lub.

Missing trailing columns are read as empty; anything after the last column
belongs to `Lub`.

## Running

```
raredonor run.txt
```

Without an argument the command reads `./run.txt`. The report goes to
standard output, headed `Rare Donor Search`. If the file cannot be opened the
command prints `Error opening file` and exits with status 1.

The searches run in this order:

1. U- and U variants (anything not typed U+)
2. Jsb-
3. Kpb-
4. Do(a+b-) and Joa-
5. k-
6. Jka- and Jkb-
7. Yta-
8. Lub-
9. C- E- K- Fy(a-b-), with ` Qualifies` after donors that are also
   (S- or s-) and (Jka- or Jkb-)
10. C- e- K- Fy(a-b-)
11. C- E- K- with (Fya- or Fyb-), (Jka- or Jkb-) and (S- or s-)
12. C- c+ E+ e-
13. C+ c- E- e+
14. C+ c- E+ e-

A donor listed by one search is skipped by every later search. Search 11 is
the exception in one direction only: it also skips donors already listed, but
does not mark the donors it lists, so they can still appear in searches 12 to
14. Searches 9 to 14 number their lines with one counter that runs on from
search to search. A search that finds nothing prints `NOT FOUND`.

## Using it from Python

```python
from raredonor.loader import load_samples
from raredonor.search import run_search

samples = load_samples("run.txt")
print(run_search(samples))
```

- `raredonor.loader.load_samples(path)` reads an export file;
  `read_samples(lines)` does the same from any iterable of lines.
- `raredonor.loader.plate_location(index)` turns a zero-based well index into
  a position such as `D1`; negative indexes raise `ValueError`.
- `raredonor.sample.parse_sample(line)` parses one sample line into a
  `Sample`, which has `din`, `antigens`, a `printed` flag, item access by
  antigen name (`sample["Fya"]`, unknown names raise `KeyError`) and the
  `positive(antigen)` and `negative(antigen)` tests.
- `raredonor.search.RareDonorSearch(samples, out)` writes the report to a
  text stream; each search is a method that returns the samples it listed,
  and `run()` runs them all in order. `run_search(samples)` returns the whole
  report as a string.

## What it does not do

- It does not read the export header. `FileHeader` in `raredonor.sample`
  describes one, but nothing fills it in.
- It does not know the donors' RhD type. Profiles marked
  *Needs to be RhD negative* must still be checked by hand.
- It reports only; nothing is stored or sent anywhere.