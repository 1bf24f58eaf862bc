"""Command line entry point: report rare phenotypes found on a plate."""

from __future__ import annotations

import argparse
import sys

from raredonor.loader import load_samples
from raredonor.search import RareDonorSearch

DEFAULT_RUN_FILE = "./run.txt"


def main(argv: list[str] | None = None) -> int:
    """Load a phenotype export and print the rare donor report."""
    parser = argparse.ArgumentParser(
        prog="raredonor",
        description="Sort a plate's phenotypes for rare donors.",
    )
    parser.add_argument(
        "run_file",
        nargs="?",
        default=DEFAULT_RUN_FILE,
        help="phenotype export of the run (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    print("Rare Donor Search\n")
    try:
        samples = load_samples(args.run_file)
    except OSError:
        print("Error opening file ")
        return 1
    RareDonorSearch(samples, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())