"""Search genotyping runs for donors with rare blood group phenotypes."""

__version__ = "0.1.0"