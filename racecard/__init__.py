"""racecard - startlist extraction for trotting game pages."""

__version__ = "0.1.0"
