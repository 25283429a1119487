"""Coast FI calculator: threshold, timing and year-by-year projections."""

__version__ = "0.1.0"
