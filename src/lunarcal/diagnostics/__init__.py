"""Diagnostics package.

Light-weight command line checks over the lunar engine.
"""

__all__ = ["pretty_month", "round_trip"]
