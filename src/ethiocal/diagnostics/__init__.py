"""Diagnostics package.

- pretty_month, new_years_table, round_trip: standard library only
- new_year_drift: needs the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "new_year_drift"]
