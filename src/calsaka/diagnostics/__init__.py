"""Diagnostics package.

- new_years_table, round_trip: always available, stdlib only
- new_year_scatter: requires the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["new_years_table", "round_trip", "new_year_scatter"]
