"""Diagnostics package.

- pretty_month, easter_table, season_check: always available
- easter_scatter: optional (requires the diagnostics extra: numpy, matplotlib)
"""

__all__ = ["pretty_month", "easter_table", "easter_scatter", "season_check"]
