"""Diagnostics package.

Light-weight checks and tables built on the public API. `leap_months --plot`
needs the optional `amlich[diagnostics]` extras (numpy, matplotlib).
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_months"]
