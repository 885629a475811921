"""Coefficient tables of the takeoff performance dataset.

Each module holds one family of immutable tables; per-configuration tables
are ``PerConfiguration`` records. Tuples of factors are ordered as the
formulas that consume them read them.
"""
