"""Piecewise-linear interpolation tables.

This module provides the immutable lookup tables every coefficient set of the
performance engine is expressed with:
- Scalar tables keyed by one or two independent variables
- Vector tables producing several outputs per sample
"""

from takeoffperf.interpolation.lookup_table import LookupTable, VectorLookupTable

__all__ = ["LookupTable", "VectorLookupTable"]
