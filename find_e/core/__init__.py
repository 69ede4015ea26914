"""
Core domain models, mathematical primitives, and contracts.

This module contains the pure-computation building blocks of the E-series
search: normalization, series tables and result models.
"""
