"""
Core arithmetic, domain models, and contracts.

This package contains the arbitrary precision decimal engine and the
helpers built on it; it has no dependency on the puzzle programs.
"""
