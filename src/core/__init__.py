"""
Core arithmetic primitives.

Contains the arbitrary-precision decimal integer type and its algorithms,
independent of any I/O or external systems.
"""
