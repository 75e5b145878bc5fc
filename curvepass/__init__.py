"""Deterministic passwords from a master key and an application name, via SHA3-512 and curve intersections."""

__version__ = "0.1.0"