"""Numeric primitives shared by the simulation engine.

The time types live in :mod:`.physics.time` and the vector type in :mod:`.physics.vector`.
"""
