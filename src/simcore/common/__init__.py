"""Logging, configuration & exceptions shared by the :mod:`.physics` value types."""
