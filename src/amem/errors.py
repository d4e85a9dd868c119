"""Exceptions raised by amem."""


class AmemError(Exception):
    """Base class for amem errors."""


class BuildError(AmemError):
    """An index rebuild failed; the previously committed index is untouched."""
