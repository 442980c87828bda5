"""Exceptions raised by the wall model."""


class WallSketchError(Exception):
    """Base class for wall model errors."""


class DegenerateSegmentError(WallSketchError, ValueError):
    """A segment would be shorter than the length tolerance."""


class WallNotFoundError(WallSketchError, KeyError):
    """A wall id is not part of the wall set."""
