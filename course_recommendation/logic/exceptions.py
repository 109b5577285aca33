"""Errors raised by the course scorers."""


class ScoringError(Exception):
    """The primary scorer produced an unusable score table."""
