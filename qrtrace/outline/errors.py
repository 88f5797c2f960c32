"""Outline engine errors.

Every failure is either a caller contract violation (bad grid, unknown style)
or an internal invariant breach (a contour walk that never closes). Nothing
here is retryable: the engine is a pure function of its input.
"""

from __future__ import annotations


class OutlineError(Exception):
    """Base class for all outline engine failures."""


class InvalidMaskError(OutlineError, ValueError):
    """The module grid is empty, ragged, non-square or has undefined cells."""


class UnknownStyleError(OutlineError, ValueError):
    """The requested edge style has no drawer."""


class ContourWalkError(OutlineError, RuntimeError):
    """A contour walk did not return to its start state within the bound."""
