"""Exception hierarchy.

Every error derives from :class:`BSVolError` so callers can catch the
package's failures in one place.  The domain errors also derive from
``ValueError`` (and the reader error from ``OSError``) so code written
against the builtin exceptions keeps working.
"""

from __future__ import annotations

__all__ = [
    "BSVolError",
    "InputUnreadableError",
    "InsufficientDataError",
    "DegenerateSampleError",
    "InvalidOptionKindError",
    "DomainComputationError",
]


class BSVolError(Exception):
    """Base class for all bsvol errors."""


class InputUnreadableError(BSVolError, OSError):
    """A price series source could not be opened, read or parsed."""


class InsufficientDataError(BSVolError, ValueError):
    """Fewer than two prices, so not a single log-return exists."""


class DegenerateSampleError(BSVolError, ValueError):
    """Exactly two prices: one log-return and zero degrees of freedom."""


class InvalidOptionKindError(BSVolError, ValueError):
    """Option kind outside {call, put}."""


class DomainComputationError(BSVolError, ValueError):
    """Inputs outside the domain of the formulas (log/sqrt/division)."""
