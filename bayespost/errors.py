"""Exceptions raised by strict-mode evaluation."""

from __future__ import annotations


class DomainError(ValueError):
    """Raised when ``strict=True`` and an input lies outside a formula's domain.

    Without ``strict`` the same inputs produce NaN or infinite results that
    propagate to the caller unchanged.
    """
