"""Exception types raised by paracurve functions and combinators."""

from __future__ import annotations


class ParametricError(Exception):
    """Base class for errors raised by parametric functions."""


class OutOfDomainError(ParametricError, ValueError):
    """Raised when a function is evaluated outside its declared domain."""

    def __init__(self, t, domain, message=None):
        if message is None:
            message = 'parameter {} outside of domain [{}, {}]'.format(
                t, domain.start, domain.end)
        super().__init__(message)
        self.t = t
        self.domain = domain


class InvalidConstructionError(ParametricError, ValueError):
    """Raised when a function is built from parameters that cannot
    yield a well-defined domain."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


__all__ = [
    'ParametricError',
    'OutOfDomainError',
    'InvalidConstructionError',
]
