## core parametric function interfaces for paracurve
## Copyright (c) 2024 paracurve contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""parametric function interfaces for **paracurve**

===============
Overview
===============

Every parametric function has a ``Domain``, the closed interval of
parameter values it may be evaluated at, and an ``evaluate(t)``
method.  ``ParametricFunction1D`` instances map a parameter to a
``float``, ``ParametricFunction2D`` instances map it to a
``paracurve.geom.Point``.

The base class does the bookkeeping common to every function: the
parameter is checked to be a number, and to lie inside ``domain()``,
before the subclass hook ``_evaluate(t)`` is called.  A parameter
outside the domain raises ``OutOfDomainError``; nothing is ever
silently clamped.

plain callables
---------------

Any callable ``t -> point`` (or ``t -> float``) can stand in for a
parametric function by wrapping it in ``Function2D`` (or
``Function1D``).  A bare callable carries no domain of its own, so
unless one is supplied the adapter assumes the unit interval
``[0, 1]``.  The combinators in ``paracurve.combine`` perform this
wrapping automatically through ``as_function2d()`` and
``as_function1d()``.

"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from math import isfinite
from typing import Callable, Iterator, List, Optional, Sequence, Union

from paracurve.errors import InvalidConstructionError, OutOfDomainError
from paracurve.geom import Point, isgoodnum, point


@dataclass(frozen=True)
class Domain:
    """Closed parameter interval ``[start, end]`` with ``start <= end``."""

    start: float
    end: float

    def __post_init__(self):
        if not (isgoodnum(self.start) and isgoodnum(self.end)):
            raise ValueError('bad bounds passed to Domain(): {}, {}'.format(
                self.start, self.end))
        # also rejects NaN bounds
        if not self.start <= self.end:
            raise InvalidConstructionError(
                'domain start {} is after end {}'.format(self.start, self.end))

    def __iter__(self) -> Iterator[float]:
        yield self.start
        yield self.end

    @property
    def length(self) -> float:
        return self.end - self.start

    def isfinite(self) -> bool:
        return isfinite(self.start) and isfinite(self.end)

    def contains(self, t) -> bool:
        """Return ``True`` if ``t`` lies in the closed interval."""

        return self.start <= t <= self.end

    def lerp(self, u: float) -> float:
        """Map ``u`` in ``[0, 1]`` linearly onto the interval.

        The endpoints map exactly onto ``start`` and ``end``, and the
        result never leaves the interval through rounding.
        """

        v = (1.0 - u) * self.start + u * self.end
        return min(max(v, self.start), self.end)

    def intersect(self, other: Domain) -> Optional[Domain]:
        """Return the overlap with ``other``, or ``None`` if there is none."""

        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if start > end:
            return None
        return Domain(start, end)

    def parameters(self, n: int) -> List[float]:
        """Return ``n + 1`` equally spaced parameters spanning the interval."""

        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError('bad sample count passed to parameters(): {}'.format(n))
        if not self.isfinite():
            raise ValueError('cannot sample an unbounded domain: {}'.format(self))
        return [self.lerp(i / n) for i in range(n + 1)]


UNIT = Domain(0.0, 1.0)


def as_domain(d) -> Domain:
    """Value-safe domain creation from a ``Domain`` or a ``(start, end)`` pair"""
    if isinstance(d, Domain):
        return d
    if isinstance(d, (tuple, list)) and len(d) == 2:
        return Domain(d[0], d[1])
    raise ValueError('bad domain: {}'.format(d))


class ParametricFunction(ABC):
    """Common base of 1D and 2D parametric functions."""

    _domain = UNIT

    def domain(self) -> Domain:
        """Return the closed interval of valid parameters."""
        return self._domain

    def evaluate(self, t):
        """Return the value of the function at parameter ``t``.

        Raises ``ValueError`` if ``t`` is not a number and
        ``OutOfDomainError`` if it lies outside ``domain()``.
        """
        if not isgoodnum(t):
            raise ValueError('bad parameter passed to evaluate(): {}'.format(t))
        dom = self.domain()
        if not dom.contains(t):
            raise OutOfDomainError(t, dom)
        return self._evaluate(t)

    def __call__(self, t):
        return self.evaluate(t)

    @abstractmethod
    def _evaluate(self, t):
        """Compute the value at ``t``, already known to be in the domain."""

    def linspace(self, n: int) -> list:
        """Return ``n + 1`` values equally spaced in parameter over the
        whole domain, endpoints included."""
        return [self.evaluate(t) for t in self.domain().parameters(n)]

    def random_parameter(self, rng: Optional[random.Random] = None) -> float:
        dom = self.domain()
        if not dom.isfinite():
            raise ValueError('cannot draw from an unbounded domain: {}'.format(dom))
        source = random if rng is None else rng
        return dom.lerp(source.random())


class ParametricFunction1D(ParametricFunction):
    """A parametric function ``t -> float``."""


class ParametricFunction2D(ParametricFunction):
    """A parametric function ``t -> Point``, the primary abstraction of
    paracurve."""

    def start_point(self) -> Point:
        """ the first point on the function"""
        return self.evaluate(self.domain().start)

    def end_point(self) -> Point:
        """ the last point on the function"""
        return self.evaluate(self.domain().end)

    def random_point(self, rng: Optional[random.Random] = None) -> Point:
        """Return a point at a uniformly drawn parameter."""
        return self.evaluate(self.random_parameter(rng))

    def random_points(self, n: int, rng: Optional[random.Random] = None) -> List[Point]:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValueError('bad count passed to random_points(): {}'.format(n))
        return [self.random_point(rng) for _ in range(n)]


class Function1D(ParametricFunction1D):
    """Adapter pairing a plain ``t -> float`` callable with a domain."""

    def __init__(self, fn: Callable[[float], float], domain=UNIT):
        if not callable(fn):
            raise ValueError('bad (non-callable) function: {}'.format(fn))
        self._fn = fn
        self._domain = as_domain(domain)

    def __repr__(self):
        return 'Function1D({!r}, {})'.format(self._fn, self._domain)

    def _evaluate(self, t):
        v = self._fn(t)
        if not isgoodnum(v):
            raise ValueError('function returned a non-number: {}'.format(v))
        return float(v)


class Function2D(ParametricFunction2D):
    """Adapter pairing a plain ``t -> point`` callable with a domain.

    The callable may return a ``Point`` or an ``(x, y)`` pair.
    """

    def __init__(self, fn: Callable[[float], Union[Point, Sequence[float]]], domain=UNIT):
        if not callable(fn):
            raise ValueError('bad (non-callable) function: {}'.format(fn))
        self._fn = fn
        self._domain = as_domain(domain)

    def __repr__(self):
        return 'Function2D({!r}, {})'.format(self._fn, self._domain)

    def _evaluate(self, t):
        return point(self._fn(t))


def as_function2d(f) -> ParametricFunction2D:
    """Return ``f`` if it is a 2D parametric function, or wrap a plain
    callable in ``Function2D``."""
    if isinstance(f, ParametricFunction2D):
        return f
    if isinstance(f, ParametricFunction):
        raise ValueError('expected a 2D parametric function, got {!r}'.format(f))
    if callable(f):
        return Function2D(f)
    raise ValueError('bad thing used as a 2D parametric function: {}'.format(f))


def as_function1d(f) -> ParametricFunction1D:
    """Return ``f`` if it is a 1D parametric function, or wrap a plain
    callable in ``Function1D``."""
    if isinstance(f, ParametricFunction1D):
        return f
    if isinstance(f, ParametricFunction):
        raise ValueError('expected a 1D parametric function, got {!r}'.format(f))
    if callable(f):
        return Function1D(f)
    raise ValueError('bad thing used as a 1D parametric function: {}'.format(f))


__all__ = [
    'Domain',
    'UNIT',
    'as_domain',
    'ParametricFunction',
    'ParametricFunction1D',
    'ParametricFunction2D',
    'Function1D',
    'Function2D',
    'as_function1d',
    'as_function2d',
]
