## paracurve combinators: new parametric functions built from old ones
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

"""combinators for **paracurve** parametric functions

Every combinator takes one or more parametric functions (or plain
callables, see ``paracurve.core.as_function2d()``) and is itself a
``ParametricFunction2D``, so combinators nest freely into trees.
Children are never modified and errors raised while evaluating a
child, ``OutOfDomainError`` included, propagate unchanged.

junctions
=========

``Concat`` gives its N children one unit of parameter space each, so
its domain is ``[0, N]``.  An interior integer parameter ``t = i``
belongs to child ``i`` (counting from zero), and evaluates that
child at the start of its own domain.  ``t = N`` evaluates the last
child at the end of its domain.  ``Repeat`` traverses one child n
times and follows the same rule, holding the child only once.

"""

from __future__ import annotations

import logging
from math import cos, floor, sin

from paracurve.core import (
    Domain,
    ParametricFunction2D,
    as_function1d,
    as_function2d,
)
from paracurve.errors import InvalidConstructionError
from paracurve.geom import ORIGIN, Point, isgoodnum, point, rotated
from paracurve.xform import Matrix

logger = logging.getLogger(__name__)


def _split(t, count):
    """Return ``(index, u)``: the unit sub-interval of ``[0, count]``
    holding ``t`` and the position ``u`` in ``[0, 1]`` within it.
    ``t == count`` falls at the end of the last sub-interval."""
    i = min(int(floor(t)), count - 1)
    return i, t - i


def _checkbounded(f, i=0):
    if not f.domain().isfinite():
        raise InvalidConstructionError(
            'cannot concatenate function {} with unbounded domain {}'.format(
                i, f.domain()),
            {'index': i, 'domain': f.domain()})
    return f


class Concat(ParametricFunction2D):
    """End-to-end concatenation of parametric functions over ``[0, N]``"""

    def __init__(self, functions):
        if not isinstance(functions, (list, tuple)):
            raise ValueError('Concat expects a list of functions, got {}'.format(functions))
        if not functions:
            raise InvalidConstructionError('Concat needs at least one function')
        funcs = tuple(_checkbounded(as_function2d(f), i) for i, f in enumerate(functions))
        self._functions = funcs
        self._domain = Domain(0.0, float(len(funcs)))
        logger.debug('built %s over %d functions', type(self).__name__, len(funcs))

    def __repr__(self):
        return 'Concat({})'.format(list(self._functions))

    @property
    def functions(self):
        return self._functions

    def locate(self, t):
        """Return ``(index, local)``, the child that parameter ``t`` falls
        into and the matching parameter in that child's own domain."""
        i, u = _split(t, len(self._functions))
        return i, self._functions[i].domain().lerp(u)

    def _evaluate(self, t):
        i, local = self.locate(t)
        return self._functions[i].evaluate(local)


class Repeat(ParametricFunction2D):
    """``n`` back-to-back traversals of a single function, equivalent to
    ``Concat([function] * n)`` but holding the function only once"""

    def __init__(self, function, n):
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidConstructionError('bad repeat count: {}'.format(n))
        if n < 1:
            raise InvalidConstructionError('repeat count must be >= 1, got {}'.format(n))
        self._function = _checkbounded(as_function2d(function))
        self._n = n
        self._domain = Domain(0.0, float(n))
        logger.debug('built Repeat of %d traversals', n)

    def __repr__(self):
        return 'Repeat({!r}, {})'.format(self._function, self._n)

    @property
    def function(self):
        return self._function

    @property
    def n(self):
        return self._n

    def locate(self, t):
        """Return ``(index, local)``, the traversal that parameter ``t``
        falls into and the matching parameter in the function's domain."""
        i, u = _split(t, self._n)
        return i, self._function.domain().lerp(u)

    def _evaluate(self, t):
        return self._function.evaluate(self.locate(t)[1])


class _Wrapper(ParametricFunction2D):
    """A combinator with one child, sharing the child's domain."""

    def __init__(self, function):
        self._function = as_function2d(function)
        self._domain = self._function.domain()

    @property
    def function(self):
        return self._function


class Translate(_Wrapper):
    """Shift every point of a function by ``offset``"""

    def __init__(self, function, offset):
        super().__init__(function)
        self._offset = point(offset)

    def __repr__(self):
        return 'Translate({!r}, {})'.format(self._function, self._offset)

    @property
    def offset(self):
        return self._offset

    def _evaluate(self, t):
        return self._function.evaluate(t) + self._offset


def _checkangle(angle):
    if not isgoodnum(angle):
        raise ValueError('bad angle: {}'.format(angle))
    return float(angle)


class Rotate(_Wrapper):
    """Rotate every point of a function by ``angle`` radians
    (counter-clockwise) about ``center``"""

    def __init__(self, function, angle, center=ORIGIN):
        super().__init__(function)
        self._angle = _checkangle(angle)
        self._center = point(center)
        self._cos = cos(self._angle)
        self._sin = sin(self._angle)

    def __repr__(self):
        return 'Rotate({!r}, {}, {})'.format(self._function, self._angle, self._center)

    @property
    def angle(self):
        return self._angle

    @property
    def center(self):
        return self._center

    def _evaluate(self, t):
        return rotated(self._function.evaluate(t), self._cos, self._sin, self._center)


class RotateTranslate(_Wrapper):
    """Rotation about ``center`` combined with a translation by ``offset``.

    With ``rotate_first`` (the default) the result is identical to
    ``Translate(Rotate(function, angle, center), offset)``, otherwise
    to ``Rotate(Translate(function, offset), angle, center)``.
    """

    def __init__(self, function, angle, center=ORIGIN, offset=ORIGIN, rotate_first=True):
        super().__init__(function)
        self._angle = _checkangle(angle)
        self._center = point(center)
        self._offset = point(offset)
        self._rotate_first = bool(rotate_first)
        self._cos = cos(self._angle)
        self._sin = sin(self._angle)

    def __repr__(self):
        return 'RotateTranslate({!r}, {}, {}, {}, rotate_first={})'.format(
            self._function, self._angle, self._center, self._offset, self._rotate_first)

    @property
    def angle(self):
        return self._angle

    @property
    def center(self):
        return self._center

    @property
    def offset(self):
        return self._offset

    @property
    def rotate_first(self):
        return self._rotate_first

    def _evaluate(self, t):
        p = self._function.evaluate(t)
        if self._rotate_first:
            return rotated(p, self._cos, self._sin, self._center) + self._offset
        return rotated(p + self._offset, self._cos, self._sin, self._center)


class Scale(_Wrapper):
    """Scale every point of a function by ``sx``, ``sy`` about ``center``.
    ``sy`` defaults to ``sx``."""

    def __init__(self, function, sx, sy=None, center=ORIGIN):
        super().__init__(function)
        if sy is None:
            sy = sx
        if not (isgoodnum(sx) and isgoodnum(sy)):
            raise ValueError('bad scaling values: {}, {}'.format(sx, sy))
        self._sx = float(sx)
        self._sy = float(sy)
        self._center = point(center)

    def __repr__(self):
        return 'Scale({!r}, {}, {}, {})'.format(self._function, self._sx, self._sy, self._center)

    def _evaluate(self, t):
        p = self._function.evaluate(t)
        c = self._center
        return Point(c.x + (p.x - c.x) * self._sx, c.y + (p.y - c.y) * self._sy)


class Transform(_Wrapper):
    """Apply a ``paracurve.xform.Matrix`` to every point of a function"""

    def __init__(self, function, matrix):
        super().__init__(function)
        if not isinstance(matrix, Matrix):
            raise ValueError('bad transformation matrix passed to Transform: {}'.format(matrix))
        # private copy, the caller may keep mutating theirs
        self._matrix = Matrix(matrix)

    def __repr__(self):
        return 'Transform({!r}, {})'.format(self._function, self._matrix)

    @property
    def matrix(self):
        return Matrix(self._matrix)

    def _evaluate(self, t):
        return self._matrix.mul(self._function.evaluate(t))


class Pair(ParametricFunction2D):
    """Two 1D functions as the x and y coordinates of a 2D function.

    The domain is the intersection of the two child domains; building
    a ``Pair`` whose children share no parameter raises
    ``InvalidConstructionError``.
    """

    def __init__(self, fx, fy):
        self._fx = as_function1d(fx)
        self._fy = as_function1d(fy)
        dom = self._fx.domain().intersect(self._fy.domain())
        if dom is None:
            raise InvalidConstructionError(
                'domains {} and {} do not intersect'.format(
                    self._fx.domain(), self._fy.domain()),
                {'x': self._fx.domain(), 'y': self._fy.domain()})
        self._domain = dom
        logger.debug('built Pair over %s', dom)

    def __repr__(self):
        return 'Pair({!r}, {!r})'.format(self._fx, self._fy)

    @property
    def fx(self):
        return self._fx

    @property
    def fy(self):
        return self._fy

    def _evaluate(self, t):
        return Point(self._fx.evaluate(t), self._fy.evaluate(t))


__all__ = [
    'Concat',
    'Repeat',
    'Translate',
    'Rotate',
    'RotateTranslate',
    'Scale',
    'Transform',
    'Pair',
]
