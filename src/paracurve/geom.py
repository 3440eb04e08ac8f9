## foundational scalar and point operations for paracurve
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

"""foundational scalar and point operations for **paracurve**

====================
OVERVIEW
====================

The ``paracurve.geom`` module provides the numeric building blocks the
parametric functions are written against: a handful of scalar
helpers, and the immutable two dimensional ``Point`` type.

constants
=========

``paracurve.geom`` provides the "constants" ``epsilon`` and ``pi2``
(2*pi).  Redefine these at your peril.

scalars
=======

Scalar numbers are ordinary Python3 ``int`` or ``float`` numbers,
with ordinary double-precision floating point dynamic range and
precision.  Booleans are rejected wherever a number is expected, see
``isgoodnum()``.

points
======

A ``Point`` is a value: two points with the same coordinates are
equal, and no operation ever modifies a point in place.  Points double
as vectors, so ``p + q``, ``p - q``, ``p * 2.0`` and ``-p`` all do the
obvious thing.  Rotation is counter-clockwise, with angles in radians.

"""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, hypot, pi, sin

## constants
epsilon = 0.000005
pi2 = 2.0 * pi

## operations on scalars
## -----------------------

## booleans are ints to python (True=1 and False=0 for integer
## arithmetic), but True is not a curve parameter

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))

def close(a, b):
    """ are two scalars the same within epsilon
    """
    return abs(a - b) < epsilon


## operations on points
## ---------------------

@dataclass(frozen=True)
class Point:
    """Immutable point (or vector) in the XY plane."""

    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self):
        return Point(-self.x, -self.y)

    def __mul__(self, c):
        if not isgoodnum(c):
            return NotImplemented
        return Point(self.x * c, self.y * c)

    __rmul__ = __mul__

    def __truediv__(self, c):
        if not isgoodnum(c):
            return NotImplemented
        return Point(self.x / c, self.y / c)

    def mag(self) -> float:
        """ magnitude of the point taken as a vector"""
        return hypot(self.x, self.y)

    def dist(self, other: Point) -> float:
        """ euclidean distance between two points"""
        return (self - other).mag()

    def rotate(self, angle: float, center: Point = None) -> Point:
        """Rotate counter-clockwise by ``angle`` radians about ``center``
        (the origin if not given).

        """
        if center is None:
            center = ORIGIN
        return rotated(self, cos(angle), sin(angle), center)

    def isclose(self, other: Point, tol: float = None) -> bool:
        """ are two points the same within ``tol`` (default ``epsilon``)"""
        if tol is None:
            tol = epsilon
        return self.dist(other) <= tol


ORIGIN = Point(0.0, 0.0)


## rotation with precomputed cosine and sine, shared by everything
## that rotates points so that results agree bit-for-bit
def rotated(p, cang, sang, center):
    dx = p.x - center.x
    dy = p.y - center.y
    return Point(center.x + dx * cang - dy * sang,
                 center.y + dx * sang + dy * cang)


def point(x=None, y=None):
    """Value-safe point creation from a point, a pair, or two scalars"""
    if isinstance(x, Point):
        return x
    if isgoodnum(x) and isgoodnum(y):
        return Point(float(x), float(y))
    if y is None and isinstance(x, (tuple, list)) and len(x) == 2 \
       and isgoodnum(x[0]) and isgoodnum(x[1]):
        return Point(float(x[0]), float(x[1]))
    raise ValueError('bad values passed to point(): {}, {}'.format(x, y))


def ispoint(x):
    """ is it a point?"""
    return isinstance(x, Point)


def vclose(a, b):
    """ are two points the same within epsilon"""
    return close(point(a).dist(point(b)), 0)


__all__ = [
    'epsilon',
    'pi2',
    'isgoodnum',
    'close',
    'Point',
    'ORIGIN',
    'rotated',
    'point',
    'ispoint',
    'vclose',
]
