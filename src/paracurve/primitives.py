"""Line segments, circles and circular arcs for paracurve.

All angles are in radians, measured counter-clockwise from the positive
x axis.
"""

from __future__ import annotations

from math import cos, sin

from paracurve.core import UNIT, Domain, ParametricFunction2D
from paracurve.geom import Point, isgoodnum, pi2, point


def lerp(a: Point, b: Point, u: float) -> Point:
    """Interpolate between points ``a`` and ``b``; exact at ``u`` of 0 and 1."""

    return a * (1.0 - u) + b * u


def _checkradius(radius) -> float:
    if not isgoodnum(radius) or radius < 0:
        raise ValueError('bad radius: {}'.format(radius))
    return float(radius)


class Segment(ParametricFunction2D):
    """Straight line from ``start`` to ``end`` over ``[0, 1]``."""

    def __init__(self, start, end):
        self._start = point(start)
        self._end = point(end)

    def __repr__(self):
        return 'Segment({}, {})'.format(self._start, self._end)

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    def _evaluate(self, t):
        return lerp(self._start, self._end, t)


class Circle(ParametricFunction2D):
    """Full circle over ``[0, 2*pi]``, the parameter being the angle
    swept from ``start_angle``."""

    _domain = Domain(0.0, pi2)

    def __init__(self, center, radius, start_angle=0.0):
        self._center = point(center)
        self._radius = _checkradius(radius)
        if not isgoodnum(start_angle):
            raise ValueError('bad start angle: {}'.format(start_angle))
        self._start_angle = float(start_angle)

    def __repr__(self):
        return 'Circle({}, {}, {})'.format(self._center, self._radius, self._start_angle)

    @property
    def center(self):
        return self._center

    @property
    def radius(self):
        return self._radius

    @property
    def start_angle(self):
        return self._start_angle

    def _evaluate(self, t):
        theta = self._start_angle + t
        c = self._center
        r = self._radius
        return Point(c.x + r * cos(theta), c.y + r * sin(theta))


class CircleArc(ParametricFunction2D):
    """Circular arc over ``[0, 1]``, sweeping from ``start_angle`` to
    ``end_angle``.  The arc runs clockwise if ``end_angle`` is the
    smaller of the two."""

    _domain = UNIT

    def __init__(self, center, radius, start_angle, end_angle):
        self._center = point(center)
        self._radius = _checkradius(radius)
        if not (isgoodnum(start_angle) and isgoodnum(end_angle)):
            raise ValueError('bad arc angles: {}, {}'.format(start_angle, end_angle))
        self._start_angle = float(start_angle)
        self._end_angle = float(end_angle)

    def __repr__(self):
        return 'CircleArc({}, {}, {}, {})'.format(
            self._center, self._radius, self._start_angle, self._end_angle)

    @property
    def center(self):
        return self._center

    @property
    def radius(self):
        return self._radius

    @property
    def start_angle(self):
        return self._start_angle

    @property
    def end_angle(self):
        return self._end_angle

    def _evaluate(self, t):
        theta = (1.0 - t) * self._start_angle + t * self._end_angle
        c = self._center
        r = self._radius
        return Point(c.x + r * cos(theta), c.y + r * sin(theta))


__all__ = [
    'lerp',
    'Segment',
    'Circle',
    'CircleArc',
]
