"""Bezier curves and Bezier splines for paracurve.

Curves are evaluated with de Casteljau's algorithm, repeated linear
interpolation between neighbouring control points, and run over
``[0, 1]``.  Splines chain curves that share their end points and are
built on :class:`paracurve.combine.Concat`, so a spline of ``k``
curves runs over ``[0, k]``.
"""

from __future__ import annotations

from typing import List, Sequence

from paracurve.combine import Concat
from paracurve.core import ParametricFunction2D
from paracurve.errors import InvalidConstructionError
from paracurve.geom import Point, point
from paracurve.primitives import lerp


def decasteljau(ctrl: Sequence[Point], t: float) -> Point:
    """Evaluate the Bezier curve with control polygon ``ctrl`` at ``t``."""

    if not ctrl:
        raise ValueError('Bezier curve has no control points')
    pts = list(ctrl)
    while len(pts) > 1:
        pts = [lerp(a, b, t) for a, b in zip(pts, pts[1:])]
    return pts[0]


class _Bezier(ParametricFunction2D):

    def __init__(self, *ctrl):
        self._ctrl = tuple(point(p) for p in ctrl)

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, ', '.join(str(p) for p in self._ctrl))

    @property
    def controlpoints(self) -> List[Point]:
        """Control polygon in curve order, ``start`` first and ``end`` last."""
        return list(self._ctrl)

    @property
    def start(self):
        return self._ctrl[0]

    @property
    def end(self):
        return self._ctrl[-1]

    def _evaluate(self, t):
        return decasteljau(self._ctrl, t)


class BezierSecond(_Bezier):
    """Quadratic Bezier curve"""

    def __init__(self, start, end, control):
        super().__init__(start, control, end)


class BezierThird(_Bezier):
    """Cubic Bezier curve"""

    def __init__(self, start, end, control1, control2):
        super().__init__(start, control1, control2, end)


class BezierFourth(_Bezier):
    """Quartic Bezier curve"""

    def __init__(self, start, end, control1, control2, control3):
        super().__init__(start, control1, control2, control3, end)


class _BezierSpline(Concat):

    degree = None
    curve = None

    def __init__(self, points):
        if not isinstance(points, (list, tuple)):
            raise ValueError('bad point list passed to {}: {}'.format(
                type(self).__name__, points))
        pts = [point(p) for p in points]
        d = self.degree
        if len(pts) < d + 1 or (len(pts) - 1) % d != 0:
            raise InvalidConstructionError(
                '{} needs 1 + {}*k points (k >= 1), got {}'.format(
                    type(self).__name__, d, len(pts)),
                {'count': len(pts), 'degree': d})
        curves = [self._curve(pts[i:i + d + 1]) for i in range(0, len(pts) - 1, d)]
        self._points = tuple(pts)
        super().__init__(curves)

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, list(self._points))

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    def _curve(self, window):
        # windows hold points in curve order: start, controls..., end
        return self.curve(window[0], window[-1], *window[1:-1])


class BezierSecondSpline(_BezierSpline):
    """Chain of quadratic Bezier curves: ``start, control, end, control, end, ...``"""

    degree = 2
    curve = BezierSecond


class BezierThirdSpline(_BezierSpline):
    """Chain of cubic Bezier curves"""

    degree = 3
    curve = BezierThird


class BezierFourthSpline(_BezierSpline):
    """Chain of quartic Bezier curves"""

    degree = 4
    curve = BezierFourth


__all__ = [
    'decasteljau',
    'BezierSecond',
    'BezierThird',
    'BezierFourth',
    'BezierSecondSpline',
    'BezierThirdSpline',
    'BezierFourthSpline',
]
