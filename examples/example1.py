## combinator drawing example for paracurve
print("example1.py -- paracurve DXF drawing example")

from math import pi, sin

from paracurve import (
    BezierThirdSpline,
    Circle,
    CircleArc,
    Concat,
    Pair,
    Repeat,
    RotateTranslate,
    Segment,
)
from paracurve.core import Function1D
from paracurve.ezdxf_exporter import write_dxf

## a rounded slot: two straight sides joined by half circles
def slot(length, radius):
    return Concat([Segment((0, -radius), (length, -radius)),
                   CircleArc((length, 0), radius, -pi/2, pi/2),
                   Segment((length, radius), (0, radius)),
                   CircleArc((0, 0), radius, pi/2, 3*pi/2)])

## a wave built from one spline period, repeated and tilted
def wave():
    period = BezierThirdSpline([(0, 0), (1, 2), (2, 2), (3, 0),
                                (4, -2), (5, -2), (6, 0)])
    return RotateTranslate(Repeat(period, 3), pi/12, (0, 0), (0, 20))

## a Lissajous figure from two 1D functions
def lissajous():
    fx = Function1D(lambda t: 10 + 5*sin(3*t), (0, 2*pi))
    fy = Function1D(lambda t: -15 + 5*sin(2*t), (0, 2*pi))
    return Pair(fx, fy)

functions = [slot(20, 4), wave(), lissajous(), Circle((30, 0), 3)]
for f in functions:
    print("{} over {}: starts {}, ends {}".format(
        type(f).__name__, f.domain(), f.start_point(), f.end_point()))

filename = "example1-out"
path = write_dxf(functions, filename, samples=256)
print("\nOutput file name is {}".format(path))
