# -*- coding: utf-8 -*-
"""paracurve: composable parametric functions for 2D curves."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("paracurve")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

from paracurve.bezier import (
    BezierFourth,
    BezierFourthSpline,
    BezierSecond,
    BezierSecondSpline,
    BezierThird,
    BezierThirdSpline,
)
from paracurve.combine import (
    Concat,
    Pair,
    Repeat,
    Rotate,
    RotateTranslate,
    Scale,
    Transform,
    Translate,
)
from paracurve.core import (
    UNIT,
    Domain,
    Function1D,
    Function2D,
    ParametricFunction,
    ParametricFunction1D,
    ParametricFunction2D,
    as_function1d,
    as_function2d,
)
from paracurve.errors import (
    InvalidConstructionError,
    OutOfDomainError,
    ParametricError,
)
from paracurve.geom import ORIGIN, Point, point
from paracurve.primitives import Circle, CircleArc, Segment
