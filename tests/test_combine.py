"""Tests for the paracurve combinators."""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from paracurve.bezier import BezierSecondSpline, BezierThird, BezierThirdSpline
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
from paracurve.core import Domain, Function1D, Function2D
from paracurve.errors import InvalidConstructionError, OutOfDomainError
from paracurve.geom import Point, pi2
from paracurve.primitives import Circle, CircleArc, Segment
from paracurve.xform import Matrix, Rotation


def _close(a, b, tol=1e-9):
    assert Point(*a).dist(Point(*b)) <= tol


def _s1():
    return Segment((0.0, 0.0), (1.0, 1.0))


def _s2():
    return Segment((1.0, 1.0), (0.0, 2.0))


def _sample_functions():
    s = _s1()
    return [
        s,
        Circle((0, 0), 1),
        CircleArc((1, 1), 2, 0.0, math.pi / 3),
        Concat([s, _s2()]),
        Repeat(Circle((0, 0), 1), 3),
        Translate(s, (2, 3)),
        Rotate(s, 0.7, (1, -1)),
        RotateTranslate(s, 1.1, (0.5, 0.5), (3, 0)),
        Scale(s, 2, 3),
        Transform(s, Rotation(0.5)),
        Pair(Function1D(math.sin, (0, 2)), Function1D(math.cos, (1, 3))),
        Function2D(lambda t: (t, t * t), (-1, 1)),
        BezierSecondSpline([(0, 0), (1, 1), (2, 0), (3, 1), (4, 0)]),
        Translate(BezierThirdSpline([(0, 0), (1, 2), (2, -1), (3, 0)]), (1, 1)),
    ]


class TestConcat:

    def test_domain(self):
        c = Concat([_s1(), _s2()])
        assert c.domain() == Domain(0.0, 2.0)
        assert Concat([_s1()]).domain() == Domain(0.0, 1.0)
        assert len(c.functions) == 2

    def test_evaluate(self):
        c = Concat([_s1(), _s2()])
        _close(c(0.0), (0.0, 0.0))
        _close(c(0.5), (0.5, 0.5))
        _close(c(1.0), (1.0, 1.0))
        _close(c(1.5), (0.5, 1.5))
        _close(c(2.0), (0.0, 2.0))

    def test_junction_belongs_to_following_function(self):
        a = Segment((0, 0), (1, 0))
        b = Segment((5, 5), (6, 5))
        c = Concat([a, b])
        assert c(1.0) == b(0.0)
        _close(c(1.0 - 1e-12), a(1.0), tol=1e-9)
        assert c(2.0) == b(1.0)
        assert c.locate(1.0) == (1, 0.0)
        assert c.locate(2.0) == (1, 1.0)
        assert c.locate(0.25) == (0, 0.25)

    def test_continuity(self):
        a = _s1()
        b = _s2()
        c = Concat([a, b])
        # continuous children agree on either side of the junction
        assert c(1.0) == a(1.0)
        assert c(1.0) == b(0.0)
        _close(c(1.0 + 1e-12), b(0.0), tol=1e-9)

    def test_maps_onto_child_domains(self):
        circle = Circle((0, 0), 1)
        c = Concat([circle, circle])
        _close(c(0.5), circle(math.pi))
        _close(c(1.25), circle(math.pi / 2))
        assert c(2.0) == circle(pi2)

    def test_segment_then_circle(self):
        seg = Segment((0, 0), (2, 0))
        circle = Circle((0, 0), 1)
        assert circle.domain() == Domain(0.0, 2 * math.pi)
        c = Concat([seg, circle])
        assert c.domain() == Domain(0.0, 2.0)
        assert c(0.0) == Point(0.0, 0.0)
        # t=1.0 starts the circle
        _close(c(1.0), (1.0, 0.0))
        _close(c(1.0 - 1e-12), (2.0, 0.0), tol=1e-9)
        _close(c(1.5), (-1.0, 0.0))
        _close(c(2.0), (1.0, 0.0))

    def test_out_of_domain(self):
        c = Concat([_s1(), _s2()])
        for t in (-1e-9, -1.0, 2.0 + 1e-9, 3.0, math.nan, math.inf):
            with pytest.raises(OutOfDomainError):
                c(t)

    def test_bad_construction(self):
        with pytest.raises(InvalidConstructionError):
            Concat([])
        with pytest.raises(ValueError):
            Concat(_s1())
        with pytest.raises(InvalidConstructionError):
            Concat([_s1(), Function2D(lambda t: (t, t), (0.0, math.inf))])

    def test_accepts_callables(self):
        c = Concat([lambda t: (t, 0.0), _s1()])
        _close(c(0.5), (0.5, 0.0))
        _close(c(1.5), (0.5, 0.5))

    def test_nested(self):
        inner = Concat([_s1(), _s2()])
        outer = Concat([inner, Segment((0, 2), (0, 0))])
        assert outer.domain() == Domain(0.0, 2.0)
        _close(outer(0.5), (1.0, 1.0))
        _close(outer(1.5), (0.0, 1.0))


class TestRepeat:

    def test_evaluate(self):
        rep = Repeat(_s1(), 2)
        assert rep.domain() == Domain(0.0, 2.0)
        _close(rep(0.0), (0.0, 0.0))
        _close(rep(0.5), (0.5, 0.5))
        _close(rep(1.0), (0.0, 0.0))
        _close(rep(2.0), (1.0, 1.0))

    def test_repeat_of_concat(self):
        rep = Repeat(Concat([_s1(), _s2()]), 2)
        _close(rep(0.0), (0.0, 0.0))
        _close(rep(0.25), (0.5, 0.5))
        _close(rep(0.5), (1.0, 1.0))
        _close(rep(1.0), (0.0, 0.0))
        _close(rep(1.5), (1.0, 1.0))
        _close(rep(2.0), (0.0, 2.0))

    @pytest.mark.parametrize("n", [1, 2, 3, 7])
    def test_matches_concat(self, n):
        child = BezierThird((0, 0), (3, 0), (1, 2), (2, -1))
        rep = Repeat(child, n)
        cat = Concat([child] * n)
        assert rep.domain() == cat.domain()
        ts = rep.domain().parameters(10 * n) + [0.123, n - 0.001]
        for t in ts:
            assert rep(t) == cat(t)

    def test_large_count(self):
        n = 5_000_000
        rep = Repeat(_s1(), n)
        assert rep.n == n
        assert rep.domain() == Domain(0.0, float(n))
        assert rep.locate(2.0) == (2, 0.0)
        assert rep.locate(float(n)) == (n - 1, 1.0)
        _close(rep(n - 0.5), (0.5, 0.5))
        assert rep(float(n)) == Point(1.0, 1.0)
        assert rep(3.0) == Point(0.0, 0.0)

    def test_bad_count(self):
        for n in (0, -1):
            with pytest.raises(InvalidConstructionError):
                Repeat(_s1(), n)
        for n in (1.5, True, '2'):
            with pytest.raises(InvalidConstructionError):
                Repeat(_s1(), n)

    def test_closure(self):
        rep = Repeat(lambda t: (t, t), 2)
        pts = rep.linspace(10)
        assert len(pts) == 11
        _close(pts[0], (0.0, 0.0))
        _close(pts[-1], (1.0, 1.0))
        assert rep.n == 2


class TestTranslate:

    def test_evaluate(self):
        tr = Translate(_s1(), (0.5, 0.5))
        assert tr.domain() == _s1().domain()
        _close(tr(0.0), (0.5, 0.5))
        _close(tr(1.0), (1.5, 1.5))
        assert tr.offset == Point(0.5, 0.5)

    def test_identity(self):
        s = BezierThird((0, 0), (3, 0), (1, 2), (2, -1))
        tr = Translate(s, (0, 0))
        for t in s.domain().parameters(16):
            assert tr(t) == s(t)

    def test_domain_follows_child(self):
        circle = Circle((0, 0), 1)
        tr = Translate(circle, (1, 0))
        assert tr.domain() == circle.domain()
        _close(tr(math.pi), (0.0, 0.0))
        with pytest.raises(OutOfDomainError):
            tr(7.0)

    def test_bad_offset(self):
        with pytest.raises(ValueError):
            Translate(_s1(), 'up')


class TestRotate:

    def test_evaluate(self):
        r = Rotate(_s1(), math.pi / 2, (0.5, 0.5))
        _close(r(0.0), (1.0, 0.0))
        _close(r(1.0), (0.0, 1.0))

    def test_default_center_is_origin(self):
        r = Rotate(Segment((1, 0), (2, 0)), math.pi / 2)
        _close(r(0.0), (0.0, 1.0))
        _close(r(1.0), (0.0, 2.0))
        assert r.center == Point(0.0, 0.0)

    def test_zero_angle_is_identity(self):
        s = CircleArc((1, 2), 3, 0.2, 2.5)
        for center in ((0, 0), (5, -3)):
            r = Rotate(s, 0.0, center)
            for t in s.domain().parameters(16):
                _close(r(t), s(t), tol=1e-12)

    def test_bad_angle(self):
        with pytest.raises(ValueError):
            Rotate(_s1(), None)


class TestRotateTranslate:

    def test_rotate_first(self):
        rt = RotateTranslate(_s1(), math.pi / 2, (0.5, 0.5), (0.5, 0.5))
        _close(rt(0.0), (1.5, 0.5))
        _close(rt(1.0), (0.5, 1.5))

    def test_translate_first(self):
        rt = RotateTranslate(_s1(), math.pi / 2, (0.5, 0.5), (0.5, 0.5), rotate_first=False)
        _close(rt(0.0), (0.5, 0.5))
        _close(rt(1.0), (-0.5, 1.5))

    def test_matches_composition(self):
        children = [_s1(), Circle((1, 1), 2, 0.3), Concat([_s1(), _s2()])]
        angles = [0.0, 0.3, math.pi / 2, -2.0, 7.5]
        centers = [(0, 0), (0.5, 0.5), (-3, 4)]
        offsets = [(0, 0), (1, -2), (0.25, 10)]
        for child in children:
            ts = child.domain().parameters(8)
            for angle in angles:
                for center in centers:
                    for offset in offsets:
                        rt = RotateTranslate(child, angle, center, offset)
                        composed = Translate(Rotate(child, angle, center), offset)
                        tr = RotateTranslate(child, angle, center, offset, rotate_first=False)
                        tr_composed = Rotate(Translate(child, offset), angle, center)
                        assert rt.domain() == composed.domain()
                        for t in ts:
                            assert rt(t) == composed(t)
                            _close(rt(t), composed(t), tol=1e-6)
                            assert tr(t) == tr_composed(t)


class TestScale:

    def test_uniform(self):
        sc = Scale(Segment((0, 0), (2, 0)), 2)
        _close(sc(1.0), (4.0, 0.0))

    def test_about_center(self):
        sc = Scale(_s1(), 2, 3, (1, 0))
        _close(sc(0.0), (-1.0, 0.0))
        _close(sc(1.0), (1.0, 3.0))

    def test_bad_factors(self):
        with pytest.raises(ValueError):
            Scale(_s1(), 'x')


class TestTransform:

    def test_matches_rotate(self):
        circle = Circle((2, 1), 1.5)
        tf = Transform(circle, Rotation(0.8, (1, 1)))
        r = Rotate(circle, 0.8, (1, 1))
        for t in circle.domain().parameters(12):
            _close(tf(t), r(t))

    def test_private_matrix(self):
        m = Matrix()
        tf = Transform(_s1(), m)
        m.set(0, 2, 10.0)
        _close(tf(1.0), (1.0, 1.0))

    def test_bad_matrix(self):
        with pytest.raises(ValueError):
            Transform(_s1(), [[1, 0, 0], [0, 1, 0], [0, 0, 1]])


class TestPair:

    def test_domain_intersection(self):
        f = Function1D(lambda t: t * t, (0, 2))
        g = Function1D(lambda t: 3.0 - t, (1, 3))
        p = Pair(f, g)
        assert p.domain() == Domain(1, 2)
        with pytest.raises(OutOfDomainError):
            p(0.5)
        with pytest.raises(OutOfDomainError):
            p(2.5)
        assert p(1.5) == Point(f(1.5), g(1.5))
        assert p(1.5) == Point(2.25, 1.5)

    def test_empty_intersection(self):
        f = Function1D(lambda t: t, (0, 1))
        g = Function1D(lambda t: t, (2, 3))
        with pytest.raises(InvalidConstructionError) as exc_info:
            Pair(f, g)
        assert exc_info.value.details['x'] == Domain(0, 1)

    def test_touching_domains(self):
        p = Pair(Function1D(lambda t: t, (0, 1)), Function1D(lambda t: -t, (1, 2)))
        assert p.domain() == Domain(1, 1)
        assert p(1) == Point(1.0, -1.0)

    def test_plain_callables(self):
        p = Pair(math.cos, math.sin)
        assert p.domain() == Domain(0.0, 1.0)
        _close(p(0.0), (1.0, 0.0))

    def test_rejects_2d_functions(self):
        with pytest.raises(ValueError):
            Pair(_s1(), Function1D(lambda t: t))


def test_domain_round_trip():
    for f in _sample_functions():
        dom = f.domain()
        f.evaluate(dom.start)
        f.evaluate(dom.end)


def test_out_of_domain_rejection():
    for f in _sample_functions():
        dom = f.domain()
        for t in (dom.start - 1e-6, dom.end + 1e-6, dom.start - 100.0, dom.end + 100.0):
            with pytest.raises(OutOfDomainError):
                f.evaluate(t)


def test_child_errors_propagate():
    inner = Segment((0, 0), (1, 1))
    # evaluates its child outside the child's domain
    bad = Function2D(lambda t: inner(t + 2.0))
    for f in (Concat([bad]), Translate(bad, (1, 1)), Rotate(bad, 1.0),
              RotateTranslate(bad, 1.0, (0, 0), (1, 1)), Repeat(bad, 2)):
        with pytest.raises(OutOfDomainError) as exc_info:
            f(0.5)
        assert exc_info.value.t == 2.5
        assert exc_info.value.domain == inner.domain()


def test_concurrent_evaluation():
    shared = Circle((0, 0), 1)
    tree = RotateTranslate(Repeat(Concat([shared, Segment((1, 0), (0, 0))]), 3),
                           0.4, (1, 1), (2, 2))
    ts = tree.domain().parameters(500)
    expected = [tree(t) for t in ts]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(tree, ts))
    assert results == expected
