## matrix transformation operations for 2D homogeneous coordinates
## in paracurve

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

from math import cos, sin

import paracurve.geom as geom

## a matrix is represented as a list of three three-element rows.
## Points are treated as column vectors [x, y, 1], so Mp transforms
## point p, and M.mul(N) applies N first, then M.


def _isgoodrow(r):
    return isinstance(r, (tuple, list)) and len(r) == 3 and \
        all(geom.isgoodnum(x) for x in r)


class Matrix:
    """3x3 transformation matrix class for transforming homogeneous 2D coordinates"""

    def __init__(self, a=None):
        self.m = [[1.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0],
                  [0.0, 0.0, 1.0]]

        if isinstance(a, Matrix):
            for i in range(3):
                self.m[i] = list(a.getrow(i))

        elif isinstance(a, (tuple, list)):
            if len(a) == 3:
                if not all(_isgoodrow(r) for r in a):
                    raise ValueError('bad rows in matrix initialization: {}'.format(a))
                for i in range(3):
                    self.m[i] = [float(x) for x in a[i]]
            elif len(a) == 9:
                for ind, x in enumerate(a):
                    if not geom.isgoodnum(x):
                        raise ValueError('bad element in matrix initialization: {}'.format(x))
                    self.m[ind // 3][ind % 3] = float(x)
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix({},{},{})".format(self.m[0], self.m[1], self.m[2])

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.m == other.m

    #return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i > 2 or j < 0 or j > 2:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        return self.m[i][j]

    #set value indexed by i,j
    def set(self, i, j, x):
        if i < 0 or i > 2 or j < 0 or j > 2:
            raise ValueError('bad index passed to set: {},{}'.format(i, j))
        if not geom.isgoodnum(x):
            raise ValueError('bad value passed to set: {}'.format(x))
        self.m[i][j] = float(x)

    def getrow(self, i):
        if i < 0 or i > 2:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return tuple(self.m[i])

    def getcol(self, j):
        if j < 0 or j > 2:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return (self.m[0][j], self.m[1][j], self.m[2][j])

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # point, compute Mx and project back onto the w=1 plane. If x is
    # a scalar, compute xM.

    def mul(self, x):
        if isinstance(x, Matrix):
            result = Matrix()
            for i in range(3):
                row = self.m[i]
                for j in range(3):
                    col = x.getcol(j)
                    result.m[i][j] = row[0]*col[0] + row[1]*col[1] + row[2]*col[2]
            return result
        elif geom.ispoint(x):
            m = self.m
            px = m[0][0]*x.x + m[0][1]*x.y + m[0][2]
            py = m[1][0]*x.x + m[1][1]*x.y + m[1][2]
            w = m[2][0]*x.x + m[2][1]*x.y + m[2][2]
            if w == 0.0:
                raise ValueError('point maps to infinity under {}'.format(self))
            if w != 1.0:
                px /= w
                py /= w
            return geom.Point(px, py)
        elif geom.isgoodnum(x):
            return Matrix([[v * x for v in row] for row in self.m])

        raise ValueError('bad thing passed to mul(): {}'.format(x))


# rotation by angle (radians, counter-clockwise) about center
def Rotation(angle, center=None, inverse=False):
    if not geom.isgoodnum(angle):
        raise ValueError('bad angle passed to Rotation: {}'.format(angle))
    if inverse:
        angle = -angle
    cang = cos(angle)
    sang = sin(angle)
    R = Matrix([[cang, -sang, 0.0],
                [sang, cang, 0.0],
                [0.0, 0.0, 1.0]])
    if center is None or geom.vclose(center, geom.ORIGIN):
        return R
    center = geom.point(center)
    return Translation(center).mul(R).mul(Translation(center, inverse=True))

def Translation(delta, inverse=False):
    delta = geom.point(delta)
    if inverse:
        delta = -delta
    T = [[1.0, 0.0, delta.x],
         [0.0, 1.0, delta.y],
         [0.0, 0.0, 1.0]]
    return Matrix(T)

def Scale(x, y=None, center=None, inverse=False):
    if not geom.isgoodnum(x):
        raise ValueError('bad scaling values passed to Scale: {}'.format(x))
    sx = x
    sy = x if y is None else y
    if not geom.isgoodnum(sy):
        raise ValueError('bad scaling values passed to Scale: {}'.format(y))

    if inverse:
        sx = 1.0/sx
        sy = 1.0/sy

    S = Matrix([[sx, 0.0, 0.0],
                [0.0, sy, 0.0],
                [0.0, 0.0, 1.0]])
    if center is None or geom.vclose(center, geom.ORIGIN):
        return S
    center = geom.point(center)
    return Translation(center).mul(S).mul(Translation(center, inverse=True))
