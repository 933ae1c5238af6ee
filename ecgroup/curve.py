#!/usr/bin/env python3

# Copyright (C) 2026 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""EllipticCurve class.

For the group analysis functions (order, cyclic subgroups, etc.)
see the ecgroup.group module.
"""

from ecgroup.alias import Integer, Point
from ecgroup.exceptions import (
    ECGroupTypeError,
    NotAPrimeError,
    NotNonSingularError,
    NotOnCurveError,
)
from ecgroup.number_theory import is_prime, mod_pow
from ecgroup.point import INF, Affine, Inf
from ecgroup.utils import int_from_integer, str_from_int


class EllipticCurve:
    """Elliptic curve over Fp and the group of its points.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.

    The only degenerate case rejected is a = b = 0;
    the discriminant 4 a^3 + 27 b^2 is not checked otherwise.

    The group is defined by the point addition group law.
    """

    def __init__(self, a: Integer, b: Integer, p: Integer) -> None:

        a = int_from_integer(a)
        b = int_from_integer(b)
        p = int_from_integer(p)

        # NotPositiveError from is_prime propagates for p <= 0
        if not is_prime(p):
            raise NotAPrimeError(f"p is not prime: {str_from_int(p)}")
        a %= p
        b %= p
        if a == 0 and b == 0:
            raise NotNonSingularError("singular curve: a = b = 0 (mod p)")

        self._a = a
        self._b = b
        self._p = p

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    @property
    def p(self) -> int:
        return self._p

    def __str__(self) -> str:
        return f"y^2 = x^3 + {self._a} * x + {self._b} (mod {self._p})"

    def __repr__(self) -> str:
        return f"EllipticCurve({self._a}, {self._b}, {self._p})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EllipticCurve):
            return NotImplemented
        return (self._a, self._b, self._p) == (other._a, other._b, other._p)

    def __hash__(self) -> int:
        return hash((self._a, self._b, self._p))

    # the two sides of the curve equation

    def lhs(self, y: int) -> int:
        "Return y^2 (mod p)."
        return mod_pow(y, 2, self._p)

    def rhs(self, x: int) -> int:
        "Return x^3 + a*x + b (mod p)."
        return (mod_pow(x, 3, self._p) + self._a * x % self._p + self._b) % self._p

    def is_on(self, Q: Point) -> bool:
        """Return True if the point is on the curve.

        Any representative of the coordinate residue classes is accepted,
        not just the one in [0, p).
        """
        if isinstance(Q, Inf):
            return True
        if isinstance(Q, Affine):
            return self.lhs(Q.y) == self.rhs(Q.x)
        raise ECGroupTypeError(f"not a point: {Q!r}")

    def require_on_curve(self, Q: Point) -> None:
        """Require the input Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on(Q):
            raise NotOnCurveError(f"point not on curve: {Q}")

    def represent(self, Q: Point) -> Point:
        "Return the canonical form of the point, coordinates in [0, p)."

        self.require_on_curve(Q)
        if isinstance(Q, Inf):
            return INF
        return Affine(Q.x % self._p, Q.y % self._p)

    def inv(self, Q: Point) -> Point:
        "Return the opposite point, in canonical form."

        self.require_on_curve(Q)
        if isinstance(Q, Inf):
            return INF
        return self.represent(Affine(Q.x, -Q.y))

    def sum(self, Q0: Point, Q1: Point) -> Point:
        """Return the sum of two points, in canonical form.

        The input points must be on the curve.

        The chord (or tangent, when doubling) through Q0 and Q1
        intersects the curve in a third point R = (x2, y2),
        and Q0 + Q1 + R = INF: the sum is -R,
        i.e. the final negation is part of the group law.
        """

        self.require_on_curve(Q0)
        self.require_on_curve(Q1)

        if isinstance(Q0, Inf):
            return self.represent(Q1)
        if isinstance(Q1, Inf):
            return self.represent(Q0)

        p = self._p
        x0, y0 = Q0.x, Q0.y
        x1, y1 = Q1.x, Q1.y

        if (x0 - x1) % p != 0:
            # p is prime: inverse from Fermat's little theorem
            lam = (y1 - y0) * mod_pow(x1 - x0, p - 2, p) % p
            x2 = mod_pow(lam, 2, p) - x0 - x1
            y2 = lam * (x2 - x0) + y0
            return self.inv(Affine(x2, y2))

        # opposite points, vertical tangent included
        if (y0 + y1) % p == 0:
            return INF

        # point doubling
        lam = (3 * mod_pow(x0, 2, p) + self._a) * mod_pow(2 * y0, p - 2, p) % p
        x2 = mod_pow(lam, 2, p) - 2 * x0 % p
        y2 = lam * (x2 - x0) % p + y0
        return self.inv(Affine(x2, y2))

    negate = inv
    add = sum
