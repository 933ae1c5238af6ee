#!/usr/bin/env python3

# Copyright (C) 2026 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""EllipticCurve group explorer functions.

These functions are meant to explore low-cardinality curve groups,
for didactical (and fun) reason only:
solutions is O(p^2), decomposition is O(p^3).
"""

import logging
from typing import List, Tuple

from ecgroup.alias import Point
from ecgroup.curve import EllipticCurve
from ecgroup.number_theory import legendre
from ecgroup.point import INF, Affine, Inf

logger = logging.getLogger(__name__)


def order(ec: EllipticCurve) -> int:
    """Return the number of curve points, INF included.

    For each x, y^2 = rhs(x) has 1 + (rhs(x)|p) solutions:
    two if rhs(x) is a non-zero quadratic residue,
    one if it is zero, none otherwise.
    """

    n = 1 + ec.p
    for x in range(ec.p):
        n += legendre(ec.rhs(x), ec.p)
    logger.debug("order of %s: %d", ec, n)
    return n


def cyclic_group(ec: EllipticCurve, G: Point) -> List[Point]:
    """Return the G-generated cyclic subgroup, ending with INF.

    The length of the list is the order of G.
    """

    ec.require_on_curve(G)
    if isinstance(G, Inf):
        return [INF]

    points = [ec.represent(G)]
    while points[-1] != INF:
        points.append(ec.sum(G, points[-1]))
    return points


def solutions(ec: EllipticCurve) -> List[Point]:
    """Return all curve points, found by brute force.

    INF comes first, then affine points ascending by x, then y.
    """

    points: List[Point] = [INF]
    for x in range(ec.p):
        rhs = ec.rhs(x)
        points.extend(Affine(x, y) for y in range(ec.p) if ec.lhs(y) == rhs)
    logger.debug("%d points found on %s", len(points), ec)
    return points


def decomposition(ec: EllipticCurve) -> Tuple[int, int]:
    """Return (cofactor, max cyclic subgroup order).

    The maximum order is searched exhaustively over all curve points.
    """

    max_order = max(len(cyclic_group(ec, Q)) for Q in solutions(ec))
    cofactor = order(ec) // max_order
    logger.debug("decomposition of %s: %d * %d", ec, cofactor, max_order)
    return cofactor, max_order
