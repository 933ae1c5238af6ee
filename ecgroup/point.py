#!/usr/bin/env python3

# Copyright (C) 2026 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points.

A point is either the point at infinity (the group identity)
or an affine pair of integer coordinates.
The two variants are distinct classes:
the point at infinity is never encoded as a coordinate pair.

Being on a given curve is not a property of the point:
any pair of integers is an Affine point,
curve operations reject the ones not satisfying the curve equation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Inf:
    "The point at infinity."

    @property
    def is_inf(self) -> bool:
        return True

    def __str__(self) -> str:
        return "Inf"


@dataclass(frozen=True)
class Affine:
    "A point in affine coordinates."

    x: int
    y: int

    @property
    def is_inf(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


INF = Inf()
