#!/usr/bin/env python3

# Copyright (C) 2026 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve group summaries.

A CurveReport collects the group order and its decomposition,
as dataclass serializable to dict and json.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List

from dataclasses_json import DataClassJsonMixin

from ecgroup.alias import Integer
from ecgroup.curve import EllipticCurve
from ecgroup.group import decomposition, order

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveReport(DataClassJsonMixin):
    p: int
    a: int
    b: int
    order: int
    # order = cofactor * subgroup_order
    cofactor: int
    subgroup_order: int

    def __str__(self) -> str:
        return f"{self.p}: {self.order} = {self.cofactor} * {self.subgroup_order}"


def curve_report(ec: EllipticCurve) -> CurveReport:
    "Return the group order and its decomposition for the curve."

    cofactor, subgroup_order = decomposition(ec)
    return CurveReport(ec.p, ec.a, ec.b, order(ec), cofactor, subgroup_order)


def survey(primes: Iterable[Integer], a: Integer, b: Integer) -> List[CurveReport]:
    """Return the report of the (a, b) curve for each of the primes.

    Invalid primes raise as the EllipticCurve constructor does.
    """

    reports: List[CurveReport] = []
    for p in primes:
        ec = EllipticCurve(a, b, p)
        reports.append(curve_report(ec))
        logger.info("%s", reports[-1])
    return reports
