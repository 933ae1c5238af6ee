#!/usr/bin/env python3

# Copyright (C) 2026 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecgroup.report` module."

import json
import logging

import pytest

from ecgroup.curve import EllipticCurve
from ecgroup.exceptions import NotAPrimeError, NotNonSingularError
from ecgroup.group import solutions
from ecgroup.report import CurveReport, curve_report, survey


def test_curve_report() -> None:
    report = curve_report(EllipticCurve(1, 6, 11))
    assert report == CurveReport(11, 1, 6, 13, 1, 13)
    assert report.order == report.cofactor * report.subgroup_order
    assert str(report) == "11: 13 = 1 * 13"

    report = curve_report(EllipticCurve(-1, 0, 71))
    assert report == CurveReport(71, 70, 0, 72, 2, 36)


def test_dataclasses_json() -> None:
    report = curve_report(EllipticCurve(-1, 0, 71))
    dict_ = report.to_dict()
    assert dict_ == {
        "p": 71,
        "a": 70,
        "b": 0,
        "order": 72,
        "cofactor": 2,
        "subgroup_order": 36,
    }
    assert CurveReport.from_dict(dict_) == report
    assert json.loads(report.to_json()) == dict_
    assert CurveReport.from_json(report.to_json()) == report


def test_survey() -> None:
    reports = survey([5, 7, 11], 1, 1)
    assert [r.p for r in reports] == [5, 7, 11]
    assert reports[0] == CurveReport(5, 1, 1, 9, 1, 9)
    assert reports[1] == CurveReport(7, 1, 1, 5, 1, 5)
    for r in reports:
        assert r.order == len(solutions(EllipticCurve(r.a, r.b, r.p)))

    assert survey([], 1, 1) == []

    with pytest.raises(NotAPrimeError):
        survey([5, 9], 1, 1)
    with pytest.raises(NotNonSingularError):
        survey([5, 7], 7, 14)


def test_survey_logging(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="ecgroup"):
        survey([5], 1, 1)
    assert "5: 9 = 1 * 9" in caplog.text
