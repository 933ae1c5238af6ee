#!/usr/bin/env python3

# Copyright (C) 2026 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are meant to discriminate between Exceptions being raised
by ecgroup from those raised by other codebase,
and between the different ways an input can be invalid.

Users are usually better off just dealing with the regular
ValueError and TypeError from which the ecgroup versions are derived.
"""


class ECGroupValueError(ValueError):
    pass


class ECGroupTypeError(TypeError):
    pass


class NotPositiveError(ECGroupValueError):
    "A value required to be a positive integer is not."


class NotNonNegativeError(ECGroupValueError):
    "An exponent is negative."


class NotAPrimeError(ECGroupValueError):
    "A modulus required to be prime is not."


class NotNonSingularError(ECGroupValueError):
    "Both curve coefficients are zero."


class NotOnCurveError(ECGroupValueError):
    "A point does not satisfy the curve equation."
