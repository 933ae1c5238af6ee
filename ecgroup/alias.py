#!/usr/bin/env python3

# Copyright (C) 2026 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Union

from ecgroup.point import Affine, Inf

Integer = Union[bytes, str, int]

Point = Union[Inf, Affine]
