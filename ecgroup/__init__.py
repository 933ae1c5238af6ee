#!/usr/bin/env python3

# Copyright (C) 2026 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecgroup package."

import logging

name = "ecgroup"
__version__ = "2026.10.19"
__author__ = "The ecgroup developers"
__author_email__ = "devs@ecgroup.org"
__copyright__ = "Copyright (C) 2026 The ecgroup developers"
__license__ = "MIT License"

logging.getLogger(__name__).addHandler(logging.NullHandler())
