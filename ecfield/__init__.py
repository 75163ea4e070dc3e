#!/usr/bin/env python3

# Copyright (C) The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecfield package."

import logging

name = "ecfield"
__version__ = "0.1.0"
__author__ = "The ecfield developers"
__copyright__ = "Copyright (C) The ecfield developers"
__license__ = "MIT License"

logging.getLogger(__name__).addHandler(logging.NullHandler())
