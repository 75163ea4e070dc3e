#!/usr/bin/env python3

# Copyright (C) The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecfield` package metadata."

import logging

import ecfield


def test_metadata() -> None:
    assert ecfield.name == "ecfield"
    assert ecfield.__version__ == "0.1.0"
    assert ecfield.__author__ == "The ecfield developers"
    assert ecfield.__copyright__ == "Copyright (C) The ecfield developers"
    assert ecfield.__license__ == "MIT License"
    assert not hasattr(ecfield, "__author_email__")


def test_null_handler() -> None:
    handlers = logging.getLogger("ecfield").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
