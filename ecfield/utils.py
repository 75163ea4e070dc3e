#!/usr/bin/env python3

# Copyright (C) The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Rendering helpers for the integers in error messages and string forms."

from ecfield.exceptions import ECFieldValueError

# integers above this threshold are rendered as hex-strings
HEX_THRESHOLD = 0xFFFFFFFF


def hex_string(i: int) -> str:
    """Return the upper case hex-string of a non negative int.

    The hex-string has an even number of hex-digits,
    grouped by four bytes (eight hex-digits) separated by a space.
    """

    if i < 0:
        raise ECFieldValueError(f"negative integer: {i}")
    digits = f"{i:X}"
    if len(digits) % 2:
        digits = "0" + digits
    # leftmost group may be shorter
    head = len(digits) % 8 or 8
    groups = [digits[:head]]
    groups += [digits[j : j + 8] for j in range(head, len(digits), 8)]
    return " ".join(groups)


def int_repr(i: int) -> str:
    "Return the decimal or (above HEX_THRESHOLD) quoted hex rendering of i."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
