#!/usr/bin/env python3

# Copyright (C) The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are meant to discriminate between Exceptions being raised
by ecfield from those raised by other codebase,
and to tell apart the different kinds of misuse.

Users are usually better off just dealing with the regular
ValueError, TypeError, and ZeroDivisionError
from which the ecfield versions are derived.
"""


class ECFieldValueError(ValueError):
    pass


class ECFieldTypeError(TypeError):
    pass


class FieldRangeError(ECFieldValueError):
    "A field element value (or its prime) is out of range."


class FieldMismatchError(ECFieldValueError):
    "Field elements belong to fields with different primes."


class NotOnCurveError(ECFieldValueError):
    "Point coordinates do not satisfy the curve equation."


class CurveMismatchError(ECFieldValueError):
    "Points belong to curves with different coefficients."


class FieldZeroDivisionError(ECFieldValueError, ZeroDivisionError):
    "Division by (or inverse of) the zero field element."
