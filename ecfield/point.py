#!/usr/bin/env python3

# Copyright (C) The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points and their group law.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fp (p being a prime),
together with a point at infinity, the group identity,
represented here by absent (None) coordinates.

Curves are not objects of their own:
each Point carries its a and b coefficients
and points can be added only if their coefficients match.
"""

import logging
from dataclasses import InitVar, dataclass
from typing import Any, Optional, Type, TypeVar

from dataclasses_json import DataClassJsonMixin

from ecfield.exceptions import (
    CurveMismatchError,
    ECFieldTypeError,
    ECFieldValueError,
    FieldMismatchError,
    NotOnCurveError,
)
from ecfield.field_element import FieldElement
from ecfield.utils import int_repr

_LOGGER = logging.getLogger(__name__)

_Point = TypeVar("_Point", bound="Point")


@dataclass(frozen=True)
class Point(DataClassJsonMixin):
    """Affine point of the curve y^2 = x^3 + a*x + b over Fp.

    If either coordinate is None the point is the point at infinity:
    both coordinates are then set to None
    and, as no curve equation check is performed,
    it can be built for any a and b.
    """

    x: Optional[FieldElement]
    y: Optional[FieldElement]
    a: FieldElement
    b: FieldElement
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if self.x is None or self.y is None:
            object.__setattr__(self, "x", None)
            object.__setattr__(self, "y", None)
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        elements = [self.a, self.b]
        if self.x is not None:
            elements += [self.x, self.y]
        for element in elements:
            if not isinstance(element, FieldElement):
                raise ECFieldTypeError(f"not a FieldElement: {element!r}")

        primes = sorted({element.prime for element in elements})
        if len(primes) > 1:
            err_msg = "coordinates and coefficients in different fields: "
            err_msg += ", ".join(int_repr(p) for p in primes)
            raise FieldMismatchError(err_msg)

        if not self.is_on_curve():
            raise NotOnCurveError(f"point not on curve: {self}")

    @classmethod
    def identity(cls: Type[_Point], a: FieldElement, b: FieldElement) -> _Point:
        "Return the point at infinity of the curve with coefficients a, b."
        return cls(None, None, a, b)

    @property
    def prime(self) -> int:
        return self.a.prime

    def __str__(self) -> str:
        if self.x is None or self.y is None:
            return "Point(INF)"
        return f"Point({int_repr(self.x.num)}, {int_repr(self.y.num)})"

    def is_identity(self) -> bool:
        return self.x is None

    def is_on_curve(self) -> bool:
        if self.x is None or self.y is None:
            return True
        return self.y ** 2 == self.x ** 3 + self.a * self.x + self.b

    def _require_same_curve(self, other: Any) -> None:
        if not isinstance(other, Point):
            raise ECFieldTypeError(f"not a Point: {other!r}")
        if self.a != other.a or self.b != other.b:
            err_msg = "points are not on the same curve: "
            err_msg += f"a={self.a}, b={self.b} vs a={other.a}, b={other.b}"
            raise CurveMismatchError(err_msg)

    def neg(self: _Point) -> _Point:
        "Return the opposite point (x, -y)."
        if self.x is None or self.y is None:
            return self
        return type(self)(self.x, -self.y, self.a, self.b)

    def _chord_tangent(self: _Point, s: FieldElement, x2: FieldElement) -> _Point:
        # third intersection of the line of slope s, reflected over the x-axis
        x1, y1 = self.x, self.y
        x3 = s ** 2 - x1 - x2
        y3 = s * (x1 - x3) - y1
        return type(self)(x3, y3, self.a, self.b)

    def double(self: _Point) -> _Point:
        if self.x is None or self.y is None:
            return self

        if self.y.is_zero():
            # vertical tangent: 2-torsion point
            _LOGGER.debug("doubling 2-torsion %s", self)
            return self.identity(self.a, self.b)

        p = self.prime
        s = (FieldElement(3, p) * self.x ** 2 + self.a) / (FieldElement(2, p) * self.y)
        return self._chord_tangent(s, self.x)

    def add(self: _Point, other: _Point) -> _Point:
        """Return the sum of two points.

        Both points must have the same curve coefficients.
        """

        self._require_same_curve(other)

        if self.x is None or self.y is None:
            return other
        if other.x is None or other.y is None:
            return self

        if self.x == other.x:
            if self.y != other.y:
                # opposite points
                return self.identity(self.a, self.b)
            return self.double()

        s = (other.y - self.y) / (other.x - self.x)
        return self._chord_tangent(s, other.x)

    def sub(self: _Point, other: _Point) -> _Point:
        self._require_same_curve(other)
        return self.add(other.neg())

    def scalar_mul(self: _Point, coefficient: int) -> _Point:
        """Return coefficient * self.

        This implementation uses
        'double & add' algorithm,
        'right-to-left' binary decomposition of the coefficient,
        affine coordinates.
        """

        if isinstance(coefficient, bool) or not isinstance(coefficient, int):
            raise ECFieldTypeError(f"coefficient is not an int: {coefficient!r}")
        if coefficient < 0:
            raise ECFieldValueError(f"negative coefficient: {hex(coefficient)}")

        _LOGGER.debug(
            "scalar multiplication of %s by a %d-bit coefficient",
            self,
            coefficient.bit_length(),
        )
        result = self.identity(self.a, self.b)
        current = self
        while coefficient > 0:
            if coefficient & 1:
                result = result.add(current)
            # the doubling part of 'double & add'
            current = current.double()
            coefficient >>= 1
        return result

    def __mul__(self: _Point, coefficient: int) -> _Point:
        return self.scalar_mul(coefficient)

    __rmul__ = __mul__
    __add__ = add
    __sub__ = sub
    __neg__ = neg
