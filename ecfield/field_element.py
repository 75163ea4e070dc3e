#!/usr/bin/env python3

# Copyright (C) The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elements of the prime field Fp.

A FieldElement is an immutable residue num modulo prime,
with 0 <= num < prime.
The prime is not tested for primality:
exponentiation and division rely on Fermat's little theorem
and are meaningful only if it is a prime.

Binary operations require both operands to belong to the same field,
i.e. to share the same prime.
"""

from dataclasses import InitVar, dataclass
from typing import Any, Type, TypeVar

from dataclasses_json import DataClassJsonMixin

from ecfield.exceptions import (
    ECFieldTypeError,
    FieldMismatchError,
    FieldRangeError,
    FieldZeroDivisionError,
)
from ecfield.number_theory import legendre_symbol, mod_sqrt
from ecfield.utils import int_repr

_FieldElement = TypeVar("_FieldElement", bound="FieldElement")


def _require_int(value: Any, what: str) -> None:
    # bool is an int subclass, but never a meaningful residue
    if isinstance(value, bool) or not isinstance(value, int):
        raise ECFieldTypeError(f"{what} is not an int: {value!r}")


@dataclass(frozen=True)
class FieldElement(DataClassJsonMixin):
    """Residue num modulo prime.

    Operations never modify the element:
    each of them returns a new, validated, FieldElement.
    """

    # 0 <= num < prime
    num: int
    # prime > 1
    prime: int
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        _require_int(self.num, "num")
        _require_int(self.prime, "prime")
        if self.prime < 2:
            raise FieldRangeError(f"invalid prime: {self.prime}")
        if not 0 <= self.num < self.prime:
            err_msg = f"num not in field range 0..{int_repr(self.prime - 1)}: "
            err_msg += f"{int_repr(self.num)}" if self.num >= 0 else f"{self.num}"
            raise FieldRangeError(err_msg)

    @classmethod
    def zero(cls: Type[_FieldElement], prime: int) -> _FieldElement:
        return cls(0, prime)

    @classmethod
    def one(cls: Type[_FieldElement], prime: int) -> _FieldElement:
        return cls(1, prime)

    def __str__(self) -> str:
        return f"FieldElement_{int_repr(self.prime)}({int_repr(self.num)})"

    def __int__(self) -> int:
        return self.num

    def _require_same_field(self, other: Any, operation: str) -> None:
        if not isinstance(other, FieldElement):
            raise ECFieldTypeError(f"not a FieldElement: {other!r}")
        if self.prime != other.prime:
            err_msg = f"cannot {operation} elements of different fields: "
            err_msg += f"{int_repr(self.prime)} vs {int_repr(other.prime)}"
            raise FieldMismatchError(err_msg)

    def is_zero(self) -> bool:
        return self.num == 0

    def add(self: _FieldElement, other: "FieldElement") -> _FieldElement:
        self._require_same_field(other, "add")
        return type(self)((self.num + other.num) % self.prime, self.prime)

    def sub(self: _FieldElement, other: "FieldElement") -> _FieldElement:
        self._require_same_field(other, "subtract")
        return type(self)((self.num - other.num) % self.prime, self.prime)

    def mul(self: _FieldElement, other: "FieldElement") -> _FieldElement:
        self._require_same_field(other, "multiply")
        return type(self)((self.num * other.num) % self.prime, self.prime)

    def neg(self: _FieldElement) -> _FieldElement:
        return type(self)(-self.num % self.prime, self.prime)

    def pow(self: _FieldElement, exponent: int) -> _FieldElement:
        """Return num^exponent (mod prime).

        For a nonzero num the exponent is reduced mod (prime - 1),
        as num^(prime - 1) = 1 (Fermat's little theorem);
        negative exponents are therefore powers of the inverse.

        The zero element has no inverse: 0^0 = 1, 0^e = 0 for e > 0,
        while a negative exponent raises FieldZeroDivisionError.
        """

        _require_int(exponent, "exponent")
        if self.num == 0:
            if exponent < 0:
                raise FieldZeroDivisionError(f"negative power of zero: {exponent}")
            return type(self)(0 if exponent else 1, self.prime)

        exponent %= self.prime - 1
        # three-argument pow reduces mod prime at every step
        return type(self)(pow(self.num, exponent, self.prime), self.prime)

    def inverse(self: _FieldElement) -> _FieldElement:
        "Return the multiplicative inverse, i.e. num^(prime - 2)."
        if self.num == 0:
            raise FieldZeroDivisionError("zero has no inverse")
        return self.pow(self.prime - 2)

    def div(self: _FieldElement, other: "FieldElement") -> _FieldElement:
        self._require_same_field(other, "divide")
        if other.num == 0:
            raise FieldZeroDivisionError("division by zero field element")
        return self.mul(other.inverse())

    def is_square(self) -> bool:
        "Return True if the element is a quadratic residue (zero included)."
        if self.num == 0 or self.prime == 2:
            return True
        return legendre_symbol(self.num, self.prime) == 1

    def sqrt(self: _FieldElement) -> _FieldElement:
        """Return a square root of the element.

        The other root is its opposite.
        ECFieldValueError is raised for quadratic non-residues.
        """
        return type(self)(mod_sqrt(self.num, self.prime), self.prime)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __pow__ = pow
    __neg__ = neg
