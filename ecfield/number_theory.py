#!/usr/bin/env python3

# Copyright (C) The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular square roots over a prime field.

Plain int functions used by ecfield.field_element:
the prime p is assumed to be a prime, it is not checked here.

Tonelli-Shanks implementation originally from
https://codereview.stackexchange.com/questions/43210/tonelli-shanks-algorithm-implementation-of-prime-modular-square-root/43267
"""

from ecfield.exceptions import ECFieldValueError
from ecfield.utils import int_repr


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    It returns 1 if a has a square root modulo p, -1 if it has not,
    and 0 if p divides a.
    """

    ls = pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls


def _no_root(a: int, p: int) -> ECFieldValueError:
    return ECFieldValueError(f"no root for {int_repr(a)} mod {int_repr(p)}")


def mod_sqrt(a: int, p: int) -> int:
    """Return a square root (mod p) of a.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.

    The closed forms for p = 3 mod 4 and p = 5 mod 8 are tried first,
    falling back to the Tonelli-Shanks algorithm otherwise.
    """

    a %= p
    if a == 0 or p == 2:
        return a

    if p % 4 == 3:
        r = pow(a, (p + 1) // 4, p)
    elif p % 8 == 5:
        r = pow(a, (p + 3) // 8, p)
        if r * r % p != a:
            # multiply by a square root of -1
            r = r * pow(2, (p - 1) // 4, p) % p
    else:
        return tonelli(a, p)

    if r * r % p != a:
        raise _no_root(a, p)
    return r


def tonelli(a: int, p: int) -> int:
    "Return a square root (mod p) of a using the Tonelli-Shanks algorithm."

    a %= p
    if a == 0 or p == 2:
        return a

    if legendre_symbol(a, p) != 1:
        raise _no_root(a, p)

    # p - 1 = q * 2^s with q odd
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1
    if s == 1:
        return pow(a, (p + 1) // 4, p)

    # any quadratic non-residue will do
    z = 2
    while legendre_symbol(z, p) != -1:
        z += 1

    m = s
    c = pow(z, q, p)
    t = pow(a, q, p)
    r = pow(a, (q + 1) // 2, p)
    while t != 1:
        # least i, 0 < i < m, such that t^(2^i) = 1
        i, t2i = 1, t * t % p
        while t2i != 1:
            t2i = t2i * t2i % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        r = r * b % p
    return r
