#!/usr/bin/env python3

# Copyright (C) 2026 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

Deliberately naive implementations, meant for the small primes
used to explore elliptic curve groups by hand:

* trial division primality test and factorization
* repeated multiplication (not square & multiply) modular power
* quadratic residues enumerated with Euler's criterion
"""

import functools
from typing import FrozenSet, List, Tuple

from ecgroup.exceptions import NotAPrimeError, NotNonNegativeError, NotPositiveError
from ecgroup.utils import str_from_int


def is_prime(n: int) -> bool:
    "Return True if n is prime, using trial division by odd numbers."

    if n <= 0:
        raise NotPositiveError(f"not a positive integer: {str_from_int(n)}")
    if n == 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    odd = 3
    while odd * odd <= n:
        if n % odd == 0:
            return False
        odd += 2
    return True


def prime_factors(n: int) -> List[Tuple[int, int]]:
    """Return the (prime, exponent) factorization of n.

    Primes are in ascending order; the factorization of 1 is empty.
    """

    if is_prime(n):
        return [(n, 1)]
    if n == 1:
        return []

    factors: List[Tuple[int, int]] = []
    m = n
    p = 2
    while p * p <= n:
        if m % p == 0:
            e = 0
            while m % p == 0:
                m //= p
                e += 1
            factors.append((p, e))
        p += 1
    if m != 1:
        factors.append((m, 1))
    return factors


def is_prime_pow(n: int) -> bool:
    "Return True if n is a power (exponent >= 1) of a single prime."
    return len(prime_factors(n)) == 1


def gcd(a: int, b: int) -> int:
    "Return the non-negative greatest common divisor of a and b."

    a, b = abs(a), abs(b)
    while a != 0:
        a, b = b % a, a
    return b


def mod_pow(base: int, exp: int, modulo: int) -> int:
    """Return base^exp (mod modulo).

    The power is computed by exp-1 multiplications,
    each followed by a reduction mod modulo:
    linear in exp, acceptable only for small exponents.
    """

    if modulo < 1:
        raise NotPositiveError(f"not a positive modulo: {str_from_int(modulo)}")
    if exp < 0:
        raise NotNonNegativeError(f"negative exponent: {str_from_int(exp)}")

    if modulo == 1:
        return 0
    if exp == 0:
        return 1
    if base == 0:
        return 0

    base %= modulo
    result = base
    for _ in range(1, exp):
        result = result * base % modulo
    return result


def qr_mod_prime(p: int) -> List[int]:
    """Return the ascending list of the quadratic residues mod p.

    0 and 1 are always included;
    i in [2, p) is included if i^((p-1)/2) = 1 (mod p),
    i.e. according to Euler's criterion.
    """

    if not is_prime(p):
        raise NotAPrimeError(f"not a prime: {str_from_int(p)}")

    qrs = [0, 1]
    exp = (p - 1) // 2
    qrs.extend(i for i in range(2, p) if mod_pow(i, exp, p) == 1)
    return qrs


@functools.lru_cache()
def _quadratic_residues(p: int) -> FrozenSet[int]:
    return frozenset(qr_mod_prime(p))


def legendre(a: int, p: int) -> int:
    """Return the Legendre symbol (a|p).

    It is 0 if a and p are not coprime,
    1 if a is a quadratic residue mod p, -1 otherwise.
    p must be prime.
    """

    qrs = _quadratic_residues(p)
    if gcd(a, p) != 1:
        return 0
    return 1 if a % p in qrs else -1
