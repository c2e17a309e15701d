#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""secp256k1 domain parameters and group law.

The elliptic curve is the set of points (x, y)
that are solutions to the Weierstrass equation y^2 = x^3 + 7,
with x, y in Fp, together with the point at infinity INF.

Domain parameters are from SEC 2 v.2, section 2.4.1:
https://www.secg.org/sec2-v2.pdf

The group law is implemented in affine coordinates:
each addition or doubling costs a single modular inverse.
Input points are assumed to be on curve: this is not checked.
"""

from enum import Enum

from walletcrypto.alias import FieldElement
from walletcrypto.field import div_mod, is_zero, mul_mod, sub_mod
from walletcrypto.point import INF, Point

# field prime
P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
# curve coefficients
A = 0
B = 7
# generator
G = Point(
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)
# group order
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def p() -> FieldElement:
    return P


def g() -> Point:
    return G


def n() -> int:
    return N


class PairKind(Enum):
    "Classification of a pair of points with respect to the group law."

    LEFT_IDENTITY = "left identity"
    RIGHT_IDENTITY = "right identity"
    EQUAL = "equal"
    OPPOSITE = "opposite"
    GENERIC = "generic"


def classify(Q1: Point, Q2: Point) -> PairKind:
    """Return the PairKind of (Q1, Q2).

    Points sharing the x-coordinate are either equal or opposite:
    on a curve there are at most two points with a given x.
    """

    if Q1.is_identity():
        return PairKind.LEFT_IDENTITY
    if Q2.is_identity():
        return PairKind.RIGHT_IDENTITY
    if Q1.x == Q2.x:
        return PairKind.EQUAL if Q1.y == Q2.y else PairKind.OPPOSITE
    return PairKind.GENERIC


def add(Q1: Point, Q2: Point) -> Point:
    """Return the sum of two points.

    The sum is defined for every pair of points on the curve:
    equal points are doubled, opposite points sum to INF.
    """

    kind = classify(Q1, Q2)
    if kind is PairKind.LEFT_IDENTITY:
        return Q2
    if kind is PairKind.RIGHT_IDENTITY:
        return Q1
    if kind is PairKind.EQUAL:
        return double(Q1)
    if kind is PairKind.OPPOSITE:
        return INF

    # lambda = (y1 - y2) / (x1 - x2)
    lam = div_mod(sub_mod(Q1.y, Q2.y, P), sub_mod(Q1.x, Q2.x, P), P)
    # x3 = lambda^2 - x1 - x2
    x = sub_mod(sub_mod(mul_mod(lam, lam, P), Q1.x, P), Q2.x, P)
    # y3 = lambda * (x1 - x3) - y1
    y = sub_mod(mul_mod(lam, sub_mod(Q1.x, x, P), P), Q1.y, P)
    return Point(x, y)


def double(Q: Point) -> Point:
    """Return Q + Q.

    A point with y = 0 has order two (vertical tangent):
    its double is INF.
    """

    if Q.is_identity() or is_zero(Q.y):
        return INF

    # lambda = (3 * x^2 + a) / (2 * y), with a = 0
    three_x2 = mul_mod(3, mul_mod(Q.x, Q.x, P), P)
    lam = div_mod(three_x2, mul_mod(2, Q.y, P), P)
    # x3 = lambda^2 - 2 * x
    x = sub_mod(sub_mod(mul_mod(lam, lam, P), Q.x, P), Q.x, P)
    # y3 = lambda * (x - x3) - y
    y = sub_mod(mul_mod(lam, sub_mod(Q.x, x, P), P), Q.y, P)
    return Point(x, y)


def negate(Q: Point) -> Point:
    """Return the opposite point.

    The input point is not checked to be on the curve.
    """

    if Q.is_identity():
        return INF
    # % P is required for points with y = 0
    return Point(Q.x, (P - Q.y) % P)
