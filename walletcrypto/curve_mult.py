#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Scalar multiplication of secp256k1 points.

The scalar is not reduced mod n and is not checked to be a valid
private key: see walletcrypto.to_pub_key for that.
"""

import logging
from typing import Callable, List, Optional

from walletcrypto.alias import Integer
from walletcrypto.curve import G, add, double
from walletcrypto.exceptions import WalletCryptoValueError
from walletcrypto.field import bytes_from_int
from walletcrypto.point import INF, Point
from walletcrypto.utils import bits_from_bytes, int_from_integer

SCALAR_SIZE = 32

# tracer(step, bit, accumulator) is called after each step of the loop
StepTracer = Callable[[int, int, Point], None]


def scalar_bits(scalar: Integer) -> List[int]:
    """Return the 256 bits of the scalar, most significant bit first.

    The scalar must be in 0..2^256-1.
    """

    m = int_from_integer(scalar)
    if m < 0:
        raise WalletCryptoValueError(f"negative scalar: {hex(m)}")
    try:
        scalar_bytes = bytes_from_int(m, SCALAR_SIZE)
    except WalletCryptoValueError as e:
        raise WalletCryptoValueError(f"scalar too large: {hex(m)}") from e
    return bits_from_bytes(scalar_bytes)


def point_multiply(
    scalar: Integer, Q: Point = G, tracer: Optional[StepTracer] = None
) -> Point:
    """Return scalar * Q.

    This implementation uses
    'double & add always' algorithm,
    'left-to-right' binary decomposition of the 256-bit scalar,
    affine coordinates.

    Each step doubles the accumulator and then adds either INF or Q,
    selected by the bit value:
    the sequence of group operations does not depend on the scalar.
    The group law itself is not constant-time.

    The input point is assumed to be on curve.
    """

    # at each step one of these points is added
    T = [INF, Q]
    R = INF
    for step, bit in enumerate(scalar_bits(scalar)):
        R = add(double(R), T[bit])
        if tracer is not None:
            tracer(step, bit, R)
    return R


def mult_double_and_add(scalar: Integer, Q: Point = G) -> Point:
    """Return scalar * Q.

    This implementation uses
    'double & add' algorithm,
    'left-to-right' binary decomposition of the 256-bit scalar,
    affine coordinates.

    Leading zero bits are skipped and Q is added only for set bits:
    both the running time and the control flow depend on the scalar.
    Use point_multiply for secret scalars.
    """

    R = INF
    started = False
    for bit in scalar_bits(scalar):
        if started:
            R = double(R)
        if bit:
            R = add(R, Q)
            started = True
    return R


def pr_to_pub(scalar: Integer) -> Point:
    "Return the public key point scalar * G."
    return point_multiply(scalar, G)


def step_logger(logger: logging.Logger, level: int = logging.DEBUG) -> StepTracer:
    """Return a tracer logging every scalar multiplication step.

    The bit value of each step is logged too:
    do not enable it for secret scalars outside debugging sessions.
    """

    def tracer(step: int, bit: int, R: Point) -> None:
        logger.log(level, "step: %d, bit: %d, accumulator: %s", step, bit, R)

    return tracer
