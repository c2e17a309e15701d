#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic over the prime field Fp.

Field elements are native python ints.
All functions return values reduced in 0..p-1.

Modular inverse from
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
"""

from typing import Tuple

from walletcrypto.alias import FieldElement
from walletcrypto.exceptions import WalletCryptoValueError
from walletcrypto.utils import hex_string, int_from_hex

__all__ = [
    "bytes_from_int",
    "div_mod",
    "hex_from_int",
    "int_from_hex",
    "is_zero",
    "mod_inv",
    "mul_mod",
    "sub_mod",
    "xgcd",
]

HEX_THRESHOLD = 0xFFFFFFFF


def _int_repr(i: int) -> str:
    return hex_string(i) if i > HEX_THRESHOLD else f"{i}"


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(x, y).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime."""

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise WalletCryptoValueError(f"No inverse for {_int_repr(a)} mod {_int_repr(m)}")


def sub_mod(a: FieldElement, b: FieldElement, p: int) -> FieldElement:
    return (a - b) % p


def mul_mod(a: FieldElement, b: FieldElement, p: int) -> FieldElement:
    return (a * b) % p


def div_mod(a: FieldElement, b: FieldElement, p: int) -> FieldElement:
    "Return a * b^-1 (mod p)."
    return (a * mod_inv(b, p)) % p


def is_zero(a: FieldElement) -> bool:
    return a == 0


def bytes_from_int(a: FieldElement, size: int = 32) -> bytes:
    "Return the fixed-width big-endian representation of a."

    if a < 0:
        raise WalletCryptoValueError(f"negative integer: {a}")
    if a.bit_length() > size * 8:
        err_msg = f"integer too large for {size} bytes: {_int_repr(a)}"
        raise WalletCryptoValueError(err_msg)
    return a.to_bytes(size, byteorder="big", signed=False)


def hex_from_int(a: FieldElement, size: int = 32) -> str:
    "Return the fixed-width lowercase hex representation of a."
    return bytes_from_int(a, size).hex()
