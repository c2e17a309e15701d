#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Octets conversions follow SEC 1 v.2 2.3.

https://www.secg.org/sec1-v2.pdf
"""

import string
from typing import List, Optional

from walletcrypto.alias import Integer, Octets
from walletcrypto.exceptions import WalletCryptoValueError

HEX_DIGITS = frozenset(string.hexdigits)


def bytes_from_octets(octets: Octets, out_size: Optional[int] = None) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    If the input is not a string, then it goes untouched.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        try:
            octets = bytes.fromhex(octets)
        except ValueError as e:
            raise WalletCryptoValueError(f"invalid hex-string: {octets!r}") from e

    if out_size is None or len(octets) == out_size:
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise WalletCryptoValueError(err_msg)


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'

    The binary representation is not allowed because there is no way to
    discriminate it from a valid hex-string
    (e.g. "0b11011110101011011011111011101111").
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x"):
            return int_from_hex(i)
        if i.startswith("-0x"):
            return -int_from_hex(i[1:])
        try:
            i = bytes.fromhex(i)
        except ValueError as e:
            raise WalletCryptoValueError(f"invalid hex-string: {i!r}") from e

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def int_from_hex(hex_str: str) -> int:
    """Return the non-negative int represented by a hex-string.

    A leading '0x' and leading/trailing blanks are accepted,
    letter case is irrelevant.
    Only ASCII hex-digits are allowed.
    """

    if not isinstance(hex_str, str):
        raise WalletCryptoValueError(f"not a hex-string: {hex_str!r}")
    digits = hex_str.strip()
    if digits[:2].lower() == "0x":
        digits = digits[2:]
    # int() would also accept non-ASCII digits, '_' separators and a sign
    if not digits or not HEX_DIGITS.issuperset(digits):
        raise WalletCryptoValueError(f"invalid hex-string: {hex_str!r}")
    return int(digits, 16)


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise WalletCryptoValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def bits_from_bytes(data: bytes) -> List[int]:
    """Return the bits of a byte sequence, most significant bit first.

    Each byte contributes exactly eight bits,
    leading zero bits included.
    """

    return [(byte >> shift) & 1 for byte in data for shift in range(7, -1, -1)]
