#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `walletcrypto.field` module."

import secrets

import pytest

from walletcrypto.curve import P
from walletcrypto.exceptions import WalletCryptoValueError
from walletcrypto.field import (
    bytes_from_int,
    div_mod,
    hex_from_int,
    int_from_hex,
    is_zero,
    mod_inv,
    mul_mod,
    sub_mod,
    xgcd,
)

primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61]


def test_xgcd() -> None:
    g, x, y = xgcd(240, 46)
    assert g == 2
    assert 240 * x + 46 * y == g


def test_mod_inv_prime() -> None:
    for p in primes:
        with pytest.raises(WalletCryptoValueError, match="No inverse for "):
            mod_inv(0, p)
        for a in range(1, p):
            inv = mod_inv(a, p)
            assert a * inv % p == 1
            inv = mod_inv(a + p, p)
            assert a * inv % p == 1


def test_mod_inv_composite() -> None:
    assert mod_inv(3, 10) == 7
    with pytest.raises(WalletCryptoValueError, match="No inverse for 4 mod 10"):
        mod_inv(4, 10)

    err_msg = "No inverse for 0 mod FFFFFFFF"
    with pytest.raises(WalletCryptoValueError, match=err_msg):
        mod_inv(0, P)


def test_modular_operations() -> None:
    assert sub_mod(3, 5, 7) == 5
    assert sub_mod(5, 3, 7) == 2
    assert mul_mod(3, 5, 7) == 1
    assert div_mod(1, 3, 7) == 5
    assert div_mod(6, 3, 7) == 2

    a = secrets.randbelow(P)
    b = 1 + secrets.randbelow(P - 1)
    assert mul_mod(div_mod(a, b, P), b, P) == a
    assert sub_mod(a, a, P) == 0
    assert 0 <= sub_mod(0, b, P) < P

    with pytest.raises(WalletCryptoValueError, match="No inverse for "):
        div_mod(a, 0, P)
    with pytest.raises(WalletCryptoValueError, match="No inverse for "):
        div_mod(a, P, P)


def test_is_zero() -> None:
    assert is_zero(0)
    assert not is_zero(1)
    assert is_zero(sub_mod(P, 0, P))


def test_int_from_hex() -> None:
    assert int_from_hex("ff") == 255
    assert int_from_hex("FF") == 255
    assert int_from_hex("0xff") == 255
    assert int_from_hex(" 0x0 ") == 0
    assert int_from_hex("00" * 32) == 0
    p_hex = "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F"
    assert int_from_hex(p_hex) == P

    invalid_hex = ("", " ", "0x", "0xg1", "not hex", "-ff", "+ff", "f_f", "0x-1")
    for invalid in invalid_hex:
        with pytest.raises(WalletCryptoValueError, match="invalid hex-string: "):
            int_from_hex(invalid)

    # non-ASCII decimal digits: arabic-indic, fullwidth, devanagari
    for invalid in ("\u0661\u0662", "\uff11\uff12", "0x\u0967", "f\uff10"):
        with pytest.raises(WalletCryptoValueError, match="invalid hex-string: "):
            int_from_hex(invalid)

    for invalid in (12, None, b"ff"):
        with pytest.raises(WalletCryptoValueError, match="not a hex-string: "):
            int_from_hex(invalid)  # type: ignore


def test_bytes_from_int() -> None:
    assert bytes_from_int(0) == b"\x00" * 32
    assert bytes_from_int(1) == b"\x00" * 31 + b"\x01"
    assert bytes_from_int(2**256 - 1) == b"\xff" * 32
    assert bytes_from_int(0x0102, 2) == b"\x01\x02"

    with pytest.raises(WalletCryptoValueError, match="integer too large for 32 bytes"):
        bytes_from_int(2**256)
    with pytest.raises(WalletCryptoValueError, match="negative integer: "):
        bytes_from_int(-1)


def test_hex_from_int() -> None:
    assert hex_from_int(0) == "0" * 64
    assert hex_from_int(0xABC) == "0" * 61 + "abc"
    assert hex_from_int(P) == "ffffffff" * 6 + "fffffffe" + "fffffc2f"
    assert hex_from_int(2**256 - 1) == "f" * 64
