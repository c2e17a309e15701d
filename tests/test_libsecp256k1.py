#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Cross-check `walletcrypto` arithmetic against the libsecp256k1 bindings."

import secrets

import pytest

from walletcrypto import libsecp256k1
from walletcrypto.curve import G, N
from walletcrypto.curve_mult import pr_to_pub
from walletcrypto.exceptions import WalletCryptoRuntimeError
from walletcrypto.point import INF
from walletcrypto.to_pub_key import pub_key_from_prv_key

requires_libsecp256k1 = pytest.mark.skipif(
    not libsecp256k1.is_available(), reason="libsecp256k1 bindings not installed"
)


@requires_libsecp256k1
def test_mult() -> None:
    assert libsecp256k1.mult(0) == INF
    assert libsecp256k1.mult(1) == G
    assert libsecp256k1.mult(N) == INF
    for q in (2, 3, N - 1):
        assert libsecp256k1.mult(q) == pr_to_pub(q)


@requires_libsecp256k1
def test_random_private_keys() -> None:
    for _ in range(16):
        q = 1 + secrets.randbelow(N - 1)
        expected = libsecp256k1.pub_key_from_prv_key(q)
        assert pr_to_pub(q).to_hex_string() == expected.hex()
        assert pub_key_from_prv_key(q) == expected
        expected = libsecp256k1.pub_key_from_prv_key(q, compressed=True)
        assert pub_key_from_prv_key(q, compressed=True) == expected


@pytest.mark.skipif(libsecp256k1.is_available(), reason="libsecp256k1 installed")
def test_not_available() -> None:
    with pytest.raises(WalletCryptoRuntimeError, match="not available"):
        libsecp256k1.pub_key_from_prv_key(1)
