#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Helper functions to use the libsecp256k1 python bindings.

The bindings are an optional dependency ('secp256k1' extra):
they provide an independent, trusted implementation
to cross-check the pure python arithmetic against.
"""

import contextlib

from walletcrypto.curve import N
from walletcrypto.exceptions import WalletCryptoRuntimeError
from walletcrypto.field import bytes_from_int
from walletcrypto.point import INF, Point

LIBSECP256K1_AVAILABLE = False
with contextlib.suppress(ImportError):
    from btclib_libsecp256k1 import ffi, lib

    LIBSECP256K1_AVAILABLE = True
    # Keeping a single one of these is most efficient.
    ctx = lib.secp256k1_context_create(769)
    EC_COMPRESSED = 258  # lib.SECP256K1_EC_COMPRESSED
    EC_UNCOMPRESSED = 2  # lib.SECP256K1_EC_UNCOMPRESSED


def is_available() -> bool:
    return LIBSECP256K1_AVAILABLE


def pub_key_from_prv_key(prv_key: int, compressed: bool = False) -> bytes:
    """Derive the SEC 1 public key from a private key.

    The private key must be in 1..n-1.
    """

    if not is_available():
        raise WalletCryptoRuntimeError("libsecp256k1 bindings not available")

    pubkey_ptr = ffi.new("secp256k1_pubkey *")
    if not lib.secp256k1_ec_pubkey_create(ctx, pubkey_ptr, bytes_from_int(prv_key)):
        raise WalletCryptoRuntimeError("secp256k1_ec_pubkey_create failure")
    length_ = 33 if compressed else 65
    serialized_pubkey_ptr = ffi.new(f"char[{length_}]")
    length = ffi.new("size_t *", length_)
    lib.secp256k1_ec_pubkey_serialize(
        ctx,
        serialized_pubkey_ptr,
        length,
        pubkey_ptr,
        EC_COMPRESSED if compressed else EC_UNCOMPRESSED,
    )  # according to documentation, it always returns 1
    return ffi.unpack(serialized_pubkey_ptr, length_)


def mult(num: int) -> Point:
    "Multiply the generator point."

    m = num % N
    if m == 0:
        return INF
    pub_key = pub_key_from_prv_key(m)
    x_Q = int.from_bytes(pub_key[1:33], "big")
    return Point(x_Q, int.from_bytes(pub_key[33:], "big"))
