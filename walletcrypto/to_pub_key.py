#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Functions for conversions from private key to public key."

from walletcrypto.alias import Integer
from walletcrypto.curve import N
from walletcrypto.curve_mult import pr_to_pub
from walletcrypto.exceptions import WalletCryptoValueError
from walletcrypto.sec_point import bytes_from_point
from walletcrypto.utils import bytes_from_octets, hex_string, int_from_hex

# private key inputs:
# integer as int, 32 bytes, or hex-string
PrvKey = Integer


def int_from_prv_key(prv_key: PrvKey) -> int:
    """Return a verified-as-valid private key integer.

    It supports:

    - integer (native int or '0x'-prefixed hex-string)
    - 32 bytes (bytes or hex-string)

    Valid private keys are in 1..n-1.
    """

    if isinstance(prv_key, int):
        q = prv_key
    elif isinstance(prv_key, str) and prv_key.strip().lower().startswith("0x"):
        try:
            q = int_from_hex(prv_key)
        except WalletCryptoValueError as e:
            raise WalletCryptoValueError(f"invalid private key: {prv_key!r}") from e
    else:
        prv_key = bytes_from_octets(prv_key, 32)
        q = int.from_bytes(prv_key, byteorder="big", signed=False)

    if not 0 < q < N:
        err_msg = "private key not in 1..n-1: "
        err_msg += f"'{hex_string(q)}'" if q > 0 else f"{q}"
        raise WalletCryptoValueError(err_msg)
    return q


def pub_key_from_prv_key(prv_key: PrvKey, compressed: bool = False) -> bytes:
    "Return the SEC 1 public key of a verified-as-valid private key."

    q = int_from_prv_key(prv_key)
    return bytes_from_point(pr_to_pub(q), compressed)
