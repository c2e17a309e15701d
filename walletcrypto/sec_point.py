#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC compressed/uncompressed point representation."""

from walletcrypto.alias import Octets
from walletcrypto.exceptions import WalletCryptoValueError
from walletcrypto.field import bytes_from_int
from walletcrypto.point import COORDINATE_SIZE, Point
from walletcrypto.utils import bytes_from_octets


def hex_from_point(Q: Point) -> str:
    "Return the uncompressed SEC 1 hex-string of the point."
    return Q.to_hex_string()


def bytes_from_point(Q: Point, compressed: bool = False) -> bytes:
    """Return a point as compressed/uncompressed octet sequence.

    Return a point as compressed (0x02, 0x03) or uncompressed (0x04)
    octet sequence, according to SEC 1 v.2, section 2.3.3.

    The point is not checked to be on curve.
    """

    if Q.is_identity():
        raise WalletCryptoValueError("no bytes representation for infinity point")

    bytes_ = bytes_from_int(Q.x, COORDINATE_SIZE)
    if compressed:
        return (b"\x03" if (Q.y & 1) else b"\x02") + bytes_

    return b"\x04" + bytes_ + bytes_from_int(Q.y, COORDINATE_SIZE)


def point_from_octets(pub_key: Octets) -> Point:
    """Return the Point of an uncompressed octet sequence.

    Only the uncompressed (0x04) representation is supported,
    as decompression would require a modular square root.
    The point is not checked to be on curve.
    """

    pub_key = bytes_from_octets(pub_key, 2 * COORDINATE_SIZE + 1)
    if pub_key[0] != 0x04:
        raise WalletCryptoValueError(f"not an uncompressed point: {pub_key!r}")

    x_Q = int.from_bytes(pub_key[1 : COORDINATE_SIZE + 1], "big", signed=False)
    y_Q = int.from_bytes(pub_key[COORDINATE_SIZE + 1 :], "big", signed=False)
    Q = Point(x_Q, y_Q)
    if Q.is_identity():
        raise WalletCryptoValueError("no bytes representation for infinity point")
    return Q
