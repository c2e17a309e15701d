#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "04 79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798 483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
#
# use walletcrypto.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for 65 bytes uncompressed public keys
# and for 32 bytes private keys
Octets = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# An element of the prime field Fp.
# Native python ints are used: values are kept reduced in 0..p-1
# by the functions of the walletcrypto.field module.
FieldElement = int
