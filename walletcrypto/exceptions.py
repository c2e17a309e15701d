#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by walletcrypto from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and RuntimeError
from which the walletcrypto versions are derived.
"""


class WalletCryptoValueError(ValueError):
    pass


class WalletCryptoRuntimeError(RuntimeError):
    pass
