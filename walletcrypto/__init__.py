#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the walletcrypto package."

name = "walletcrypto"
__version__ = "2026.10.0"
__author__ = "The walletcrypto developers"
__author_email__ = "devs@walletcrypto.org"
__copyright__ = "Copyright (C) 2024-2026 The walletcrypto developers"
__license__ = "MIT License"
