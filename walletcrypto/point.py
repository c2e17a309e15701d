#!/usr/bin/env python3

# Copyright (C) 2024-2026 The walletcrypto developers
#
# This file is part of walletcrypto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of walletcrypto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve point in affine coordinates.

The identity (point at infinity) is represented by the (0, 0) sentinel:
x = 0 is not a valid secp256k1 x-coordinate, as 0^3 + 7 = 7
is not a quadratic residue mod p,
so the sentinel never collides with a curve point.
"""

from dataclasses import dataclass, field
from typing import Type, TypeVar, Union

from dataclasses_json import DataClassJsonMixin, config

from walletcrypto.alias import FieldElement
from walletcrypto.exceptions import WalletCryptoValueError
from walletcrypto.field import hex_from_int, int_from_hex, is_zero

COORDINATE_SIZE = 32

_Point = TypeVar("_Point", bound="Point")


def _coordinate_from_json(value: Union[int, str]) -> FieldElement:
    "Return a coordinate from its JSON hex-string, or int, value."
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return int_from_hex(value)  # type: ignore


@dataclass(frozen=True)
class Point(DataClassJsonMixin):
    x: FieldElement = field(
        metadata=config(encoder=hex_from_int, decoder=_coordinate_from_json)
    )
    y: FieldElement = field(
        metadata=config(encoder=hex_from_int, decoder=_coordinate_from_json)
    )

    def __post_init__(self) -> None:
        for coordinate in (self.x, self.y):
            if coordinate < 0 or coordinate.bit_length() > COORDINATE_SIZE * 8:
                err_msg = f"coordinate not in 0..2^{COORDINATE_SIZE * 8}-1: "
                err_msg += f"{coordinate}"
                raise WalletCryptoValueError(err_msg)

    @classmethod
    def from_hex_coordinates(cls: Type[_Point], x_hex: str, y_hex: str) -> _Point:
        """Return the Point with the given hex-string coordinates.

        The point is not checked to be on the curve.
        """
        return cls(int_from_hex(x_hex), int_from_hex(y_hex))

    def is_identity(self) -> bool:
        return is_zero(self.x) and is_zero(self.y)

    def to_hex_string(self) -> str:
        """Return the uncompressed SEC 1 hex-string representation.

        '04' followed by the 64 hex-digits of x and the 64 of y.
        """
        return (
            "04"
            + hex_from_int(self.x, COORDINATE_SIZE)
            + hex_from_int(self.y, COORDINATE_SIZE)
        )


INF = Point(0, 0)
