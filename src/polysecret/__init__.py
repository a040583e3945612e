"""polysecret — exact secret reconstruction from base-encoded Shamir shares.

Shares are (x, y) points on a hidden integer polynomial, with y written
in any base from 2 to 36. The secret is the polynomial's value at x=0,
recovered by Lagrange interpolation in exact rational arithmetic.
"""

from polysecret.base import decode, encode
from polysecret.shamir import (
    Share, EncodedShare, reconstruct, reconstruct_encoded, select_working_set,
)
from polysecret.errors import (
    ReconstructionError, InvalidBase, InvalidDigit, EmptyValue,
    InvalidThreshold, InvalidShareIndex, DuplicateXCoordinate, DivisionByZero,
    NonIntegerResult, LoadError,
)

__version__ = "0.1.0"
__all__ = [
    "decode",
    "encode",
    "Share",
    "EncodedShare",
    "reconstruct",
    "reconstruct_encoded",
    "select_working_set",
    "ReconstructionError",
    "InvalidBase",
    "InvalidDigit",
    "EmptyValue",
    "InvalidThreshold",
    "InvalidShareIndex",
    "DuplicateXCoordinate",
    "DivisionByZero",
    "NonIntegerResult",
    "LoadError",
]
