"""Secret reconstruction from Shamir shares over the integers.

The secret is f(0) for the unknown polynomial f of degree < k that the
shares were sampled from. Interpolation runs in exact rational
arithmetic; a valid share set always lands on an integer.

Selection policy: shares are stably sorted by x and the first k are
used. The same set of shares therefore always reconstructs from the same
subset, whatever order it was supplied in.
"""

import logging
from dataclasses import dataclass

from polysecret import frac
from polysecret.base import decode
from polysecret.errors import (
    InvalidThreshold, InvalidShareIndex, DuplicateXCoordinate, NonIntegerResult,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Share:
    """One decoded point (x, y) of the hidden polynomial."""
    x: int
    y: int


@dataclass(frozen=True)
class EncodedShare:
    """A share as supplied by the input: y written in some base."""
    x: int
    base: int
    digits: str


def decode_share(encoded: EncodedShare) -> Share:
    """Decode one share's value into an exact integer."""
    return Share(encoded.x, decode(encoded.digits, encoded.base))


def _check_threshold(k: int, available: int, n=None):
    if k <= 0 or (n is not None and k > n) or k > available:
        raise InvalidThreshold(k, available, n)


def select_working_set(points: list, k: int) -> list:
    """Pick the k shares with the smallest x.

    Args:
        points: Shares in any order.
        k: Threshold.

    Returns:
        The first k shares after a stable sort on x.

    Raises:
        InvalidThreshold: k <= 0 or k > len(points).
        InvalidShareIndex: a share has a negative x.
        DuplicateXCoordinate: two selected shares share an x.
    """
    _check_threshold(k, len(points))
    for p in points:
        if p.x < 0:
            raise InvalidShareIndex(p.x)
    selected = sorted(points, key=lambda p: p.x)[:k]

    seen = set()
    for p in selected:
        if p.x in seen:
            raise DuplicateXCoordinate(p.x)
        seen.add(p.x)

    logger.debug("working set: %s", [p.x for p in selected])
    return selected


def lagrange_at_zero(points: list) -> int:
    """Evaluate the interpolating polynomial through points at x=0.

    L(0) = sum_i y_i * prod_{j!=i} (0 - x_j)/(x_i - x_j), accumulated as
    exact fractions.
    """
    if not points:
        raise InvalidThreshold(len(points), len(points))
    if len(points) == 1:
        return points[0].y

    result = frac.ZERO
    for i, pi in enumerate(points):
        num = 1
        den = 1
        for j, pj in enumerate(points):
            if j == i:
                continue
            if pi.x == pj.x:
                raise DuplicateXCoordinate(pi.x)
            num *= -pj.x            # (0 - x_j)
            den *= pi.x - pj.x      # (x_i - x_j)
        basis = frac.make(num, den)
        result = frac.add(result, frac.scale(basis, pi.y))

    if not frac.is_integer(result):
        raise NonIntegerResult(result.numerator, result.denominator)
    return result.numerator


def reconstruct(points: list, k: int) -> int:
    """Reconstruct the secret f(0) from at least k shares.

    Args:
        points: Share objects; only the k with the smallest x are used.
        k: Threshold (number of shares that determine the polynomial).

    Returns:
        The secret as an int.
    """
    selected = select_working_set(points, k)

    for p in selected:
        if p.x == 0:
            logger.debug("share at x=0 present, returning it directly")
            return p.y

    return lagrange_at_zero(selected)


def reconstruct_encoded(n: int, k: int, encoded: list) -> int:
    """Decode and reconstruct from raw (x, base, digits) shares.

    Threshold checks happen before any decoding, and only the k shares
    that will actually be used are decoded.
    """
    if n <= 0:
        raise InvalidThreshold(k, len(encoded), n)
    _check_threshold(k, len(encoded), n)

    chosen = sorted(encoded, key=lambda e: e.x)[:k]
    shares = [decode_share(e) for e in chosen]
    for s in shares:
        logger.debug("share x=%d, y has %d bits", s.x, s.y.bit_length())
    return reconstruct(shares, k)
