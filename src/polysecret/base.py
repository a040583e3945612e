"""Positional base-N decoding (bases 2 to 36) into exact integers.

Digits are '0'-'9' then 'a'-'z' (case-insensitive) for values 10-35.
Python int is unbounded, so arbitrarily long digit strings decode exactly.
"""

from polysecret.errors import InvalidBase, InvalidDigit, EmptyValue

MIN_BASE = 2
MAX_BASE = 36
ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def _check_base(base: int):
    if not (MIN_BASE <= base <= MAX_BASE):
        raise InvalidBase(base)


def digit_value(char: str) -> int:
    """Value of a single digit character, or -1 if it is not alphanumeric."""
    if '0' <= char <= '9':
        return ord(char) - ord('0')
    if 'a' <= char <= 'z':
        return ord(char) - ord('a') + 10
    if 'A' <= char <= 'Z':
        return ord(char) - ord('A') + 10
    return -1


def decode(digits: str, base: int) -> int:
    """Decode a digit string in the given base to an integer.

    Surrounding whitespace is ignored. Every character is checked
    before accumulation starts, so a bad digit never yields a partial value.

    Raises:
        InvalidBase: base outside [2, 36].
        EmptyValue: nothing left after trimming.
        InvalidDigit: a character is not a digit of this base.
    """
    _check_base(base)
    value = digits.strip()
    if not value:
        raise EmptyValue(digits)

    values = []
    for pos, c in enumerate(value):
        d = digit_value(c)
        if d < 0 or d >= base:
            raise InvalidDigit(c, pos, base, value)
        values.append(d)

    result = 0
    for d in values:
        result = result * base + d
    return result


def encode(value: int, base: int) -> str:
    """Write a non-negative integer in the given base, lowercase digits."""
    _check_base(base)
    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")
    if value == 0:
        return "0"

    out = []
    while value:
        value, d = divmod(value, base)
        out.append(ALPHABET[d])
    return "".join(reversed(out))
