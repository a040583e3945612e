"""Failure kinds raised while decoding shares and reconstructing a secret.

Every core failure is a ReconstructionError (a ValueError) and carries
the offending input as attributes, so callers can report it without
parsing the message.
"""

# Wider ints are described by size in messages; int-to-str conversion of
# very long ints is itself an error on Python 3.11+.
_MAX_MESSAGE_BITS = 1024


def _describe(value: int) -> str:
    if value.bit_length() <= _MAX_MESSAGE_BITS:
        return str(value)
    sign = "-" if value < 0 else ""
    return f"<{sign}{value.bit_length()}-bit integer>"


class ReconstructionError(ValueError):
    """Base class for all core failures."""


class InvalidBase(ReconstructionError):
    def __init__(self, base: int):
        self.base = base
        super().__init__(f"Base must be in [2, 36], got {_describe(base)}")


class InvalidDigit(ReconstructionError):
    def __init__(self, char: str, position: int, base: int, digits: str):
        self.char = char
        self.position = position
        self.base = base
        self.digits = digits
        shown = digits if len(digits) <= 64 else digits[:61] + "..."
        super().__init__(
            f"Invalid character {char!r} at position {position} "
            f"for base {base} in value {shown!r}"
        )


class EmptyValue(ReconstructionError):
    def __init__(self, digits: str):
        self.digits = digits
        super().__init__("Value is empty")


class InvalidThreshold(ReconstructionError):
    def __init__(self, k: int, available: int, n=None):
        self.k = k
        self.available = available
        self.n = n
        if k <= 0:
            msg = f"Threshold k must be >= 1, got {_describe(k)}"
        elif n is not None and k > n:
            msg = f"Threshold k={_describe(k)} cannot exceed n={_describe(n)}"
        else:
            msg = f"Need {_describe(k)} shares but only {available} available"
        super().__init__(msg)


class InvalidShareIndex(ReconstructionError):
    def __init__(self, x: int):
        self.x = x
        super().__init__(f"Share x-coordinate must be >= 0, got {_describe(x)}")


class DuplicateXCoordinate(ReconstructionError):
    def __init__(self, x: int):
        self.x = x
        super().__init__(
            f"Duplicate x-coordinate {_describe(x)}: "
            f"polynomial is not uniquely determined"
        )


class DivisionByZero(ReconstructionError, ZeroDivisionError):
    def __init__(self, numerator: int):
        self.numerator = numerator
        super().__init__(f"Zero denominator for numerator {_describe(numerator)}")


class NonIntegerResult(ReconstructionError):
    """Shares do not lie on an integer-coefficient polynomial."""

    def __init__(self, numerator: int, denominator: int):
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(
            f"Non-integer result {_describe(numerator)}/{_describe(denominator)}: "
            f"shares are inconsistent with an integer-coefficient polynomial"
        )


class LoadError(Exception):
    """A share file could not be read or is structurally malformed."""

    def __init__(self, message: str, source=None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
