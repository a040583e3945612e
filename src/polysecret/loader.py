"""Share-file loader.

A share file is a JSON object with the threshold parameters under
"keys" and one entry per share keyed by its x-coordinate:

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"}
    }

Only structure is checked here. Bases, digits and thresholds are left
to the core so its own errors reach the caller unchanged.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path

from polysecret.errors import LoadError
from polysecret.shamir import EncodedShare


@dataclass
class ShareSet:
    """One parsed share file."""
    n: int
    k: int
    shares: list = field(default_factory=list)


def _as_int(value, what: str, source: str) -> int:
    # bool is an int subclass; JSON true/false is not a count
    if isinstance(value, bool):
        raise LoadError(f"{what} must be an integer, got {value!r}", source)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise LoadError(f"{what} must be an integer, got {value!r}", source)


def parse(document, source=None) -> ShareSet:
    """Build a ShareSet from an already-decoded JSON document."""
    if not isinstance(document, dict):
        raise LoadError("top level must be a JSON object", source)

    keys = document.get("keys")
    if not isinstance(keys, dict):
        raise LoadError("missing 'keys' object", source)
    for name in ("n", "k"):
        if name not in keys:
            raise LoadError(f"missing '{name}' in 'keys'", source)
    n = _as_int(keys["n"], "'n'", source)
    k = _as_int(keys["k"], "'k'", source)

    shares = []
    for key, entry in document.items():
        if key == "keys" or not (key.isascii() and key.isdigit()):
            continue
        if not isinstance(entry, dict):
            raise LoadError(f"share {key} must be an object", source)
        for name in ("base", "value"):
            if name not in entry:
                raise LoadError(f"share {key} is missing '{name}'", source)
        value = entry["value"]
        if not isinstance(value, str):
            raise LoadError(f"share {key} 'value' must be a string", source)
        base = _as_int(entry["base"], f"share {key} 'base'", source)
        x = _as_int(key, "share index", source)
        shares.append(EncodedShare(x, base, value))

    if not shares:
        raise LoadError("no shares found", source)

    shares.sort(key=lambda s: s.x)
    return ShareSet(n=n, k=k, shares=shares)


def loads(text: str, source=None) -> ShareSet:
    """Parse a share file from a string."""
    if not text.strip():
        raise LoadError("file is empty", source)
    try:
        document = json.loads(text)
    except RecursionError as e:
        raise LoadError("invalid JSON: nested too deeply", source) from e
    except ValueError as e:
        raise LoadError(f"invalid JSON: {e}", source) from e
    return parse(document, source)


def load(path) -> ShareSet:
    """Read and parse a share file from disk."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise LoadError(f"not valid UTF-8 text: {e.reason} at byte {e.start}", str(path)) from e
    except OSError as e:
        raise LoadError(f"cannot read file: {e.strerror}", str(path)) from e
    return loads(text, str(path))
