"""Shared fixtures for polysecret tests."""

import json
import random
import pytest
from polysecret.shamir import Share


def poly_eval(coeffs: list, x: int) -> int:
    """Evaluate a_0 + a_1*x + ... + a_d*x^d (lowest degree first)."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def sample_shares(coeffs: list, xs: list) -> list:
    return [Share(x, poly_eval(coeffs, x)) for x in xs]


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def random_poly(rng):
    """Factory for random integer polynomials of a given degree."""
    def make(degree: int, bound: int = 10**6) -> list:
        return [rng.randint(-bound, bound) for _ in range(degree + 1)]
    return make


@pytest.fixture
def sample_document():
    """Share file for y = x^2 + 3, secret 3."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


@pytest.fixture
def write_share_file(tmp_path):
    """Write a document to a JSON file under tmp_path and return its path."""
    def write(document, name: str = "shares.json"):
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document)
        else:
            path.write_text(json.dumps(document))
        return path
    return write
