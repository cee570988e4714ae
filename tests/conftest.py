"""Shared fixtures for the brute-force search tests."""

from __future__ import annotations

import logging

import pytest

from hash_bruteforce.core.digest import DigestOracle, equal
from hash_bruteforce.core.strategy import OdometerSearch, RecursiveSearch, StackSearch

ALPHABET = "abcdefg"
MAX_LENGTH = 5


class LengthOracle:
    """Collision-prone oracle: every string of the same length shares a digest."""

    algorithm = "length"
    digest_size = 1
    equal = staticmethod(equal)

    def digest(self, text: str) -> bytes:
        return bytes([len(text)])


class LastCharOracle:
    """Collision-prone oracle: strings ending in the same character share a digest."""

    algorithm = "last-char"
    digest_size = 1
    equal = staticmethod(equal)

    def digest(self, text: str) -> bytes:
        return (text[-1:] or "\0").encode("ascii")


@pytest.fixture
def md5() -> DigestOracle:
    return DigestOracle("md5")


@pytest.fixture(params=["recursive", "stack", "odometer"])
def strategy(request):
    return {
        "recursive": RecursiveSearch,
        "stack": StackSearch,
        "odometer": OdometerSearch,
    }[request.param]()


@pytest.fixture
def quiet_logger() -> logging.Logger:
    logger = logging.getLogger("hash_bruteforce.tests")
    logger.propagate = False
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger
