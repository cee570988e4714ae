"""Tests for the digest oracle and digest comparison."""

from __future__ import annotations

import pytest

from hash_bruteforce.core.digest import DigestOracle, equal, hex_equal
from hash_bruteforce.utils.exceptions import InvalidDigestError, UnsupportedAlgorithmError


def test_md5_matches_known_vectors(md5) -> None:
    assert md5.hexdigest("") == "d41d8cd98f00b204e9800998ecf8427e"
    assert md5.hexdigest("a") == "0cc175b9c0f1b6a831c399e269772661"
    assert md5.digest("abc") == bytes.fromhex("900150983cd24fb0d6963f7d28e17f72")


def test_digest_is_deterministic_and_fixed_width(md5) -> None:
    assert md5.digest("cf") == md5.digest("cf")
    assert {len(md5.digest(text)) for text in ["", "a", "abcdefg" * 10]} == {16}
    assert md5.digest_size == 16


def test_other_hashlib_algorithms() -> None:
    oracle = DigestOracle("SHA256")

    assert oracle.algorithm == "sha256"
    assert oracle.digest_size == 32
    assert oracle.hexdigest("abc").startswith("ba7816bf")


def test_unknown_algorithm_is_rejected() -> None:
    with pytest.raises(UnsupportedAlgorithmError):
        DigestOracle("not-a-hash")


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (b"", b"", True),
        (b"\x01\x02", b"\x01\x02", True),
        (b"\x01\x02", b"\x01\x03", False),
        (b"\x01\x02", b"\x01\x02\x00", False),
        (bytearray(b"ab"), b"ab", True),
    ],
)
def test_equal(a: bytes, b: bytes, expected: bool) -> None:
    assert equal(a, b) is expected
    assert DigestOracle.equal(a, b) is expected


def test_hex_equal_ignores_case_and_whitespace() -> None:
    assert hex_equal("0CC175B9C0F1B6A831C399E269772661", " 0cc175b9c0f1b6a831c399e269772661\n")
    assert not hex_equal("0cc175b9", "0cc175ba")


def test_from_hex_round_trips_a_digest(md5) -> None:
    assert md5.from_hex(md5.hexdigest("ba").upper()) == md5.digest("ba")


@pytest.mark.parametrize("value", ["xyz", "0cc175b9", "0cc175b9c0f1b6a831c399e26977266100"])
def test_from_hex_rejects_malformed_or_wrong_width(md5, value: str) -> None:
    with pytest.raises(InvalidDigestError):
        md5.from_hex(value)
