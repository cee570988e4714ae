"""
Digest oracle for the hash brute-force search.

This module provides the one-way function candidates are hashed with and the
byte-wise comparison used to match them against the target digest.
"""

import hashlib

from hash_bruteforce.utils.exceptions import InvalidDigestError, UnsupportedAlgorithmError


def equal(a: bytes, b: bytes) -> bool:
    """Compare two digests element by element

    Not constant-time: the target digest is already known to the caller.

    Args:
        a: First digest
        b: Second digest

    Returns:
        True if both digests have the same length and the same bytes
    """
    if len(a) != len(b):
        return False
    for i in range(len(a)):
        if a[i] != b[i]:
            return False
    return True


def hex_equal(a: str, b: str) -> bool:
    """Compare two hex-encoded digests, ignoring case"""
    return a.strip().lower() == b.strip().lower()


class DigestOracle:
    """Hashes candidate strings with a hashlib algorithm"""

    def __init__(self, algorithm: str = "md5"):
        """Initialize with the name of a hashlib algorithm

        Args:
            algorithm: Any name accepted by hashlib.new (e.g. 'md5', 'sha256')
        """
        try:
            hasher = hashlib.new(algorithm)
        except (ValueError, TypeError):
            raise UnsupportedAlgorithmError(f"Unsupported digest algorithm: {algorithm}")

        if hasher.digest_size == 0:
            # Variable-width XOFs (shake_*) have no fixed output width
            raise UnsupportedAlgorithmError(f"Digest algorithm has no fixed width: {algorithm}")

        self.algorithm = hasher.name
        self.digest_size = hasher.digest_size

    def digest(self, text: str) -> bytes:
        """Return the digest of the UTF-8 encoding of text"""
        hasher = hashlib.new(self.algorithm)
        hasher.update(text.encode("utf-8"))
        return hasher.digest()

    def hexdigest(self, text: str) -> str:
        """Return the digest of text as lowercase hex"""
        return self.digest(text).hex()

    def from_hex(self, hex_digest: str) -> bytes:
        """Parse a hex-encoded target digest

        Args:
            hex_digest: Hex string, case-insensitive, surrounding whitespace ignored

        Returns:
            The digest bytes

        Raises:
            InvalidDigestError: If the string is not hex or has the wrong width
        """
        try:
            raw = bytes.fromhex(hex_digest.strip())
        except ValueError:
            raise InvalidDigestError(f"Not a hex digest: {hex_digest!r}")

        if len(raw) != self.digest_size:
            raise InvalidDigestError(
                f"{self.algorithm} digests are {self.digest_size} bytes, got {len(raw)}"
            )
        return raw

    equal = staticmethod(equal)

    def __repr__(self) -> str:
        return f"DigestOracle({self.algorithm!r})"
