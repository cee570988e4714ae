"""
Search coordinator for the hash brute-force search.

This module provides the HashSearcher class that runs one traversal strategy
against a target digest while counting digest evaluations, logging the
outcome and optionally drawing a progress bar.
"""

import time
from typing import Any, Dict, Optional, Sequence, Union
from tqdm import tqdm

from .digest import DigestOracle
from .strategy import SearchStrategy, get_strategy, validate_search_space
from hash_bruteforce.utils.config import DEFAULT_ALPHABET, DEFAULT_MAX_LENGTH
from hash_bruteforce.utils.logger import Logger


class HashSearcher:
    """Runs a traversal strategy against a target digest"""

    # Candidates between progress bar refreshes
    PROGRESS_STEP = 1000

    def __init__(self,
                 strategy: Union[str, SearchStrategy] = "recursive",
                 oracle: Optional[DigestOracle] = None,
                 alphabet: Sequence[str] = DEFAULT_ALPHABET,
                 max_length: int = DEFAULT_MAX_LENGTH,
                 include_empty: bool = False,
                 logger=None,
                 progress: bool = False):
        """Initialize with a strategy, a digest oracle and the search space

        Args:
            strategy: Strategy instance or registered strategy name
            oracle: Digest oracle (default: MD5)
            alphabet: Ordered characters usable at each position
            max_length: Longest candidate to generate
            include_empty: Make the odometer strategy test the empty string;
                taken from the instance when an OdometerSearch is passed
            logger: Optional logger instance
            progress: Whether to show a tqdm progress bar
        """
        if isinstance(strategy, SearchStrategy):
            self.strategy = strategy
            # An odometer instance carries its own empty-string policy
            include_empty = getattr(strategy, "include_empty", include_empty)
        else:
            self.strategy = get_strategy(strategy, include_empty=include_empty)

        self.oracle = oracle or DigestOracle()
        self.alphabet = validate_search_space(alphabet, max_length)
        self.max_length = max_length
        self.include_empty = include_empty

        self.logger = logger or Logger(
            name=f"hash_bruteforce.{self.strategy.name}",
            level=20  # INFO
        ).get_logger()

        self.progress = progress
        self.progress_bar = None
        self.candidates_tried = 0
        self.start_time = 0.0
        self.elapsed = 0.0

    def total_count(self) -> int:
        """Number of candidates tested when the space is exhausted"""
        return self.strategy.total_count(self.alphabet, self.max_length)

    def _matches(self, target: bytes):
        """Build the predicate handed to the strategy"""
        def matches(candidate: str) -> bool:
            self.candidates_tried += 1
            if self.progress_bar is not None and self.candidates_tried % self.PROGRESS_STEP == 0:
                self.progress_bar.update(self.PROGRESS_STEP)
            return self.oracle.equal(self.oracle.digest(candidate), target)
        return matches

    def search(self, target_digest: bytes) -> Optional[str]:
        """Search the configured space for a candidate hashing to target_digest

        Args:
            target_digest: Digest to match

        Returns:
            The first matching candidate, or None when the space is exhausted
        """
        target = bytes(target_digest)
        total = self.total_count()

        if len(target) != self.oracle.digest_size:
            self.logger.warning(
                f"Target is {len(target)} bytes but {self.oracle.algorithm} digests are "
                f"{self.oracle.digest_size} bytes; no candidate can match"
            )

        self.logger.debug(
            f"Searching {total:,} candidates over {''.join(self.alphabet)!r} "
            f"up to length {self.max_length} with the {self.strategy.name} strategy"
        )

        self.candidates_tried = 0
        self.start_time = time.time()
        if self.progress:
            self.progress_bar = tqdm(total=total, unit="pw", desc=self.strategy.name, leave=False)

        try:
            found = self.strategy.find(self._matches(target), self.alphabet, self.max_length)
        finally:
            self.elapsed = time.time() - self.start_time
            if self.progress_bar is not None:
                self.progress_bar.update(self.candidates_tried - self.progress_bar.n)
                self.progress_bar.close()
                self.progress_bar = None

        if found is not None:
            self.logger.debug(
                f"Found {found!r} after {self.candidates_tried:,} candidates "
                f"in {self.elapsed:.4f} seconds"
            )
        else:
            self.logger.warning(
                f"No match after exhausting all {self.candidates_tried:,} candidates "
                f"({self.strategy.name}, max length {self.max_length})"
            )
        return found

    def search_hex(self, hex_digest: str) -> Optional[str]:
        """Search for a hex-encoded target digest"""
        return self.search(self.oracle.from_hex(hex_digest))

    def crack(self, plaintext: str) -> Optional[str]:
        """Hash a known plaintext and search for its digest"""
        return self.search(self.oracle.digest(plaintext))

    def stats(self) -> Dict[str, Any]:
        """Counters from the most recent search"""
        speed = self.candidates_tried / self.elapsed if self.elapsed > 0 else None
        return {
            "strategy": self.strategy.name,
            "candidates_tried": self.candidates_tried,
            "total": self.total_count(),
            "elapsed": self.elapsed,
            "speed": speed,
        }
