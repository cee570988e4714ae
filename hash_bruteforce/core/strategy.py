"""
Traversal strategies for the hash brute-force search.

This module provides three interchangeable ways of walking every string over
a fixed alphabet up to a maximum length. All of them visit candidates in the
same depth-first lexicographic order ("", "a", "aa", ..., "ab", ...) and stop
at the first candidate the caller's predicate accepts.
"""

from abc import ABC, abstractmethod
import sys
from typing import Callable, List, Optional, Sequence, Tuple, Type

from .digest import DigestOracle
from .state import OdometerArena
from hash_bruteforce.utils.exceptions import (
    InvalidAlphabetError,
    InvalidSearchSpaceError,
    UnknownStrategyError,
)


Predicate = Callable[[str], bool]


def validate_search_space(alphabet: Sequence[str], max_length: int) -> Tuple[str, ...]:
    """Check the alphabet and length bound before a traversal starts

    Args:
        alphabet: Ordered single characters, as a string or a sequence of strings
        max_length: Longest candidate to generate

    Returns:
        The alphabet as a tuple, order preserved

    Raises:
        InvalidAlphabetError: If an entry is not a single character or is repeated
        InvalidSearchSpaceError: If max_length is not a non-negative integer
    """
    if isinstance(max_length, bool) or not isinstance(max_length, int):
        raise InvalidSearchSpaceError(f"Maximum length must be an integer, got {max_length!r}")
    if max_length < 0:
        raise InvalidSearchSpaceError(f"Maximum length must not be negative, got {max_length}")

    try:
        chars = tuple(alphabet)
    except TypeError:
        raise InvalidAlphabetError(f"Alphabet must be a sequence of characters, got {alphabet!r}")
    for char in chars:
        if not isinstance(char, str) or len(char) != 1:
            raise InvalidAlphabetError(f"Alphabet entries must be single characters, got {char!r}")
    if len(set(chars)) != len(chars):
        raise InvalidAlphabetError(f"Alphabet contains repeated characters: {''.join(chars)!r}")

    return chars


def count_candidates(alphabet_size: int, max_length: int, include_empty: bool = True) -> int:
    """Number of strings of length 0..max_length over an alphabet of the given size"""
    total = sum(alphabet_size ** length for length in range(max_length + 1))
    return total if include_empty else total - 1


class SearchStrategy(ABC):
    """Abstract base class for traversal strategies"""

    name = ""

    @property
    def tests_empty(self) -> bool:
        """Whether the empty string is one of the tested candidates"""
        return True

    def find(self, accept: Predicate, alphabet: Sequence[str], max_length: int) -> Optional[str]:
        """Return the first candidate accepted by the predicate

        Args:
            accept: Called once per candidate, in visit order
            alphabet: Ordered characters usable at each position
            max_length: Longest candidate to generate

        Returns:
            The first accepted candidate, or None once the space is exhausted
        """
        chars = validate_search_space(alphabet, max_length)
        return self._traverse(accept, chars, max_length)

    @abstractmethod
    def _traverse(self, accept: Predicate, alphabet: Tuple[str, ...], max_length: int) -> Optional[str]:
        """Walk the validated search space"""
        pass

    def search(self, target_digest: bytes, alphabet: Sequence[str], max_length: int,
               oracle: Optional[DigestOracle] = None) -> Optional[str]:
        """Find the first candidate whose digest equals target_digest

        Args:
            target_digest: Digest to match, never modified
            alphabet: Ordered characters usable at each position
            max_length: Longest candidate to generate
            oracle: Digest oracle to hash candidates with (default: MD5)

        Returns:
            The matching candidate, or None if nothing in the space matches
        """
        oracle = oracle or DigestOracle()
        target = bytes(target_digest)

        def matches(candidate: str) -> bool:
            return oracle.equal(oracle.digest(candidate), target)

        return self.find(matches, alphabet, max_length)

    def total_count(self, alphabet: Sequence[str], max_length: int) -> int:
        """Number of candidates tested when the space is exhausted"""
        chars = validate_search_space(alphabet, max_length)
        return count_candidates(len(chars), max_length, self.tests_empty)

    def list_candidates(self, alphabet: Sequence[str], max_length: int) -> List[str]:
        """Every candidate this strategy tests, in visit order"""
        seen = []

        def record(candidate: str) -> bool:
            seen.append(candidate)
            return False

        self.find(record, alphabet, max_length)
        return seen

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class RecursiveSearch(SearchStrategy):
    """Depth-first search using native recursion

    The current prefix is tested before it is extended, so the empty string
    is the first candidate. Call depth grows to max_length.
    """

    name = "recursive"

    # Frames kept free for the caller and the predicate
    RECURSION_HEADROOM = 50

    def _traverse(self, accept, alphabet, max_length):
        if max_length > sys.getrecursionlimit() - self.RECURSION_HEADROOM:
            raise InvalidSearchSpaceError(
                f"Maximum length {max_length} is too deep for recursive traversal; "
                f"use the stack or odometer strategy"
            )
        return self._descend(accept, alphabet, max_length, "")

    def _descend(self, accept, alphabet, max_length, prefix):
        if accept(prefix):
            return prefix
        if len(prefix) == max_length:
            return None
        for char in alphabet:
            found = self._descend(accept, alphabet, max_length, prefix + char)
            if found is not None:
                return found
        return None


class StackSearch(SearchStrategy):
    """Depth-first search with an explicit stack of pending candidates"""

    name = "stack"

    def _traverse(self, accept, alphabet, max_length):
        # Extensions are pushed last-character-first so they pop in alphabet order
        backwards = alphabet[::-1]
        stack = [""]

        while stack:
            candidate = stack.pop()
            if accept(candidate):
                return candidate
            if len(candidate) < max_length:
                stack.extend(candidate + char for char in backwards)

        return None


class OdometerSearch(SearchStrategy):
    """Depth-first search over a fixed buffer with carry propagation

    The buffer and per-position counters are allocated once per call. By
    default the empty string is never tested, unlike the recursive and stack
    strategies; pass include_empty=True to test it before the traversal.
    """

    name = "odometer"

    def __init__(self, include_empty: bool = False):
        self.include_empty = include_empty

    @property
    def tests_empty(self) -> bool:
        return self.include_empty

    def _traverse(self, accept, alphabet, max_length):
        if self.include_empty and accept(""):
            return ""

        arena = OdometerArena(max_length, alphabet)
        pos = 0
        while pos != -1:
            if pos == max_length:
                pos -= 1
                continue
            if arena.exhausted(pos):
                arena.carry(pos)
                pos -= 1
                continue

            arena.advance(pos)
            pos += 1
            candidate = arena.candidate(pos)
            if accept(candidate):
                return candidate

        return None

    def __repr__(self) -> str:
        return f"OdometerSearch(include_empty={self.include_empty})"


STRATEGIES = {
    RecursiveSearch.name: RecursiveSearch,
    StackSearch.name: StackSearch,
    OdometerSearch.name: OdometerSearch,
}


def get_strategy(name: str, include_empty: bool = False) -> SearchStrategy:
    """Create a traversal strategy by name

    Args:
        name: One of 'recursive', 'stack' or 'odometer'
        include_empty: Make the odometer strategy test the empty string too;
            the other strategies always test it

    Returns:
        A fresh strategy instance

    Raises:
        UnknownStrategyError: If no strategy has that name
    """
    strategy_class: Optional[Type[SearchStrategy]] = STRATEGIES.get(str(name).lower())
    if strategy_class is None:
        raise UnknownStrategyError(
            f"Unknown strategy: {name} (choose from {', '.join(STRATEGIES)})"
        )
    if strategy_class is OdometerSearch:
        return OdometerSearch(include_empty=include_empty)
    return strategy_class()
