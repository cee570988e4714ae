"""
Search state for the fixed-buffer odometer traversal.

The arena holds a character buffer and a parallel per-position counter,
both allocated once. A search owns its arena for the duration of one call;
a fresh arena is built for every search and never shared.
"""

from typing import List, Sequence


class OdometerArena:
    """Pre-allocated buffer and counters for one odometer search"""

    def __init__(self, size: int, alphabet: Sequence[str]):
        """Initialize with the number of positions and the alphabet

        Args:
            size: Number of positions (the maximum candidate length)
            alphabet: Ordered alphabet the counters index into
        """
        self.size = size
        self.alphabet = alphabet
        self.buffer: List[str] = [""] * size
        self.counters: List[int] = [0] * size

    def exhausted(self, pos: int) -> bool:
        """Whether the counter at pos has gone through every character"""
        return self.counters[pos] == len(self.alphabet)

    def advance(self, pos: int) -> None:
        """Write the character selected by the counter at pos and step the counter"""
        self.buffer[pos] = self.alphabet[self.counters[pos]]
        self.counters[pos] += 1

    def carry(self, pos: int) -> None:
        """Roll the counter at pos back to the first character"""
        self.counters[pos] = 0

    def candidate(self, length: int) -> str:
        """Materialise the first length characters of the buffer"""
        return "".join(self.buffer[:length])

    def __repr__(self) -> str:
        return f"OdometerArena(size={self.size}, counters={self.counters})"
