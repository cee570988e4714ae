"""
Demonstration harness for the hash brute-force search.

Drives known plaintexts through digest -> search -> compare and reports
whether each one was recovered.
"""

import time
from typing import Callable, Dict, List, Optional, Sequence, Any

from .searcher import HashSearcher
from .strategy import STRATEGIES


class CaseResult:
    """Outcome of searching for one known plaintext"""

    def __init__(self, plaintext: str, found: Optional[str], strategy: str = "",
                 candidates_tried: int = 0, elapsed: float = 0.0):
        self.plaintext = plaintext
        self.found = found
        self.strategy = strategy
        self.candidates_tried = candidates_tried
        self.elapsed = elapsed

    @property
    def passed(self) -> bool:
        return self.found == self.plaintext

    def format(self) -> str:
        """One report line, e.g. 'Find password: ba - ba'"""
        if self.passed:
            return f"Find password: {self.plaintext} - {self.found}"
        return f"Loss: want {self.plaintext}, got {self.found or ''}"

    def __repr__(self) -> str:
        return f"CaseResult({self.plaintext!r}, found={self.found!r}, strategy={self.strategy!r})"


class Harness:
    """Runs known plaintexts through a searcher"""

    def __init__(self, searcher: HashSearcher, logger=None):
        self.searcher = searcher
        self.logger = logger or searcher.logger

    def run(self, plaintexts: Sequence[str],
            callback: Optional[Callable[[CaseResult], None]] = None) -> List[CaseResult]:
        """Search for the digest of every plaintext

        Args:
            plaintexts: Known plaintexts to recover
            callback: Optional function called with each CaseResult as it completes

        Returns:
            One CaseResult per plaintext, in input order
        """
        results = []
        for plaintext in plaintexts:
            found = self.searcher.crack(plaintext)
            result = CaseResult(
                plaintext,
                found,
                strategy=self.searcher.strategy.name,
                candidates_tried=self.searcher.candidates_tried,
                elapsed=self.searcher.elapsed,
            )
            self.logger.debug(
                f"{result.strategy}: {plaintext!r} -> {found!r} "
                f"({result.candidates_tried:,} candidates)"
            )
            if callback:
                callback(result)
            results.append(result)

        failed = sum(1 for r in results if not r.passed)
        if failed:
            self.logger.warning(f"{failed} of {len(results)} plaintexts were not recovered")
        return results

    def benchmark(self, plaintexts: Sequence[str], strategies: Optional[Sequence[str]] = None,
                  repeat: int = 3) -> List[Dict[str, Any]]:
        """Time each strategy on each plaintext

        The searcher's oracle, alphabet and length bound are reused so every
        strategy walks the same space.

        Args:
            plaintexts: Known plaintexts to recover
            strategies: Strategy names (default: every registered strategy)
            repeat: Runs per strategy and plaintext; the best and mean are reported

        Returns:
            One row per (strategy, plaintext) pair
        """
        if repeat < 1:
            raise ValueError("repeat must be at least 1")

        rows = []
        for name in strategies or list(STRATEGIES):
            searcher = HashSearcher(
                strategy=name,
                oracle=self.searcher.oracle,
                alphabet=self.searcher.alphabet,
                max_length=self.searcher.max_length,
                include_empty=self.searcher.include_empty,
                logger=self.logger,
            )
            for plaintext in plaintexts:
                target = searcher.oracle.digest(plaintext)
                timings = []
                found = None
                for _ in range(repeat):
                    started = time.perf_counter()
                    found = searcher.search(target)
                    timings.append(time.perf_counter() - started)

                rows.append({
                    "strategy": name,
                    "plaintext": plaintext,
                    "found": found,
                    "candidates_tried": searcher.candidates_tried,
                    "best": min(timings),
                    "mean": sum(timings) / len(timings),
                })
                self.logger.debug(f"{name} {plaintext!r}: best {min(timings):.6f}s over {repeat} runs")
        return rows
