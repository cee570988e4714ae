"""
Hash Brute-Force Search

Exhaustive search of short fixed-alphabet strings for the one matching a
target digest, with interchangeable traversal strategies.
"""

from hash_bruteforce.core.digest import DigestOracle
from hash_bruteforce.core.strategy import (
    SearchStrategy,
    RecursiveSearch,
    StackSearch,
    OdometerSearch,
    get_strategy,
)
from hash_bruteforce.core.searcher import HashSearcher
from hash_bruteforce.core.harness import Harness

__version__ = "0.1.0"
