"""
Core functionality for the hash brute-force search.
"""

from .digest import DigestOracle, equal, hex_equal
from .state import OdometerArena
from .strategy import (
    SearchStrategy,
    RecursiveSearch,
    StackSearch,
    OdometerSearch,
    STRATEGIES,
    get_strategy,
    count_candidates,
    validate_search_space,
)
from .searcher import HashSearcher
from .harness import Harness, CaseResult
