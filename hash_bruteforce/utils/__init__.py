"""
Utility modules for the hash brute-force search.
"""

from .config import Config, verbosity_to_level, DEFAULT_ALPHABET, DEFAULT_MAX_LENGTH
from .exceptions import (
    HashBruteforceError,
    InvalidAlphabetError,
    InvalidSearchSpaceError,
    UnknownStrategyError,
    UnsupportedAlgorithmError,
    InvalidDigestError,
    ConfigError,
)
from .logger import Logger, get_default_logger, debug, info, warning, error, critical
