"""
Custom exceptions for the hash brute-force search.

Exhausting the search space is not an error; these only cover invalid
configuration handed to the search engine or its collaborators.
"""

class HashBruteforceError(Exception):
    """Base exception for hash brute-force errors"""
    pass


class InvalidAlphabetError(HashBruteforceError):
    """Alphabet entries are not unique single characters"""
    pass


class InvalidSearchSpaceError(HashBruteforceError):
    """Maximum candidate length is not a non-negative integer"""
    pass


class UnknownStrategyError(HashBruteforceError):
    """No traversal strategy registered under the given name"""
    pass


class UnsupportedAlgorithmError(HashBruteforceError):
    """Digest algorithm not available in hashlib"""
    pass


class InvalidDigestError(HashBruteforceError):
    """Target digest is malformed or has the wrong width"""
    pass


class ConfigError(HashBruteforceError):
    """Error in configuration"""
    pass
