#!/usr/bin/env python3
"""
Main entry point for running the hash brute-force search as a module.
"""

import sys
from hash_bruteforce.cli import main

if __name__ == "__main__":
    sys.exit(main())
