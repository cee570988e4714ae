#!/usr/bin/env python3
"""
Command-line interface for the hash brute-force search.
"""

import argparse
import sys
import time
from typing import List, Optional

from hash_bruteforce.core.digest import DigestOracle, hex_equal
from hash_bruteforce.core.harness import Harness
from hash_bruteforce.core.searcher import HashSearcher
from hash_bruteforce.core.strategy import STRATEGIES
from hash_bruteforce.utils.config import Config, verbosity_to_level
from hash_bruteforce.utils.logger import Logger
from hash_bruteforce.utils.exceptions import HashBruteforceError


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser"""
    parser = argparse.ArgumentParser(
        description="Recover short passwords from their digest by brute force",
    )

    parser.add_argument(
        "plaintexts",
        nargs="*",
        help="Known plaintexts to hash and recover (default: from config)",
    )

    # Search options
    search_group = parser.add_argument_group("Search Options")
    search_group.add_argument(
        "-s",
        "--strategy",
        choices=list(STRATEGIES),
        help="Traversal strategy",
    )
    search_group.add_argument(
        "--all-strategies",
        action="store_true",
        help="Run every plaintext (or the target hash) through every strategy",
    )
    search_group.add_argument(
        "-a", "--alphabet", help="Characters to try, in enumeration order"
    )
    search_group.add_argument(
        "-m", "--max-length", type=int, help="Longest candidate to try"
    )
    search_group.add_argument(
        "--algorithm", help="hashlib digest algorithm (e.g. md5, sha1, sha256)"
    )
    search_group.add_argument(
        "--target-hash",
        help="Search for this hex digest instead of hashing plaintexts",
    )
    search_group.add_argument(
        "--include-empty",
        action="store_true",
        default=None,
        help="Also test the empty string with the odometer strategy",
    )

    # Benchmark options
    benchmark_group = parser.add_argument_group("Benchmark")
    benchmark_group.add_argument(
        "--benchmark",
        type=positive_int,
        metavar="REPEAT",
        help="Time every strategy on every plaintext, REPEAT runs each",
    )

    # Output options
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "-v",
        "--verbosity",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging verbosity level",
    )
    output_group.add_argument("--log-file", help="Save log output to this file")
    output_group.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress log output on the console"
    )
    output_group.add_argument(
        "--progress", action="store_true", default=None, help="Show a progress bar per search"
    )

    # Config management
    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument("--config", help="Path to configuration file")
    config_group.add_argument(
        "--save-config",
        action="store_true",
        help="Save current settings as default configuration",
    )

    return parser


def apply_args(args, config: Config) -> None:
    """Override configuration values with the flags given on the command line"""
    overrides = {
        "alphabet": args.alphabet,
        "max_length": args.max_length,
        "strategy": args.strategy,
        "algorithm": args.algorithm,
        "include_empty": args.include_empty,
        "verbosity": args.verbosity,
        "log_file": args.log_file,
        "progress": args.progress,
    }
    config.update({key: value for key, value in overrides.items() if value is not None})
    if args.plaintexts:
        config.set("plaintexts", list(args.plaintexts))


def setup_logger(args, config: Config) -> Logger:
    """Set up logging based on the merged configuration"""
    return Logger(
        name="hash_bruteforce",
        log_file=config.get("log_file"),
        level=verbosity_to_level(config.get("verbosity", "info")),
        console=not args.quiet,
    )


def build_searcher(config: Config, logger, strategy: Optional[str] = None) -> HashSearcher:
    """Create a searcher from configuration values"""
    return HashSearcher(
        strategy=strategy or config.get("strategy", "recursive"),
        oracle=DigestOracle(config.get("algorithm", "md5")),
        alphabet=config.get("alphabet"),
        max_length=config.get("max_length"),
        include_empty=bool(config.get("include_empty", False)),
        logger=logger,
        progress=bool(config.get("progress", False)),
    )


def run_target(searchers: List[HashSearcher], hex_digest: str, logger) -> int:
    """Search for a single hex digest with every searcher and print the outcomes"""
    all_found = True
    for searcher in searchers:
        found = searcher.search_hex(hex_digest)
        stats = searcher.stats()
        logger.info(
            f"{stats['strategy']}: {stats['candidates_tried']:,} of {stats['total']:,} "
            f"candidates in {stats['elapsed']:.4f} seconds"
        )
        if found is None or not hex_equal(searcher.oracle.hexdigest(found), hex_digest):
            print(f"Not found: {hex_digest}")
            all_found = False
        else:
            print(f"Found: {hex_digest} - {found}")
    return 0 if all_found else 1


def run_plaintexts(searchers: List[HashSearcher], plaintexts: List[str], logger) -> int:
    """Recover every plaintext with every searcher, printing one line per case"""
    all_passed = True
    for searcher in searchers:
        if len(searchers) > 1:
            logger.info(f"Strategy: {searcher.strategy.name}")
        for result in Harness(searcher, logger).run(plaintexts):
            print(result.format())
            all_passed = all_passed and result.passed
    return 0 if all_passed else 1


def run_benchmark(searcher: HashSearcher, plaintexts: List[str], repeat: int) -> int:
    """Print a timing table for every strategy"""
    rows = Harness(searcher).benchmark(plaintexts, repeat=repeat)
    print(f"{'strategy':<10} {'plaintext':<10} {'candidates':>10} {'best (ms)':>10} {'mean (ms)':>10}")
    for row in rows:
        print(
            f"{row['strategy']:<10} {row['plaintext']:<10} {row['candidates_tried']:>10,} "
            f"{row['best'] * 1000:>10.3f} {row['mean'] * 1000:>10.3f}"
        )
    return 0 if all(row["found"] == row["plaintext"] for row in rows) else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the brute-force CLI

    Returns:
        Exit code (0 when every plaintext was recovered, non-zero otherwise)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.target_hash and args.plaintexts:
        parser.error("--target-hash searches for a digest; do not pass plaintexts as well")
    if args.target_hash and args.benchmark is not None:
        parser.error("--target-hash and --benchmark cannot be combined")

    try:
        config = Config(args.config)
        apply_args(args, config)
        logger = setup_logger(args, config).get_logger()

        if args.save_config:
            config.save()
            logger.info(f"Configuration saved to {config.config_path}")

        start_time = time.time()
        plaintexts = list(config.get("plaintexts", []))

        if args.benchmark is not None:
            exit_code = run_benchmark(build_searcher(config, logger), plaintexts, args.benchmark)
        else:
            names = list(STRATEGIES) if args.all_strategies else [config.get("strategy", "recursive")]
            searchers = [build_searcher(config, logger, name) for name in names]
            if args.target_hash:
                exit_code = run_target(searchers, args.target_hash, logger)
            else:
                exit_code = run_plaintexts(searchers, plaintexts, logger)

        logger.debug(f"Total time: {time.time() - start_time:.2f} seconds")
        return exit_code

    except HashBruteforceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
